"""Unit tests for interactor.adapters."""
