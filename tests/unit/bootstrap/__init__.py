"""Unit tests for interactor.bootstrap."""
