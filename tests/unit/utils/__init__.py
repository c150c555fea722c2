"""Unit tests for interactor.utils."""
