"""Unit tests for interactor.domain."""
