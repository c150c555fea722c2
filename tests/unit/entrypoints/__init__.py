"""Unit tests for interactor.entrypoints."""
