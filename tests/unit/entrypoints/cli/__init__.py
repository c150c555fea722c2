"""Unit tests for interactor.entrypoints.cli."""
