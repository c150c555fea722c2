"""Unit tests for interactor.service_layer."""
