"""Shared fixtures and sample services for the INTERACTOR test suite."""
