"""Command-line entrypoint for INTERACTOR."""
