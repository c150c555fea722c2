"""Global pytest fixtures for INTERACTOR."""

pytest_plugins = [
    "tests.fixtures.steps",
]
