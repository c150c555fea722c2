"""Adapters (infrastructure) for INTERACTOR.

Concrete implementations of the interfaces the service layer consumes, such
as validators backed by a validation library.

Dependency rule: may import `interactor.domain` and `interactor.interfaces`;
neither of those may import this package.
"""
