"""Support namespace for cross-cutting, dependency-light helpers.

Small, stateless helpers that would otherwise clutter feature packages. No
business rules and no wiring live here.

Import direction:
- May be imported by any INTERACTOR package.
- Must not import from application packages.

Nothing is re-exported at the package level. Import helpers from their
defining modules.
"""
