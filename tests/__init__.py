"""INTERACTOR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows tested end-to-end at the CLI boundary.
- fixtures/     : Shared fixtures and sample services (no tests here).

General guidance
- Keep unit fast and deterministic; prefer small fake steps/validators over mocks.
- Functional asserts user-observable results (output, exit codes), not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property
"""
