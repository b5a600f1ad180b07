"""PRIMKIT test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single helper module.

General guidance
- Every helper is pure, so tests need no fakes: call the function, compare.
- Property-based tests live beside the unit tests and use @pytest.mark.property.
- Markers: unit, property (declared in pyproject.toml).
"""
