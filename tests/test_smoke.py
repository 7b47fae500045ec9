"""Smoke test to verify the project is set up correctly."""

import dotconf
from dotconf import __doc__


def test_package_is_importable() -> None:
    """Verify that dotconf can be imported."""
    assert __doc__ is not None


def test_public_names_resolve() -> None:
    """Every name in __all__ should exist on the package."""
    for name in dotconf.__all__:
        assert hasattr(dotconf, name), name
