"""Smoke test to verify the project is set up correctly."""

from string_sandbox import MapSandbox, __doc__


def test_package_is_importable() -> None:
    """Verify that string_sandbox can be imported."""
    assert __doc__ is not None


def test_public_sandbox() -> None:
    """The package root should re-export the sandbox."""
    assert len(MapSandbox()) == 0
