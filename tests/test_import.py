"""Verify package imports work correctly."""


def test_import_listo() -> None:
    """Test that listo can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import listo

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert listo.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from listo import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Everything in __all__ resolves to an attribute."""
    import listo

    for name in listo.__all__:
        assert hasattr(listo, name), name
