"""Verify package imports work correctly."""


def test_import_xmlminus() -> None:
    """Test that xmlminus can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import xmlminus

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert xmlminus.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from xmlminus import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    import xmlminus

    for name in xmlminus.__all__:
        assert hasattr(xmlminus, name), name
