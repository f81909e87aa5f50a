"""Verify package imports work correctly."""


def test_import_patlex() -> None:
    """Test that patlex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import patlex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert patlex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from patlex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    import patlex

    for name in patlex.__all__:
        assert hasattr(patlex, name), name


def test_logger_namespace() -> None:
    from patlex.utils import get_logger

    assert get_logger("builder").name == "patlex.builder"
    assert get_logger("patlex.stream").name == "patlex.stream"
    assert get_logger("patlex").name == "patlex"
