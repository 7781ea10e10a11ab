"""
Smoke test: verify dfasim package is importable and has correct version.
"""

import dfasim


def test_version():
    """Test that dfasim package exports __version__ correctly."""
    assert dfasim.__version__ == "0.1.0"


def test_public_api():
    """Core entry points are re-exported at package level."""
    for name in ("AutomatonModel", "build", "run", "RawDescription", "ConstructionError"):
        assert hasattr(dfasim, name), name
