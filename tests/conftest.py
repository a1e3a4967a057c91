import pytest

from mapnav.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep environment overrides and the cached config local to a test."""
    for var in ("MAPNAV_GRAPH_MAX_LOCATIONS", "MAPNAV_LOG_LEVEL", "MAPNAV_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
