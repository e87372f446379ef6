"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat client or config boilerplate.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_engine_config, reset_engine_config
from api.main import app
from core.config import DEFAULT_ENGINE_CONFIG
from core.music_theory.harmony import resolve_progression

# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """FastAPI ``TestClient`` pinned to the default engine config.

    The environment is never consulted, so a developer's ``.env`` cannot
    change the pitch window under test.
    """
    app.dependency_overrides[get_engine_config] = lambda: DEFAULT_ENGINE_CONFIG
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def clean_engine_config() -> Iterator[None]:
    """Reset the cached engine config before and after a test."""
    reset_engine_config()
    yield
    reset_engine_config()


# ---------------------------------------------------------------------------
# Progression fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def c_major_i_iv_v7():
    """C major I – IV – V7 chords."""
    return resolve_progression("C", "major", "I-IV-V7")
