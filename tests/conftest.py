"""Shared fixtures - Discord user objects captured from /users/@me."""

from pathlib import Path

import pytest
import structlog


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture_body(name: str) -> str:
    """Load a raw response body fixture."""
    path = FIXTURES_DIR / f"{name}.json"
    if not path.exists():
        pytest.skip(f"Fixture not found: {path}")
    return path.read_text(encoding="utf-8")


@pytest.fixture
def alice_body() -> str:
    return load_fixture_body("alice")


@pytest.fixture
def legacy_body() -> str:
    return load_fixture_body("legacy")


@pytest.fixture
def migrated_body() -> str:
    return load_fixture_body("migrated")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any configure_logging() call made by a test."""
    yield
    structlog.reset_defaults()
