"""Root pytest configuration.

Provides environment defaults so the settings can load without a .env
file, and resets cached settings between tests.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, pure functions)
    │   ├── shopfront_auth/
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   └── presentation/
    └── integration/       # SQLite-backed persistence and API tests
        ├── persistence/
        └── api/
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional local test overrides; real values always win
if (PROJECT_ROOT / "config" / ".env.test").exists():
    load_dotenv(PROJECT_ROOT / "config" / ".env.test")

# Must be set before the API module is imported (it builds the app on import)
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("BCRYPT_USER_ROUNDS", "4")
os.environ.setdefault("BCRYPT_SUPERUSER_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from shopfront_config.settings import clear_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Each test sees settings derived from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
