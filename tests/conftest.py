"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks for repository ports)
    │   ├── domain/
    │   ├── application/
    │   ├── presentation/
    │   ├── todolist_auth/
    │   └── todolist_config/
    └── integration/       # SQLAlchemy repositories and HTTP API on SQLite
        ├── persistence/
        └── api/

Environment Variables:
    RUN_SLOW=1    Run @pytest.mark.slow tests (full bcrypt work factor)

Pytest Options:
    --run-slow    Run slow tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from todolist_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.test for tests when present (never the dev/prod files)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    run_slow = config.getoption("--run-slow") or os.environ.get(
        "RUN_SLOW",
        "",
    ).lower() in ("1", "true", "yes")

    if run_slow:
        return

    skip_slow = pytest.mark.skip(
        reason="Slow test - run with --run-slow or RUN_SLOW=1",
    )
    for item in items:
        if "slow" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Never let one test's settings leak into another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
