"""Root pytest configuration.

Test Structure:
    tests/
    ├── invest_identity/       # Identity domain tests
    │   └── unit/              # Fast, isolated tests
    └── invest_config/         # Settings tests

Environment:
    config/.env.test is loaded before the tests run when present.

Pytest Options:
    --run-slow    Run tests hashing with the production work factor
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from invest_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

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
def fresh_settings():
    """Make every test load settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
