"""
Core pytest configuration for the entire test suite.

Provides:
- marker registration (one marker per testing category, plus `browser` / `zap`)
- skipping of live-tool tests unless enabled in settings
- application logging for the session
- a throwaway in-memory database per test

Domain-specific fixtures live in:
- tests/test_fixtures/user_fixtures.py
- tests/test_fixtures/app_fixtures.py
- tests/test_fixtures/zap_fixtures.py
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import logging
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Keep this block above the project imports so collection is not noisy.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "urllib3",
    "selenium",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from pytest import FixtureRequest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from qa_types.catalogue import register_markers
from qa_types.config.settings import Settings
from qa_types.core.logging.builder import setup_logging
from qa_types.database.session import build_engine, build_sessionmaker, create_schema

logger = logging.getLogger(__name__)


def make_test_settings(**overrides) -> Settings:
    """
    Settings isolated from the developer's `.env`: in-memory database, text logs to stderr.
    Environment variables still apply, so RUN_BROWSER_TESTS=true enables live browser tests.
    """
    values = {
        "ENV": "testing",
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "LOG_FORMAT": "text",
        "LOG_TO_STDOUT": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# ------------------------------------------------------------------------------------------------
# Markers
# ------------------------------------------------------------------------------------------------

def pytest_configure(config):
    register_markers(config)


def pytest_collection_modifyitems(config, items):
    settings = make_test_settings()
    enabled = {
        "browser": settings.RUN_BROWSER_TESTS,
        "zap": settings.RUN_ZAP_TESTS,
    }
    for item in items:
        for marker, on in enabled.items():
            if not on and marker in item.keywords:
                item.add_marker(pytest.mark.skip(reason=f"{marker} tests disabled (set RUN_{marker.upper()}_TESTS=true)"))


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report as `item.rep_setup` / `rep_call` / `rep_teardown` for fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# ------------------------------------------------------------------------------------------------
# Settings & logging
# ------------------------------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    return make_test_settings()


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install application logging for the entire test session.

    dictConfig replaces the root handlers, so pytest's capture handler is re-attached
    (best-effort) to keep caplog.records populated.
    """
    setup_logging(make_test_settings())

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------

@pytest.fixture
async def async_engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """
    Fresh in-memory SQLite database per test; the schema is created up front and the
    whole database disappears with the engine.
    """
    engine = build_engine(settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    maker = build_sessionmaker(async_engine)
    async with maker() as session:
        yield session
        await session.rollback()


# Shared fixtures
from .test_fixtures.user_fixtures import (  # noqa: E402
    fake,
    user_repository,
    seeded_session,
    random_names,
)
from .test_fixtures.app_fixtures import (  # noqa: E402
    login_settings,
    login_client,
)
from .test_fixtures.zap_fixtures import (  # noqa: E402
    zap_client,
    clean_zap_client,
)
