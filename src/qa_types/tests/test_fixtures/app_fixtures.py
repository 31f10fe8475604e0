"""Fixtures for the login demo application."""

import pytest
from pydantic import SecretStr
from fastapi.testclient import TestClient

from qa_types.config.settings import Settings
from qa_types.examples.functional.login_app import create_app


@pytest.fixture
def login_settings(settings: Settings) -> Settings:
    """Test settings with known login credentials."""
    return settings.model_copy(update={
        "LOGIN_USERNAME": "tomsmith",
        "LOGIN_PASSWORD": SecretStr("SuperSecretPassword!"),
    })


@pytest.fixture
def login_client(login_settings: Settings):
    """
    TestClient for the login app. Used as a context manager so the lifespan runs:
    schema creation and seeding of user 1 happen before the first request.
    """
    with TestClient(create_app(login_settings)) as client:
        yield client
