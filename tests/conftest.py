"""Shared test fixtures."""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from github_assistant.config import Settings
from github_assistant.github_ops import GitHubRepoClient
from github_assistant.main import create_app

API_KEY = "test-key"


@pytest.fixture
def settings():
    """Settings for a fake repository."""
    return Settings(
        github_token="test-token",
        repo_owner="testowner",
        repo_name="testrepo",
        api_key=API_KEY,
    )


@pytest.fixture
def repo():
    """Stand-in for the GitHub adapter."""
    return MagicMock(spec=GitHubRepoClient)


@pytest.fixture
def client(settings, repo):
    """Test client for an app wired to the fake adapter."""
    return TestClient(create_app(settings, repo))


@pytest.fixture
def auth_headers():
    return {"x-api-key": API_KEY}
