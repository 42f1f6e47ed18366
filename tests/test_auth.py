"""Tests for the API key gate."""

import logging

import pytest
from unittest.mock import MagicMock

from github_assistant.auth import authorize
from github_assistant.config import Settings

PROTECTED = [
    ("get", "/api/list"),
    ("post", "/api/delete"),
    ("post", "/api/create"),
    ("post", "/api/claude"),
]


def _request(headers):
    request = MagicMock()
    request.headers = headers
    return request


class TestAuthorize:
    """Tests for authorize()."""

    def test_matching_key(self):
        assert authorize(_request({"x-api-key": "k"}), Settings(api_key="k")) is True

    def test_wrong_key(self):
        assert authorize(_request({"x-api-key": "nope"}), Settings(api_key="k")) is False

    def test_missing_header(self):
        assert authorize(_request({}), Settings(api_key="k")) is False

    def test_no_key_configured(self):
        """Without a configured key nothing is authorized."""
        assert authorize(_request({"x-api-key": "k"}), Settings()) is False
        assert authorize(_request({}), Settings()) is False


class TestProtectedRoutes:
    """Every protected route rejects bad keys before calling GitHub."""

    @pytest.mark.parametrize("method,path", PROTECTED)
    def test_missing_key(self, client, repo, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized - Invalid API key"}
        assert repo.method_calls == []

    @pytest.mark.parametrize("method,path", PROTECTED)
    def test_wrong_key(self, client, repo, method, path):
        kwargs = {"headers": {"x-api-key": "wrong"}}
        if method == "post":
            kwargs["json"] = {"action": "delete", "path": "a.txt"}
        response = getattr(client, method)(path, **kwargs)
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized - Invalid API key"}
        assert repo.method_calls == []


    def test_rejection_is_logged(self, client, caplog):
        """Rejected keys are logged with lazy arguments, not a pre-built string."""
        with caplog.at_level(logging.WARNING, logger="github_assistant.auth"):
            client.get("/api/list", headers={"x-api-key": "wrong"})
        record = next(r for r in caplog.records if r.name == "github_assistant.auth")
        assert record.msg == "Rejected %s %s from %s: bad API key"
        assert record.args[:2] == ("GET", "/api/list")


class TestHealth:
    """The root endpoint needs no key."""

    def test_without_key(self, client):
        response = client.get("/api")
        assert response.status_code == 200
        assert response.json() == {"message": "GitHub Assistant API is running!"}

    def test_with_key(self, client, auth_headers):
        response = client.get("/api", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "GitHub Assistant API is running!"}

    def test_cors_headers(self, client):
        """Cross-origin callers are allowed."""
        response = client.get("/api", headers={"Origin": "https://claude.ai"})
        assert response.headers.get("access-control-allow-origin") == "*"
