# github_assistant/github_ops.py
import base64
import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import requests

from .config import Settings
from .errors import RemoteError

logger = logging.getLogger(__name__)

Content = Union[dict, list]


class GitHubError(RemoteError):
    """Non-2xx answer from the GitHub API, or no answer at all."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ContentNotFoundError(GitHubError):
    """The contents API answered 404 for a path."""


def encode_content(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def _error_message(response: requests.Response) -> str:
    """Build the same text GitHub clients show: '<message> - <documentation_url>'."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict) or not data.get("message"):
        return response.reason or f"HTTP {response.status_code}"
    message = data["message"]
    if data.get("documentation_url"):
        message = f"{message} - {data['documentation_url']}"
    return message


class GitHubRepoClient:
    """Contents API of the one repository named in the settings.

    Every call goes straight to GitHub: no retries, no caching.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.owner = settings.repo_owner
        self.repo = settings.repo_name
        self.api_url = settings.github_api_url
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/vnd.github.v3+json"
        self.session.headers["User-Agent"] = "github-assistant"
        if settings.github_token:
            self.session.headers["Authorization"] = f"token {settings.github_token}"
        else:
            logger.warning("GITHUB_TOKEN is not set; GitHub calls will be unauthenticated")

    def _url(self, path: str) -> str:
        # "#", "?", "%" and spaces in file names must not end the path early.
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{quote(path, safe='/')}"

    def _call(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self._url(path)
        logger.debug("GitHub %s %s", method, url)
        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise GitHubError(str(e)) from e
        logger.debug("GitHub %s %s -> %d", method, url, r.status_code)

        if r.status_code == 404:
            raise ContentNotFoundError(_error_message(r), status=404)
        if not r.ok:
            raise GitHubError(_error_message(r), status=r.status_code)
        return r.json()

    def get_content(self, path: str = "") -> Content:
        """Entry for a file, or a list of entries for a directory."""
        return self._call("GET", path)

    def delete_file(self, path: str, sha: str, message: str) -> dict:
        return self._call("DELETE", path, json={"message": message, "sha": sha})

    def create_or_update_file_contents(
        self, path: str, content: str, message: str, sha: Optional[str] = None
    ) -> dict:
        """Write base64 ``content`` to ``path``.

        Without ``sha`` the file is created; with the current sha it is updated.
        """
        data = {"message": message, "content": content}
        if sha:
            data["sha"] = sha
        return self._call("PUT", path, json=data)
