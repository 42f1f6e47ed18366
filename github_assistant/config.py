# github_assistant/config.py
import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_PORT = 3000
DEFAULT_GITHUB_API_URL = "https://api.github.com"


class Settings(BaseModel):
    """Process-wide settings, read once at startup."""

    model_config = ConfigDict(frozen=True)

    github_token: Optional[str] = None
    repo_owner: Optional[str] = None
    repo_name: Optional[str] = None
    api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    github_api_url: str = DEFAULT_GITHUB_API_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        # Missing token/owner/repo are left as None; GitHub reports them at call time.
        env = os.environ if environ is None else environ
        return cls(
            github_token=env.get("GITHUB_TOKEN") or None,
            repo_owner=env.get("REPO_OWNER") or None,
            repo_name=env.get("REPO_NAME") or None,
            api_key=env.get("API_KEY") or None,
            port=int(env.get("PORT") or DEFAULT_PORT),
            github_api_url=(env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
