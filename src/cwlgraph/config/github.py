"""GitHub configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds GitHub API access settings."""

    resilience: ResilienceConfig
    token: str | None = None


def _default_headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": "cwlgraph",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def get_github_config(
    *,
    require_token: bool = False,
    cache: CacheConfig | None = None,
) -> GitHubConfig:
    if require_token:
        token: str | None = require_env_vars(("GITHUB_TOKEN",))["GITHUB_TOKEN"]
    else:
        token = optional_env_var("GITHUB_TOKEN")
    base_url = os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL

    resilience = ResilienceConfig(
        name="github",
        base_url=base_url.rstrip("/"),
        timeout_seconds=GITHUB_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        cache=cache or CacheConfig(backend="sqlite"),
        default_headers=_default_headers(token),
    )
    return GitHubConfig(resilience=resilience, token=token)
