"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubClient
from .schema import CommitPayload, ContentEntry, DirectoryListing
from .translator import translate_entry
from .urls import is_github_url, parse_github_url

__all__ = [
    "CommitPayload",
    "ContentEntry",
    "DirectoryListing",
    "GitHubAPIError",
    "GitHubClient",
    "is_github_url",
    "parse_github_url",
    "translate_entry",
]
