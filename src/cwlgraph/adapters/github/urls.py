"""Parse GitHub web URLs into repository locations."""

from __future__ import annotations

import re

from cwlgraph.domain.ports.retrieval import RepositoryLocation

_GITHUB_URL = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/"
    r"(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?"
    r"(?:/(?:tree|blob)/(?P<branch>[^/]+)(?:/(?P<path>.*?))?)?/?$"
)


def parse_github_url(url: str) -> RepositoryLocation:
    """Return the location named by a ``github.com/<owner>/<repo>[/tree/<branch>/<path>]`` URL."""

    match = _GITHUB_URL.match(url.strip())
    if match is None:
        raise ValueError(f"Not a GitHub repository URL: {url}")
    return RepositoryLocation(
        owner=match["owner"],
        repo=match["repo"],
        branch=match["branch"],
        path=match["path"] or "",
    )


def is_github_url(value: str) -> bool:
    return _GITHUB_URL.match(value.strip()) is not None
