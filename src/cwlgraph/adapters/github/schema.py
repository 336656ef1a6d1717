"""Pydantic models describing the GitHub REST API payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, RootModel

ContentType = Literal["file", "dir", "symlink", "submodule"]


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ContentEntry(GitHubBaseModel):
    name: str
    path: str
    type: ContentType
    sha: str | None = None
    size: int | None = None
    download_url: str | None = None


class DirectoryListing(RootModel[list[ContentEntry]]):
    pass


class CommitPayload(GitHubBaseModel):
    sha: str


class ErrorResponse(GitHubBaseModel):
    message: str
    documentation_url: str | None = None
