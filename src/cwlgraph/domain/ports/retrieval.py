"""Ports for retrieving workflow files from a repository host."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


class EntryKind(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class RepositoryLocation:
    """A path inside a hosted repository."""

    owner: str
    repo: str
    branch: str | None = None
    path: str = ""

    def at(self, path: str) -> RepositoryLocation:
        return replace(self, path=path)


@dataclass(frozen=True, slots=True)
class RepositoryEntry:
    """One item of a directory listing."""

    name: str
    kind: EntryKind
    path: str

    @property
    def extension(self) -> str | None:
        _, dot, extension = self.name.rpartition(".")
        return extension if dot else None


@runtime_checkable
class RepositorySource(Protocol):
    """Retrieval collaborator consumed by document ingestion."""

    def list_directory(self, location: RepositoryLocation) -> Sequence[RepositoryEntry]:
        ...

    def read_file(self, location: RepositoryLocation, *, revision: str | None = None) -> str:
        ...


__all__ = ["EntryKind", "RepositoryEntry", "RepositoryLocation", "RepositorySource"]
