"""Filesystem retrieval adapter.

Serves a checked-out repository (or any directory) through the same port as the
GitHub adapter. Owner, repository and revision are ignored; locations resolve
relative to ``root``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from cwlgraph.domain.ports.retrieval import (
    EntryKind,
    RepositoryEntry,
    RepositoryLocation,
    RepositorySource,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


def local_location(path: str = "") -> RepositoryLocation:
    return RepositoryLocation(owner="local", repo="local", path=path)


@dataclass(frozen=True, slots=True)
class LocalDirectorySource:
    root: Path

    def _resolve(self, location: RepositoryLocation) -> Path:
        return self.root / location.path if location.path else self.root

    def list_directory(self, location: RepositoryLocation) -> Sequence[RepositoryEntry]:
        directory = self._resolve(location)
        entries: list[RepositoryEntry] = []
        for child in sorted(directory.iterdir()):
            if child.is_dir():
                kind = EntryKind.DIRECTORY
            elif child.is_file():
                kind = EntryKind.FILE
            else:
                kind = EntryKind.OTHER
            relative = child.relative_to(self.root).as_posix()
            entries.append(RepositoryEntry(name=child.name, kind=kind, path=relative))
        return entries

    def read_file(self, location: RepositoryLocation, *, revision: str | None = None) -> str:
        del revision
        return self._resolve(location).read_text(encoding="utf-8")


if TYPE_CHECKING:
    _source_check: RepositorySource = LocalDirectorySource(Path())
