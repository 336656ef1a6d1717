from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from cwlgraph.adapters.yaml_parser import parse_document
from cwlgraph.domain.ports.retrieval import EntryKind, RepositoryEntry

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from cwlgraph.domain.nodes import RawNode
    from cwlgraph.domain.ports.retrieval import RepositoryLocation

DATA_DIR = Path(__file__).resolve().parent / "data"


class InMemorySource:
    """Retrieval collaborator serving files from a ``{path: content}`` mapping."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files
        self.listed: list[str] = []
        self.read: list[tuple[str, str | None]] = []

    def list_directory(self, location: RepositoryLocation) -> Sequence[RepositoryEntry]:
        self.listed.append(location.path)
        prefix = f"{location.path}/" if location.path else ""
        entries: dict[str, RepositoryEntry] = {}
        for path in self.files:
            if not path.startswith(prefix):
                continue
            head, _, rest = path[len(prefix) :].partition("/")
            child = prefix + head
            kind = EntryKind.DIRECTORY if rest else EntryKind.FILE
            entries.setdefault(child, RepositoryEntry(name=head, kind=kind, path=child))
        return list(entries.values())

    def read_file(self, location: RepositoryLocation, *, revision: str | None = None) -> str:
        self.read.append((location.path, revision))
        return self.files[location.path]


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def repository_dir() -> Path:
    return DATA_DIR / "repository"


@pytest.fixture
def load_document() -> Callable[[str], RawNode]:
    def load(relative_path: str) -> RawNode:
        path = DATA_DIR / relative_path
        return parse_document(path.read_text(encoding="utf-8"), filename=path.name)

    return load


@pytest.fixture
def in_memory_source() -> Callable[[dict[str, str]], InMemorySource]:
    return InMemorySource
