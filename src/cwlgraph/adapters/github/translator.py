"""Translate GitHub payloads into retrieval port values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cwlgraph.domain.ports.retrieval import EntryKind, RepositoryEntry

if TYPE_CHECKING:
    from .schema import ContentEntry, ContentType

_ENTRY_KINDS: dict[ContentType, EntryKind] = {
    "file": EntryKind.FILE,
    "dir": EntryKind.DIRECTORY,
}


def translate_entry(entry: ContentEntry) -> RepositoryEntry:
    return RepositoryEntry(
        name=entry.name,
        kind=_ENTRY_KINDS.get(entry.type, EntryKind.OTHER),
        path=entry.path,
    )
