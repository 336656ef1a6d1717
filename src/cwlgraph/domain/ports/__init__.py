"""Domain port definitions for adapters."""

from __future__ import annotations

from .parsing import DocumentParser
from .retrieval import EntryKind, RepositoryEntry, RepositoryLocation, RepositorySource

__all__ = [
    "DocumentParser",
    "EntryKind",
    "RepositoryEntry",
    "RepositoryLocation",
    "RepositorySource",
]
