"""Workflow document normalization.

Raw CWL documents (draft-2, draft-3 and v1.0) are flattened into a
``DocumentCollection``; the collection resolves its entry workflow and normalizes it
into ``Workflow``/``Step``/``Port`` values.
"""

from __future__ import annotations

from .collection import CollectionBuilder, DocumentCollection
from .entry_strategies import ENTRY_STRATEGIES, EntryStrategy, first_workflow, unreferenced_workflow
from .ingestion import CWL_EXTENSION, collect_documents
from .model import Port, Step, Workflow

__all__ = [
    "CWL_EXTENSION",
    "ENTRY_STRATEGIES",
    "CollectionBuilder",
    "DocumentCollection",
    "EntryStrategy",
    "Port",
    "Step",
    "Workflow",
    "collect_documents",
    "first_workflow",
    "unreferenced_workflow",
]
