"""Strategies for picking the entry workflow out of a document collection."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final

from .nodes import DocumentId, NodeKind, RawNode, as_text, get_field, node_kind
from .step_normalizer import STEPS, run_reference

CLASS: Final = "class"
WORKFLOW: Final = "Workflow"

EntryStrategy = Callable[[Mapping[DocumentId, RawNode]], DocumentId | None]


def is_workflow(document: RawNode) -> bool:
    return as_text(get_field(document, CLASS)) == WORKFLOW


def first_workflow(documents: Mapping[DocumentId, RawNode]) -> DocumentId | None:
    """The first Workflow-class document in insertion order."""

    for document_id, document in documents.items():
        if is_workflow(document):
            return document_id
    return None


def _reference_names(reference: str) -> set[str]:
    # "#main", "tools/sort.cwl" and "tools/sort.cwl#main" each name a document
    path, _, fragment = reference.partition("#")
    names = {path.rsplit("/", 1)[-1]} if path else set()
    if fragment:
        names.add(fragment)
    return names


def _run_targets(document: RawNode) -> set[str]:
    steps = get_field(document, STEPS)
    match node_kind(steps):
        case NodeKind.SEQUENCE:
            entries = list(steps)
        case NodeKind.MAPPING:
            entries = list(steps.values())
        case _:
            return set()

    targets: set[str] = set()
    for step in entries:
        reference = run_reference(step)
        if reference is not None:
            targets |= _reference_names(reference)
    return targets


def unreferenced_workflow(documents: Mapping[DocumentId, RawNode]) -> DocumentId | None:
    """The first Workflow-class document that no other document runs as a step.

    Falls back to ``first_workflow`` when every workflow is referenced.
    """

    referenced: set[str] = set()
    for document in documents.values():
        referenced |= _run_targets(document)

    for document_id, document in documents.items():
        if is_workflow(document) and document_id not in referenced:
            return document_id
    return first_workflow(documents)


ENTRY_STRATEGIES: Final[dict[str, EntryStrategy]] = {
    "first": first_workflow,
    "unreferenced": unreferenced_workflow,
}
