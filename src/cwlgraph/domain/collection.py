"""Document collections and entry workflow resolution."""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from .entry_strategies import first_workflow
from .extractors import extract_doc, extract_label
from .flattening import flatten_document
from .model import Workflow
from .port_normalizer import get_inputs, get_outputs
from .step_normalizer import get_steps

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .entry_strategies import EntryStrategy
    from .nodes import DocumentId, RawNode

log = getLogger(__name__)

_UNRESOLVED = object()


class DocumentCollection:
    """Every parsed document of a repository, keyed by document id.

    The collection is read-only. The entry workflow is resolved on first use and
    remembered; workflows themselves are rebuilt on every ``get_workflow`` call.
    """

    def __init__(
        self,
        documents: Mapping[DocumentId, RawNode],
        *,
        entry_strategy: EntryStrategy = first_workflow,
    ) -> None:
        self._documents: Mapping[DocumentId, RawNode] = MappingProxyType(dict(documents))
        self._entry_strategy = entry_strategy
        self._entry_workflow_id: DocumentId | None | object = _UNRESOLVED

    @property
    def documents(self) -> Mapping[DocumentId, RawNode]:
        return self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[DocumentId]:
        return iter(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def get(self, document_id: DocumentId) -> RawNode:
        return self._documents.get(document_id)

    def find_entry_workflow(self) -> DocumentId | None:
        if self._entry_workflow_id is _UNRESOLVED:
            self._entry_workflow_id = self._entry_strategy(self._documents)
            log.debug("Entry workflow resolved to %s", self._entry_workflow_id)
        return self._entry_workflow_id  # type: ignore[return-value]

    def get_workflow(self) -> Workflow | None:
        entry_id = self.find_entry_workflow()
        if entry_id is None:
            return None

        document = self._documents[entry_id]
        label = extract_label(document)
        return Workflow(
            label=entry_id if label is None else label,
            document_id=entry_id,
            doc=extract_doc(document),
            inputs=get_inputs(document),
            outputs=get_outputs(document),
            steps=get_steps(document),
        )


class CollectionBuilder:
    """Accumulates flattened documents before freezing them into a collection."""

    def __init__(self) -> None:
        self._documents: dict[DocumentId, RawNode] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def add_document(self, node: RawNode, filename: str) -> list[DocumentId]:
        """Flatten one parsed file into the collection and return the ids it added."""

        added: list[DocumentId] = []
        for document_id, document in flatten_document(node, filename):
            if document_id in self._documents:
                log.warning("Document id %s from %s replaces an earlier one", document_id, filename)
            self._documents[document_id] = document
            added.append(document_id)
        return added

    def build(self, *, entry_strategy: EntryStrategy = first_workflow) -> DocumentCollection:
        return DocumentCollection(self._documents, entry_strategy=entry_strategy)
