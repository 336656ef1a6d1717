"""Split parsed files into independently addressable documents."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from .extractors import extract_id
from .nodes import NodeKind, get_field, has_field, node_kind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .nodes import DocumentId, RawNode

log = getLogger(__name__)

DOC_GRAPH: Final = "$graph"


def flatten_document(node: RawNode, filename: str) -> Iterator[tuple[DocumentId, RawNode]]:
    """Yield ``(document_id, node)`` pairs for one parsed file.

    A packed file contributes each ``$graph`` entry under its own id and never the
    bundle itself. Any other file is keyed by its filename. Bundle entries without an
    id cannot be addressed and are skipped with a warning.
    """

    if not has_field(node, DOC_GRAPH):
        yield filename, node
        return

    graph = get_field(node, DOC_GRAPH)
    if node_kind(graph) is not NodeKind.SEQUENCE:
        log.warning("Ignoring non-list %s in %s", DOC_GRAPH, filename)
        return

    for position, entry in enumerate(graph):
        document_id = extract_id(entry)
        if document_id is None:
            log.warning("Dropping %s entry %d in %s: no id", DOC_GRAPH, position, filename)
            continue
        yield document_id, entry
