"""Raw document nodes as produced by the YAML/JSON parser.

Documents arrive as plain Python trees (``dict``/``list``/scalars). The same semantic
list may be written as a sequence or as a mapping, so every normalization boundary
classifies a node once with ``node_kind`` and dispatches on the result.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from enum import StrEnum
from typing import Any

RawNode = Any
RawMapping = Mapping[str, Any]
DocumentId = str


class NodeKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    TEXT = "text"
    SCALAR = "scalar"
    NULL = "null"


def node_kind(node: RawNode) -> NodeKind:
    if node is None:
        return NodeKind.NULL
    if isinstance(node, Mapping):
        return NodeKind.MAPPING
    if isinstance(node, str):
        return NodeKind.TEXT
    if isinstance(node, list | tuple):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def as_text(node: RawNode) -> str:
    """Render a node the way a JSON tree reports its text value.

    Containers have no text of their own and render empty.
    """

    match node_kind(node):
        case NodeKind.TEXT:
            return node
        case NodeKind.NULL:
            return "null"
        case NodeKind.MAPPING | NodeKind.SEQUENCE:
            return ""
        case _:
            if isinstance(node, bool):
                return "true" if node else "false"
            if isinstance(node, date):
                return node.isoformat()
            return str(node)


def get_field(node: RawNode, name: str) -> RawNode:
    """Return ``node[name]`` or ``None`` when the node is not a mapping or lacks it."""

    if isinstance(node, Mapping):
        return node.get(name)
    return None


def has_field(node: RawNode, name: str) -> bool:
    return isinstance(node, Mapping) and name in node
