"""Field extractors.

Each extractor pulls one semantic value out of a single raw node and absorbs the
differences between schema generations. A missing node or field yields ``None``;
no extractor raises on irregular input.
"""

from __future__ import annotations

from typing import Final

from .nodes import NodeKind, RawNode, as_text, get_field, has_field, node_kind

ID: Final = "id"
LABEL: Final = "label"
DOC: Final = "doc"
DESCRIPTION: Final = "description"
DEFAULT: Final = "default"
LOCATION: Final = "location"
SOURCE: Final = "source"
OUTPUT_SOURCE: Final = "outputSource"
TYPE: Final = "type"
ARRAY: Final = "array"
ARRAY_ITEMS: Final = "items"
NULL_TYPE: Final = "null"
OPTIONAL_SUFFIX: Final = " (Optional)"
TYPE_SEPARATOR: Final = ", "


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith("#") else text


def extract_id(node: RawNode) -> str | None:
    if not has_field(node, ID):
        return None
    identifier = _strip_hash(as_text(get_field(node, ID)))
    return identifier or None


def extract_label(node: RawNode) -> str | None:
    if not has_field(node, LABEL):
        return None
    return as_text(get_field(node, LABEL))


def extract_doc(node: RawNode) -> str | None:
    # draft-2 documents use ``description``
    if has_field(node, DOC):
        return as_text(get_field(node, DOC))
    if has_field(node, DESCRIPTION):
        return as_text(get_field(node, DESCRIPTION))
    return None


def extract_default(node: RawNode) -> str | None:
    """Render a default value.

    File and directory defaults render as their ``location``; everything else is
    wrapped in escaped quotes so it reads as a literal in a graph label.
    """

    if not has_field(node, DEFAULT):
        return None
    default = get_field(node, DEFAULT)
    if has_field(default, LOCATION):
        return as_text(get_field(default, LOCATION))
    return '\\"' + as_text(default) + '\\"'


def step_id_from_source(source: str) -> str:
    """Reduce ``stepId/portId`` (or draft-2 ``stepId.portId``) to the step id."""

    source = _strip_hash(source)
    if "/" in source:
        return source.split("/", 1)[0]
    if "." in source:
        return source.split(".", 1)[0]
    return source


def extract_source(node: RawNode) -> list[str] | None:
    """Return the step ids referenced by ``outputSource`` or ``source``.

    An empty list means the node exists but is unbound; ``None`` means there was no
    node at all.
    """

    if node is None:
        return None

    if has_field(node, OUTPUT_SOURCE):
        source_node = get_field(node, OUTPUT_SOURCE)
    elif has_field(node, SOURCE):
        source_node = get_field(node, SOURCE)
    else:
        return []

    match node_kind(source_node):
        case NodeKind.TEXT:
            return [step_id_from_source(source_node)]
        case NodeKind.SEQUENCE:
            return [step_id_from_source(as_text(source)) for source in source_node]
        case _:
            return []


def _render_array_type(type_node: RawNode) -> str:
    items = extract_types(get_field(type_node, ARRAY_ITEMS))
    return f"{items or ''}[]"


def extract_types(type_node: RawNode) -> str | None:
    """Render a type declaration for display.

    ``[string, "null"]`` renders as ``string (Optional)`` and
    ``{type: array, items: File}`` as ``File[]``.
    """

    match node_kind(type_node):
        case NodeKind.TEXT:
            return type_node
        case NodeKind.SEQUENCE:
            return _render_type_union(type_node)
        case NodeKind.MAPPING if has_field(type_node, ARRAY_ITEMS):
            return _render_array_type(type_node)
        case _:
            return None


def _render_type_union(types: list[RawNode]) -> str:
    parts: list[str] = []
    optional = False
    for type_entry in types:
        match node_kind(type_entry):
            case NodeKind.TEXT if type_entry == NULL_TYPE:
                optional = True
            case NodeKind.TEXT:
                parts.append(type_entry)
            case NodeKind.MAPPING if as_text(get_field(type_entry, TYPE)) == ARRAY:
                parts.append(_render_array_type(type_entry))
            case NodeKind.MAPPING if has_field(type_entry, TYPE):
                parts.append(as_text(get_field(type_entry, TYPE)))
            case _:
                continue

    rendered = TYPE_SEPARATOR.join(parts)
    if optional:
        rendered += OPTIONAL_SUFFIX
    return rendered
