"""Normalize input/output declarations into ``Port`` mappings.

Workflows and draft-era steps declare ports under ``inputs``/``outputs``; v1.0
steps use ``in``/``out``. Either may be written as a sequence of objects carrying an
explicit ``id`` or as a mapping keyed by id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .extractors import (
    TYPE,
    extract_default,
    extract_doc,
    extract_id,
    extract_label,
    extract_source,
    extract_types,
    step_id_from_source,
)
from .model import Port
from .nodes import NodeKind, RawNode, as_text, get_field, has_field, node_kind

if TYPE_CHECKING:
    from collections.abc import Iterator

INPUTS: Final = "inputs"
OUTPUTS: Final = "outputs"
IN: Final = "in"
OUT: Final = "out"


def get_inputs(node: RawNode) -> dict[str, Port] | None:
    if has_field(node, INPUTS):
        return normalize_ports(get_field(node, INPUTS))
    if has_field(node, IN):
        return normalize_step_ports(get_field(node, IN))
    return None


def get_outputs(node: RawNode) -> dict[str, Port] | None:
    if has_field(node, OUTPUTS):
        return normalize_ports(get_field(node, OUTPUTS))
    if has_field(node, OUT):
        return normalize_step_ports(get_field(node, OUT))
    return None


def _identified(raw: RawNode) -> Iterator[tuple[str, RawNode]]:
    """Yield ``(id, value)`` pairs from the sequence or mapping form of a list."""

    match node_kind(raw):
        case NodeKind.SEQUENCE:
            for entry in raw:
                # leading "#" is stripped here as well, unlike the raw id text of
                # draft-era documents
                identifier = extract_id(entry)
                if identifier is not None:
                    yield identifier, entry
        case NodeKind.MAPPING:
            for key, value in raw.items():
                identifier = as_text(key)
                if identifier:
                    yield identifier, value
        case _:
            return


def normalize_ports(raw: RawNode) -> dict[str, Port]:
    """Ports declared under ``inputs``/``outputs``."""

    return {identifier: port_details(value) for identifier, value in _identified(raw)}


def port_details(raw: RawNode) -> Port:
    # shorthand ``id: type``
    if node_kind(raw) in (NodeKind.TEXT, NodeKind.SCALAR):
        return Port(type=as_text(raw))

    return Port(
        label=extract_label(raw),
        doc=extract_doc(raw),
        type=extract_types(get_field(raw, TYPE)) if has_field(raw, TYPE) else None,
        default_value=extract_default(raw),
        source_ids=tuple(extract_source(raw) or ()),
    )


def _bound_port(raw: RawNode) -> Port:
    sources = extract_source(raw) or []
    if sources:
        return Port(source_ids=tuple(sources))
    return Port(default_value=extract_default(raw))


def _mapped_port(raw: RawNode) -> Port:
    # default is always kept, sources are recorded alongside
    return Port(
        default_value=extract_default(raw),
        source_ids=tuple(extract_source(raw) or ()),
    )


def normalize_step_ports(raw: RawNode) -> dict[str, Port]:
    """Ports declared under a v1.0 step's ``in``/``out``."""

    ports: dict[str, Port] = {}
    match node_kind(raw):
        case NodeKind.SEQUENCE:
            for entry in raw:
                match node_kind(entry):
                    case NodeKind.MAPPING:
                        identifier = extract_id(entry)
                        if identifier is not None:
                            ports[identifier] = _bound_port(entry)
                    case NodeKind.TEXT:
                        # ``out: [result]`` names a port without any binding
                        identifier = entry.removeprefix("#")
                        if identifier:
                            ports[identifier] = Port()
                    case _:
                        continue
        case NodeKind.MAPPING:
            for key, value in raw.items():
                identifier = as_text(key)
                if not identifier:
                    continue
                match node_kind(value):
                    case NodeKind.MAPPING:
                        ports[identifier] = _mapped_port(value)
                    case NodeKind.SEQUENCE:
                        ports[identifier] = Port(
                            source_ids=tuple(step_id_from_source(as_text(s)) for s in value)
                        )
                    case NodeKind.NULL:
                        ports[identifier] = Port()
                    case _:
                        ports[identifier] = Port(
                            source_ids=(step_id_from_source(as_text(value)),)
                        )
        case _:
            pass
    return ports
