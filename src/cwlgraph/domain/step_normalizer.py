"""Normalize a document's ``steps`` into ``Step`` values."""

from __future__ import annotations

from typing import Final

from .extractors import extract_doc, extract_id, extract_label, extract_types
from .model import Step
from .nodes import NodeKind, RawNode, as_text, get_field, has_field, node_kind
from .port_normalizer import get_inputs, get_outputs

STEPS: Final = "steps"
RUN: Final = "run"


def get_steps(document: RawNode) -> dict[str, Step] | None:
    if not has_field(document, STEPS):
        return None

    steps_node = get_field(document, STEPS)
    steps: dict[str, Step] = {}
    match node_kind(steps_node):
        case NodeKind.SEQUENCE:
            for entry in steps_node:
                identifier = extract_id(entry)
                if identifier is not None:
                    steps[identifier] = build_step(entry)
        case NodeKind.MAPPING:
            for key, entry in steps_node.items():
                identifier = as_text(key)
                if identifier:
                    steps[identifier] = build_step(entry)
        case _:
            pass
    return steps


def run_reference(step: RawNode) -> str | None:
    """The ``run`` target when it is a reference rather than an inline process."""

    run = get_field(step, RUN)
    if node_kind(run) is NodeKind.TEXT and run:
        return run
    return None


def build_step(step: RawNode) -> Step:
    return Step(
        label=extract_label(step),
        doc=extract_doc(step),
        types=extract_types(step),
        inputs=get_inputs(step),
        outputs=get_outputs(step),
        run=run_reference(step),
    )
