"""Canonical workflow graph model.

All values are immutable once built; mappings are exposed read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

PortMap = Mapping[str, "Port"]
StepMap = Mapping[str, "Step"]

T = TypeVar("T")


def _freeze(mapping: Mapping[str, T] | None) -> Mapping[str, T] | None:
    if mapping is None:
        return None
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class Port:
    """A named input or output slot of a workflow or step."""

    label: str | None = None
    doc: str | None = None
    type: str | None = None
    default_value: str | None = None
    source_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_ids", tuple(self.source_ids))


@dataclass(frozen=True, slots=True)
class Step:
    """One invocation of a process or sub-workflow."""

    label: str | None = None
    doc: str | None = None
    types: str | None = None
    inputs: PortMap | None = None
    outputs: PortMap | None = None
    run: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", _freeze(self.inputs))
        object.__setattr__(self, "outputs", _freeze(self.outputs))


@dataclass(frozen=True, slots=True)
class Workflow:
    """The entry workflow of a document collection."""

    label: str
    document_id: str
    doc: str | None = None
    inputs: PortMap | None = None
    outputs: PortMap | None = None
    steps: StepMap | None = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", _freeze(self.inputs))
        object.__setattr__(self, "outputs", _freeze(self.outputs))
        object.__setattr__(self, "steps", _freeze(self.steps))

    def to_dict(self) -> dict[str, Any]:
        """Plain-data rendition suitable for JSON output."""

        return {
            "id": self.document_id,
            "label": self.label,
            "doc": self.doc,
            "inputs": _ports_to_dict(self.inputs),
            "outputs": _ports_to_dict(self.outputs),
            "steps": (
                None
                if self.steps is None
                else {step_id: _step_to_dict(step) for step_id, step in self.steps.items()}
            ),
        }


def _port_to_dict(port: Port) -> dict[str, Any]:
    return {
        "label": port.label,
        "doc": port.doc,
        "type": port.type,
        "default": port.default_value,
        "sources": list(port.source_ids),
    }


def _ports_to_dict(ports: PortMap | None) -> dict[str, Any] | None:
    if ports is None:
        return None
    return {port_id: _port_to_dict(port) for port_id, port in ports.items()}


def _step_to_dict(step: Step) -> dict[str, Any]:
    return {
        "label": step.label,
        "doc": step.doc,
        "types": step.types,
        "run": step.run,
        "inputs": _ports_to_dict(step.inputs),
        "outputs": _ports_to_dict(step.outputs),
    }
