"""Port for turning file content into a raw document tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cwlgraph.domain.nodes import RawNode


class DocumentParser(Protocol):
    """Parses YAML or JSON text; ``filename`` only serves error reporting."""

    def __call__(self, text: str, *, filename: str | None = None) -> RawNode: ...


__all__ = ["DocumentParser"]
