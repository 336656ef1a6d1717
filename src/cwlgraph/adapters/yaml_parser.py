"""Parse workflow files into raw document trees."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from cwlgraph.domain.nodes import RawNode
    from cwlgraph.domain.ports.parsing import DocumentParser

log = getLogger(__name__)


class DocumentParseError(ValueError):
    """Raised when a file cannot be parsed as YAML or JSON."""

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        super().__init__(message)
        self.filename = filename


def parse_document(text: str, *, filename: str | None = None) -> RawNode:
    """Parse YAML (or JSON, which is a YAML subset) into plain Python data."""

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        where = filename or "<string>"
        log.error("Failed to parse %s: %s", where, exc)
        raise DocumentParseError(f"Could not parse {where}: {exc}", filename=filename) from exc


if TYPE_CHECKING:
    _parser_check: DocumentParser = parse_document
