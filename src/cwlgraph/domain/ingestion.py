"""Collect every workflow document of a repository into a collection."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from .collection import CollectionBuilder
from .entry_strategies import first_workflow
from .ports.retrieval import EntryKind

if TYPE_CHECKING:
    from .collection import DocumentCollection
    from .entry_strategies import EntryStrategy
    from .ports.parsing import DocumentParser
    from .ports.retrieval import RepositoryLocation, RepositorySource

log = getLogger(__name__)

CWL_EXTENSION: Final = "cwl"


def collect_documents(
    source: RepositorySource,
    location: RepositoryLocation,
    *,
    parser: DocumentParser,
    revision: str | None = None,
    extension: str = CWL_EXTENSION,
    entry_strategy: EntryStrategy = first_workflow,
) -> DocumentCollection:
    """Walk ``location`` recursively and parse every matching file.

    Retrieval and parse errors propagate unchanged; no partial collection is
    returned.
    """

    builder = CollectionBuilder()
    _add_directory(
        builder,
        source,
        location,
        parser=parser,
        revision=revision,
        extension=extension,
    )
    log.info("Collected %d documents from %s/%s", len(builder), location.owner, location.repo)
    return builder.build(entry_strategy=entry_strategy)


def _add_directory(
    builder: CollectionBuilder,
    source: RepositorySource,
    location: RepositoryLocation,
    *,
    parser: DocumentParser,
    revision: str | None,
    extension: str,
) -> None:
    log.debug("Listing %s", location.path or "/")
    for entry in source.list_directory(location):
        match entry.kind:
            case EntryKind.DIRECTORY:
                _add_directory(
                    builder,
                    source,
                    location.at(entry.path),
                    parser=parser,
                    revision=revision,
                    extension=extension,
                )
            case EntryKind.FILE if entry.extension == extension:
                content = source.read_file(location.at(entry.path), revision=revision)
                builder.add_document(parser(content, filename=entry.path), entry.name)
            case _:
                continue
