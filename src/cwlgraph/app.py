"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from cwlgraph.adapters.github import GitHubClient
from cwlgraph.adapters.local import LocalDirectorySource, local_location
from cwlgraph.adapters.yaml_parser import parse_document
from cwlgraph.domain import collect_documents, first_workflow

if TYPE_CHECKING:
    from cwlgraph.domain import DocumentCollection, EntryStrategy, Workflow
    from cwlgraph.domain.ports import DocumentParser, RepositoryLocation

log = getLogger(__name__)


def load_github_collection(
    location: RepositoryLocation,
    *,
    revision: str | None = None,
    client: GitHubClient | None = None,
    parser: DocumentParser = parse_document,
    entry_strategy: EntryStrategy = first_workflow,
) -> DocumentCollection:
    """Collect the workflow documents of a GitHub repository at a pinned commit.

    Without an explicit ``revision`` the branch's latest commit is looked up first
    so that every file is read from the same snapshot.
    """

    active_client = client or GitHubClient()
    pinned = revision or active_client.latest_commit(location)
    log.info(
        "Collecting workflows from %s/%s path=%r at %s",
        location.owner,
        location.repo,
        location.path,
        pinned,
    )
    return collect_documents(
        active_client,
        location,
        parser=parser,
        revision=pinned,
        entry_strategy=entry_strategy,
    )


def load_github_workflow(
    location: RepositoryLocation,
    *,
    revision: str | None = None,
    client: GitHubClient | None = None,
    entry_strategy: EntryStrategy = first_workflow,
) -> Workflow | None:
    collection = load_github_collection(
        location,
        revision=revision,
        client=client,
        entry_strategy=entry_strategy,
    )
    return collection.get_workflow()


def load_local_workflow(
    directory: Path | str,
    *,
    entry_strategy: EntryStrategy = first_workflow,
) -> Workflow | None:
    """Normalize the entry workflow found under a local directory."""

    source = LocalDirectorySource(Path(directory))
    collection = collect_documents(
        source,
        local_location(),
        parser=parse_document,
        entry_strategy=entry_strategy,
    )
    return collection.get_workflow()
