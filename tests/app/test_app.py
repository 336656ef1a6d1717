from __future__ import annotations

from typing import TYPE_CHECKING

from cwlgraph.app import load_github_collection, load_github_workflow, load_local_workflow
from cwlgraph.domain import unreferenced_workflow
from cwlgraph.domain.ports.retrieval import RepositoryLocation

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from tests.conftest import InMemorySource

LOCATION = RepositoryLocation(owner="octo", repo="flows", branch="main")

CHILD = """
class: Workflow
label: child
steps: {}
"""

PARENT = """
class: Workflow
label: parent
steps:
  inner:
    run: child.cwl
    in: {}
    out: []
"""


def _pinned_source(
    in_memory_source: Callable[[dict[str, str]], InMemorySource],
    files: dict[str, str],
) -> InMemorySource:
    source = in_memory_source(files)
    source.latest_commit = lambda location: "pinned-sha"  # type: ignore[attr-defined]
    return source


def test_load_github_collection_pins_latest_commit(
    in_memory_source: Callable[[dict[str, str]], InMemorySource],
) -> None:
    source = _pinned_source(in_memory_source, {"child.cwl": CHILD, "parent.cwl": PARENT})

    collection = load_github_collection(LOCATION, client=source)  # type: ignore[arg-type]

    assert list(collection) == ["child.cwl", "parent.cwl"]
    assert {revision for _, revision in source.read} == {"pinned-sha"}


def test_load_github_workflow_with_explicit_revision(
    in_memory_source: Callable[[dict[str, str]], InMemorySource],
) -> None:
    source = _pinned_source(in_memory_source, {"child.cwl": CHILD, "parent.cwl": PARENT})

    workflow = load_github_workflow(
        LOCATION,
        revision="abc",
        client=source,  # type: ignore[arg-type]
        entry_strategy=unreferenced_workflow,
    )

    assert workflow is not None
    assert workflow.label == "parent"
    assert {revision for _, revision in source.read} == {"abc"}


def test_load_local_workflow_picks_first_discovered(repository_dir: Path) -> None:
    workflow = load_local_workflow(repository_dir)

    assert workflow is not None
    # legacy/ sorts before main.cwl
    assert workflow.document_id == "draft3.cwl"


def test_load_local_workflow_without_workflows(data_dir: Path) -> None:
    assert load_local_workflow(data_dir / "repository" / "tools") is None
