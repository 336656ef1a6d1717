from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from cwlgraph.domain.collection import CollectionBuilder
from cwlgraph.domain.flattening import flatten_document

if TYPE_CHECKING:
    from collections.abc import Callable

    from cwlgraph.domain.nodes import RawNode


def test_plain_document_keyed_by_filename() -> None:
    document = {"class": "Workflow", "id": "ignored"}

    assert list(flatten_document(document, "main.cwl")) == [("main.cwl", document)]


def test_bundle_contributes_each_entry(load_document: Callable[[str], RawNode]) -> None:
    bundle = load_document("packed/packed.cwl")

    entries = dict(flatten_document(bundle, "packed.cwl"))

    assert list(entries) == ["revtool.cwl", "main"]
    assert "packed.cwl" not in entries
    assert entries["main"]["class"] == "Workflow"


def test_bundle_entries_without_id_are_dropped_with_warning(
    caplog: pytest.LogCaptureFixture,
) -> None:
    bundle = {"$graph": [{"id": "#a", "class": "Workflow"}, {"class": "CommandLineTool"}]}

    with caplog.at_level(logging.WARNING):
        entries = list(flatten_document(bundle, "bundle.cwl"))

    assert [document_id for document_id, _ in entries] == ["a"]
    assert "bundle.cwl" in caplog.text


def test_builder_counts_one_entry_per_bundle_member() -> None:
    bundle = {"$graph": [{"id": f"#doc{i}"} for i in range(5)]}
    builder = CollectionBuilder()

    added = builder.add_document(bundle, "bundle.cwl")

    assert added == ["doc0", "doc1", "doc2", "doc3", "doc4"]
    assert len(builder) == 5
    assert "bundle.cwl" not in builder.build()


def test_builder_last_write_wins_on_collision() -> None:
    builder = CollectionBuilder()
    builder.add_document({"class": "CommandLineTool"}, "tool.cwl")
    builder.add_document({"class": "Workflow"}, "tool.cwl")

    collection = builder.build()

    assert len(collection) == 1
    assert collection.get("tool.cwl") == {"class": "Workflow"}
