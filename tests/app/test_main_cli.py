from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from cwlgraph import main as main_module
from cwlgraph.domain import first_workflow, unreferenced_workflow
from cwlgraph.domain.ports.retrieval import RepositoryLocation

if TYPE_CHECKING:
    from pathlib import Path


def test_main_prints_local_workflow(
    repository_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    main_module.main([str(repository_dir / "legacy")])

    output = json.loads(capsys.readouterr().out)
    assert output["id"] == "draft3.cwl"
    assert output["outputs"]["aligned"]["sources"] == ["align"]
    assert output["steps"]["align"]["run"] == "align.cwl"


def test_main_dispatches_github_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_load(location: RepositoryLocation, **kwargs: object) -> None:
        captured["location"] = location
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "load_github_workflow", fake_load)

    with pytest.raises(SystemExit) as exc:
        main_module.main(
            [
                "https://github.com/octo/flows/tree/main/workflows",
                "--revision",
                "abc",
                "--entry-strategy",
                "unreferenced",
            ]
        )

    assert exc.value.code == main_module.EXIT_NO_WORKFLOW
    assert captured["location"] == RepositoryLocation(
        owner="octo", repo="flows", branch="main", path="workflows"
    )
    assert captured["revision"] == "abc"
    assert captured["entry_strategy"] is unreferenced_workflow


def test_main_defaults_to_first_workflow(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_load(directory: Path, **kwargs: object) -> None:
        captured["directory"] = directory
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "load_local_workflow", fake_load)

    with pytest.raises(SystemExit):
        main_module.main([str(tmp_path)])

    assert captured["directory"] == tmp_path
    assert captured["entry_strategy"] is first_workflow


def test_main_rejects_unknown_target(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main_module.main([str(tmp_path / "missing")])

    assert exc.value.code == 2
    assert "Not a GitHub URL or directory" in capsys.readouterr().err


def test_main_reports_runtime_errors(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    def failing_load(directory: Path, **kwargs: object) -> None:
        raise OSError("disk unavailable")

    monkeypatch.setattr(main_module, "load_local_workflow", failing_load)

    with pytest.raises(SystemExit) as exc:
        main_module.main([str(tmp_path)])

    assert exc.value.code == 1
    assert "disk unavailable" in capsys.readouterr().err


def test_main_require_token_fails_without_token(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    def unexpected_load(location: RepositoryLocation, **kwargs: object) -> None:
        raise AssertionError("GitHub must not be contacted")

    monkeypatch.setattr(main_module, "load_github_workflow", unexpected_load)

    with pytest.raises(SystemExit) as exc:
        main_module.main(["https://github.com/octo/flows", "--require-token"])

    assert exc.value.code == 1
    assert "GITHUB_TOKEN" in capsys.readouterr().err
