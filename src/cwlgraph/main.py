#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cwlgraph.adapters.github import GitHubClient, is_github_url, parse_github_url
from cwlgraph.app import load_github_workflow, load_local_workflow
from cwlgraph.config import configure_logging, get_github_config
from cwlgraph.domain import ENTRY_STRATEGIES

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from cwlgraph.domain import EntryStrategy, Workflow
    from cwlgraph.domain.ports import RepositoryLocation

EXIT_NO_WORKFLOW = 3


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the normalized entry workflow of a CWL repository as JSON"
    )
    parser.add_argument(
        "target",
        help="GitHub URL (https://github.com/<owner>/<repo>[/tree/<branch>/<path>]) or directory",
    )
    parser.add_argument(
        "--revision",
        help="Commit sha to read files at (default: latest commit of the branch)",
    )
    parser.add_argument(
        "--entry-strategy",
        choices=sorted(ENTRY_STRATEGIES),
        default="first",
        help="How to choose the entry workflow (default: %(default)s)",
    )
    parser.add_argument(
        "--require-token",
        action="store_true",
        help="Fail unless GITHUB_TOKEN is set instead of calling GitHub anonymously",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _resolve_target(target: str) -> RepositoryLocation | Path:
    if is_github_url(target):
        return parse_github_url(target)
    directory = Path(target)
    if not directory.is_dir():
        raise ValueError(f"Not a GitHub URL or directory: {target}")
    return directory


def _load(
    target: RepositoryLocation | Path,
    *,
    revision: str | None,
    strategy: EntryStrategy,
    require_token: bool,
) -> Workflow | None:
    if isinstance(target, Path):
        return load_local_workflow(target, entry_strategy=strategy)
    client = GitHubClient(config=get_github_config(require_token=require_token))
    return load_github_workflow(
        target,
        revision=revision,
        client=client,
        entry_strategy=strategy,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        target = _resolve_target(args.target)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        workflow = _load(
            target,
            revision=args.revision,
            strategy=ENTRY_STRATEGIES[args.entry_strategy],
            require_token=args.require_token,
        )
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if workflow is None:
        print("Error: no Workflow document found", file=sys.stderr)
        sys.exit(EXIT_NO_WORKFLOW)

    print(json.dumps(workflow.to_dict(), indent=2))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
