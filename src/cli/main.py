"""sigrecon CLI entry points.

This module exposes the analyze command over saved query results.
It maps argparse options onto the reconciliation SDK.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from core.config import ReconcileConfig, load_config_file
from ingest.record_assembler import assemble_records
from ingest.run_summary import records_over_threshold, render_run_summary, summarize_run
from ingest.sparql_results import read_sparql_rows


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="sigrecon", description="Reconcile knowledge-base file format signatures"
    )
    parser.add_argument("--config", help="YAML file overriding SIGRECON_* settings")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_analyze_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sigrecon CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.config)
    if args.command == "analyze":
        return _run_analyze_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(config_path: str | None) -> ReconcileConfig:
    config = ReconcileConfig.from_env()
    if config_path:
        return load_config_file(config_path, base=config)
    return config


def _run_analyze_command(config: ReconcileConfig, args: argparse.Namespace) -> int:
    """Handle analyze command.

    Args:
        config: Reconciliation settings.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    rows = read_sparql_rows(args.source)
    result = assemble_records(rows, config)
    summary = summarize_run(rows, result, include_messages=args.debug)
    print(render_run_summary(summary))
    if args.threshold > 0:
        for identifier in records_over_threshold(result.records.values(), args.threshold):
            print(identifier)
    return 0


def _add_analyze_command(subparsers: Any) -> None:
    """Register analyze subcommand."""
    parser = subparsers.add_parser("analyze", help="Summarize signatures in query results")
    parser.add_argument("source", help="SPARQL JSON results file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Include every linting message in the summary",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="List identifiers with more signatures than this value",
    )
