"""Run summary for a reconciliation pass.

This module condenses the assembled records and linting ledger into
headline counts describing how much signature data survived.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterable

from core.types import FormatRecord, SourceRow
from ingest.record_assembler import AssemblyResult


@dataclass(frozen=True)
class RunSummary:
    """Headline counts for one reconciliation run.

    Attributes:
        all_rows: Rows received from the query.
        condensed_records: Distinct format records after assembly.
        rows_with_signatures: Rows carrying signature data.
        records_with_potential_signatures: Records with any signature row.
        formats_with_bad_heuristics: Bad-heuristic findings recorded.
        records_with_signatures: Records that kept at least one signature.
        multiple_sequences: Signatures made of more than one byte sequence.
        lint_count: Distinct findings across all records.
        records_with_linting: Records with at least one finding.
        lint_messages: Rendered findings, only filled when requested.
    """

    all_rows: int
    condensed_records: int
    rows_with_signatures: int
    records_with_potential_signatures: int
    formats_with_bad_heuristics: int
    records_with_signatures: int
    multiple_sequences: int
    lint_count: int
    records_with_linting: int
    lint_messages: tuple[str, ...] = field(default_factory=tuple)


def summarize_run(
    rows: Iterable[SourceRow],
    result: AssemblyResult,
    include_messages: bool = False,
) -> RunSummary:
    """Build the summary for an assembly run.

    Args:
        rows: Rows that were assembled.
        result: Assembly output.
        include_messages: Whether to render every linting finding.

    Returns:
        Run summary counts.
    """
    row_list = list(rows)
    signature_rows = [row for row in row_list if row.has_signature]
    lint_summary = result.ledger.summarize()
    records = list(result.records.values())
    return RunSummary(
        all_rows=len(row_list),
        condensed_records=len(records),
        rows_with_signatures=len(signature_rows),
        records_with_potential_signatures=len({row.uri for row in signature_rows}),
        formats_with_bad_heuristics=lint_summary.bad_heuristic_count,
        records_with_signatures=sum(1 for record in records if record.signatures),
        multiple_sequences=_count_multiple_sequences(records),
        lint_count=lint_summary.lint_count,
        records_with_linting=lint_summary.records_with_linting,
        lint_messages=tuple(result.ledger.render()) if include_messages else (),
    )


def records_over_threshold(records: Iterable[FormatRecord], threshold: int) -> list[str]:
    """Return identifiers whose signature count exceeds a threshold."""
    return [record.identifier for record in records if len(record.signatures) > threshold]


def render_run_summary(summary: RunSummary) -> str:
    """Render a summary as indented JSON."""
    payload = asdict(summary)
    payload["lint_messages"] = list(summary.lint_messages)
    return json.dumps(payload, indent=2)


def _count_multiple_sequences(records: list[FormatRecord]) -> int:
    return sum(
        1
        for record in records
        for signature in record.signatures
        if len(signature.byte_sequences) > 1
    )
