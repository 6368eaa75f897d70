"""Record assembly over an ordered stream of knowledge-base rows.

This module folds flattened query rows into format records, running
the pre-flight check when a record first appears and the grouping
heuristic for each later signature row. Rows must arrive in query
order because grouping depends on per-record history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.config import ReconcileConfig
from core.linting import LintCode, LintingLedger
from core.logging_config import get_logger
from core.types import FormatRecord, SourceRow
from transforms.field_validators import validate_sequence_row
from transforms.preflight_check import collect_preprocessed_sequences, preflight_accepts
from transforms.signature_converter import BasicSignatureConverter, SignatureConverter
from transforms.signature_grouping import (
    GroupingState,
    apply_sequence,
    grouping_state,
    seed_signature,
)

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class AssemblyResult:
    """Outcome of one assembly run.

    Attributes:
        records: Identifier to reconciled format record, in first-seen order.
        ledger: Linting ledger filled during the run.
    """

    records: dict[str, FormatRecord]
    ledger: LintingLedger


def get_identifier(uri: str) -> str:
    """Return the identifier of a record, the final path segment of its URI."""
    return uri.rsplit("/", 1)[-1]


class RecordAssembler:
    """Assembler whose record mapping and ledger are scoped to each run."""

    def __init__(
        self,
        config: ReconcileConfig,
        converter: SignatureConverter | None = None,
    ) -> None:
        self._config = config
        self._converter = converter or BasicSignatureConverter()
        self._ledger = LintingLedger()
        self._records: dict[str, FormatRecord] = {}

    def run(self, rows: Iterable[SourceRow]) -> AssemblyResult:
        """Assemble all rows into fresh records and a fresh ledger."""
        self._ledger = LintingLedger()
        self._records = {}
        ordered_rows = list(rows)
        rows_by_identifier = _partition_rows(ordered_rows)
        for row in ordered_rows:
            identifier = get_identifier(row.uri)
            record = self._records.get(identifier)
            if record is None:
                self._records[identifier] = self._start_record(
                    row, identifier, rows_by_identifier[identifier]
                )
            else:
                self._update_record(record, row)
        _log_assembly_completion(len(ordered_rows), self._records, self._ledger)
        return AssemblyResult(records=self._records, ledger=self._ledger)

    def _start_record(
        self,
        row: SourceRow,
        identifier: str,
        record_rows: list[SourceRow],
    ) -> FormatRecord:
        record = FormatRecord(identifier=identifier, name=row.format_label, uri=row.uri)
        record.add_classifications(row)
        sequences = collect_preprocessed_sequences(record_rows)
        if sequences and not preflight_accepts(sequences, self._converter, self._config):
            self._disable(record, "preflight")
            return record
        if row.has_signature:
            self._add_sequence(record, row)
        return record

    def _update_record(self, record: FormatRecord, row: SourceRow) -> None:
        record.add_classifications(row)
        if not row.has_signature or record.signatures_disabled:
            return
        self._add_sequence(record, row)

    def _add_sequence(self, record: FormatRecord, row: SourceRow) -> None:
        validated = validate_sequence_row(row, self._converter, self._ledger, self._config)
        if validated.fatal:
            return
        if grouping_state(record) == GroupingState.EMPTY:
            seed_signature(record, validated.sequence)
            return
        lint_code = apply_sequence(record, validated.sequence, self._config)
        if lint_code != LintCode.NO_LINTING_ERROR:
            self._disable(record, "grouping")

    def _disable(self, record: FormatRecord, stage: str) -> None:
        record.disable_signatures()
        self._ledger.record(record.uri, LintCode.BAD_HEURISTIC)
        _LOGGER.info("signatures_disabled", identifier=record.identifier, stage=stage)


def assemble_records(
    rows: Iterable[SourceRow],
    config: ReconcileConfig,
    converter: SignatureConverter | None = None,
) -> AssemblyResult:
    """Reconcile ordered query rows into format records.

    Args:
        rows: Query rows in arrival order.
        config: Reconciliation settings.
        converter: Optional converter, the basic converter if omitted.

    Returns:
        Assembled records and the linting ledger for the run.
    """
    return RecordAssembler(config, converter).run(rows)


def _partition_rows(rows: list[SourceRow]) -> dict[str, list[SourceRow]]:
    """Group rows by record identifier, keeping arrival order."""
    partitions: dict[str, list[SourceRow]] = {}
    for row in rows:
        partitions.setdefault(get_identifier(row.uri), []).append(row)
    return partitions


def _log_assembly_completion(
    row_count: int,
    records: dict[str, FormatRecord],
    ledger: LintingLedger,
) -> None:
    """Emit summary log for a completed assembly run."""
    summary = ledger.summarize()
    _LOGGER.info(
        "assembly_completed",
        row_count=row_count,
        record_count=len(records),
        disabled_count=sum(1 for record in records.values() if record.signatures_disabled),
        lint_count=summary.lint_count,
    )
