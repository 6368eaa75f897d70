"""Integration tests for reading and reconciling saved query results."""

from __future__ import annotations

from core.config import ReconcileConfig
from core.linting import LintCode
from core.types import SignatureEncoding
from ingest.record_assembler import assemble_records
from ingest.sparql_results import read_sparql_rows
from tests.fixture_paths import fixture_path


def test_saved_results_reconcile_into_format_records() -> None:
    """End-to-end flow should pair, disable, and lint records."""
    config = ReconcileConfig()
    rows = read_sparql_rows(str(fixture_path("sparql/results.json")))

    result = assemble_records(rows, config)
    alpha = result.records["Q100"]
    gamma = result.records["Q300"]
    delta = result.records["Q400"]

    assert alpha.extensions == ["alp", "alp2"]
    assert [(seq.signature, seq.offset) for seq in alpha.signatures[0].byte_sequences] == [
        ("4d5a", 0),
        ("ffd9", 2),
    ]
    assert alpha.signatures[0].byte_sequences[0].encoding == SignatureEncoding.HEX
    assert gamma.signatures_disabled and delta.signatures_disabled
    assert result.ledger.has_finding(delta.uri, LintCode.BAD_HEURISTIC)
    assert result.records["Q200"].signatures == []


def test_transcription_marker_override_changes_date_linting() -> None:
    """A different transcription marker should expose missing dates."""
    config = ReconcileConfig().with_overrides({"transcription_marker": "Elsewhere"})
    rows = read_sparql_rows(str(fixture_path("sparql/results.json")))

    result = assemble_records(rows, config)

    assert result.ledger.has_finding(result.records["Q100"].uri, LintCode.NO_DATE)
