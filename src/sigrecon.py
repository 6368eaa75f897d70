"""Public SDK surface for sigrecon.

This module provides a stable import path for library users.
It re-exports the assembler, typed models, and reporting helpers.
"""

from __future__ import annotations

from core.config import ReconcileConfig, load_config_file
from core.linting import LintCode, LintFinding, LintingLedger, LintSummary
from core.types import ByteSequence, FormatRecord, Signature, SignatureEncoding, SourceRow
from ingest.record_assembler import AssemblyResult, RecordAssembler, assemble_records
from ingest.run_summary import RunSummary, render_run_summary, summarize_run
from ingest.sparql_results import read_sparql_rows
from transforms.signature_converter import BasicSignatureConverter, SignatureConverter

__all__ = [
    "AssemblyResult",
    "BasicSignatureConverter",
    "ByteSequence",
    "FormatRecord",
    "LintCode",
    "LintFinding",
    "LintSummary",
    "LintingLedger",
    "ReconcileConfig",
    "RecordAssembler",
    "RunSummary",
    "Signature",
    "SignatureConverter",
    "SignatureEncoding",
    "SourceRow",
    "assemble_records",
    "load_config_file",
    "read_sparql_rows",
    "render_run_summary",
    "summarize_run",
]
