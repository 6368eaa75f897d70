"""Per-attribute validators for knowledge-base signature rows.

Each validator takes the raw string from a query row and returns a
normalized value plus a lint code. Validators never raise for bad
data; problems are reported through the returned lint code.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import ReconcileConfig
from core.errors import SignatureConversionError
from core.linting import LintCode, LintingLedger
from core.types import ByteSequence, SignatureEncoding, SourceRow
from transforms.signature_converter import SignatureConverter


@dataclass(frozen=True)
class ValidatedSequence:
    """Byte sequence built from one row and its row-level verdict.

    Attributes:
        sequence: Byte sequence assembled from validated attributes.
        fatal: True when any attribute produced a critical lint code.
    """

    sequence: ByteSequence
    fatal: bool


def validate_provenance(value: str) -> tuple[str, LintCode]:
    """Validate the provenance citation of a signature."""
    if value == "":
        return value, LintCode.NO_PROVENANCE
    return value, LintCode.NO_LINTING_ERROR


def validate_date(value: str, provenance: str, transcription_marker: str) -> tuple[str, LintCode]:
    """Validate the submission date of a signature.

    Transcribed signatures carry no submission date of their own, so a
    blank date is only reported when the provenance is not the
    transcription marker.
    """
    if value == "" and provenance != transcription_marker:
        return value, LintCode.NO_DATE
    return value, LintCode.NO_LINTING_ERROR


def validate_relativity(
    value: str,
    config: ReconcileConfig,
) -> tuple[str, LintCode, str | None]:
    """Validate a relativity value.

    Args:
        value: Raw relativity from the row.
        config: Config holding the beginning and end of file values.

    Returns:
        Tuple of relativity, lint code, and an error message naming an
        unknown value. Blank relativity defaults to beginning of file.
    """
    if value == "":
        return config.relative_bof, LintCode.NO_RELATIVITY, None
    if value in (config.relative_bof, config.relative_eof):
        return value, LintCode.NO_LINTING_ERROR, None
    return value, LintCode.UNKNOWN_RELATIVITY, f"Received an unknown relativity: '{value}'"


def validate_offset(value: str, node_type: str, config: ReconcileConfig) -> tuple[int, LintCode]:
    """Validate an offset, defaulting blank values to zero."""
    if value == "":
        return 0, LintCode.NO_LINTING_ERROR
    if node_type == config.blank_node_type:
        return 0, LintCode.BLANK_NODE_OFFSET
    try:
        return int(value), LintCode.NO_LINTING_ERROR
    except ValueError:
        return 0, LintCode.CANNOT_PARSE_OFFSET


def validate_encoding(
    value: str,
    converter: SignatureConverter,
) -> tuple[SignatureEncoding, LintCode]:
    """Resolve an encoding label through the converter."""
    encoding = converter.lookup_encoding(value)
    if encoding == SignatureEncoding.UNKNOWN:
        return encoding, LintCode.NO_ENCODING
    return encoding, LintCode.NO_LINTING_ERROR


def validate_signature(
    value: str,
    encoding: SignatureEncoding,
    converter: SignatureConverter,
) -> tuple[str, LintCode, str | None]:
    """Normalize a signature so it can be compared with other sequences."""
    try:
        return converter.normalize(value, encoding), LintCode.NO_LINTING_ERROR, None
    except SignatureConversionError as error:
        return value, LintCode.CANNOT_PROCESS_SEQUENCE, str(error)


def validate_sequence_row(
    row: SourceRow,
    converter: SignatureConverter,
    ledger: LintingLedger,
    config: ReconcileConfig,
) -> ValidatedSequence:
    """Validate every signature attribute of a row and build its sequence.

    Args:
        row: Signature-bearing source row.
        converter: Encoding lookup and normalization collaborator.
        ledger: Ledger receiving every lint code produced.
        config: Reconciliation settings.

    Returns:
        The byte sequence and whether any attribute was fatally invalid.
    """
    provenance, provenance_lint = validate_provenance(row.reference_label)
    date, date_lint = validate_date(row.date, provenance, config.transcription_marker)
    relativity, relativity_lint, _ = validate_relativity(row.relativity_label, config)
    offset, offset_lint = validate_offset(row.offset, row.offset_node_type, config)
    encoding, encoding_lint = validate_encoding(row.encoding_label, converter)
    signature, signature_lint, _ = validate_signature(row.signature, encoding, converter)
    lint_codes = (
        provenance_lint,
        date_lint,
        relativity_lint,
        offset_lint,
        encoding_lint,
        signature_lint,
    )
    for lint_code in lint_codes:
        ledger.record(row.uri, lint_code)
    return ValidatedSequence(
        sequence=ByteSequence(
            signature=signature,
            offset=offset,
            encoding=encoding,
            relativity=relativity,
            provenance=provenance,
            date=date,
        ),
        fatal=any(lint_code.critical for lint_code in lint_codes),
    )
