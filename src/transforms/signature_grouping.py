"""Grouping heuristic that folds byte sequences into signatures.

Knowledge-base rows do not say which byte sequences belong together,
so grouping is inferred from arrival order and relativity. When the
pairing becomes ambiguous the heuristic gives up on the whole record.

Known limitation: a repeated beginning-of-file sequence always opens a
new signature while any other repeated relativity gives up. Multiple
end-of-file variants are therefore never reconciled.
"""

from __future__ import annotations

from enum import Enum

from core.config import ReconcileConfig
from core.linting import LintCode
from core.types import ByteSequence, FormatRecord, Signature, SignatureEncoding


class GroupingState(Enum):
    """Signature grouping state of a format record."""

    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    DISABLED = "disabled"


def grouping_state(record: FormatRecord) -> GroupingState:
    """Derive the grouping state of a record."""
    if record.signatures_disabled:
        return GroupingState.DISABLED
    if not record.signatures:
        return GroupingState.EMPTY
    return GroupingState.ACCUMULATING


def encodings_compatible(first: SignatureEncoding, second: SignatureEncoding) -> bool:
    """Check whether two encodings may share one signature.

    GUID and PRONOM patterns only combine with their own kind. Hex and
    ASCII are interchangeable because ASCII normalizes to hex.
    """
    for exclusive in (SignatureEncoding.GUID, SignatureEncoding.PRONOM):
        if (first == exclusive) != (second == exclusive):
            return False
    return True


def signature_accepts(signature: Signature, encoding: SignatureEncoding) -> bool:
    """Check a new encoding against every sequence already in a signature."""
    return all(
        encodings_compatible(sequence.encoding, encoding)
        for sequence in signature.byte_sequences
    )


def seed_signature(record: FormatRecord, sequence: ByteSequence) -> None:
    """Open the first signature of an empty record."""
    record.signatures.append(Signature(byte_sequences=[sequence]))


def apply_sequence(
    record: FormatRecord,
    sequence: ByteSequence,
    config: ReconcileConfig,
) -> LintCode:
    """Fold one validated sequence into an accumulating record.

    Args:
        record: Record in the accumulating state.
        sequence: Validated byte sequence from the next row.
        config: Settings holding the beginning-of-file value.

    Returns:
        BAD_HEURISTIC when the sequence cannot be placed unambiguously,
        otherwise NO_LINTING_ERROR. The record is left untouched on
        BAD_HEURISTIC; disabling it is the caller's job.
    """
    if record.has_sequence(sequence.signature):
        return LintCode.NO_LINTING_ERROR
    if not record.has_relativity(sequence.relativity):
        last_signature = record.signatures[-1]
        if not signature_accepts(last_signature, sequence.encoding):
            return LintCode.BAD_HEURISTIC
        last_signature.byte_sequences.append(sequence)
        return LintCode.NO_LINTING_ERROR
    if sequence.relativity == config.relative_bof:
        record.signatures.append(Signature(byte_sequences=[sequence]))
        return LintCode.NO_LINTING_ERROR
    return LintCode.BAD_HEURISTIC
