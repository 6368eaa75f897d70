"""Pre-flight compatibility check for a record's signature rows.

Before any signature is built, all signature-bearing rows of a record
are inspected together. If they cannot be combined into a reliable
signature the record's signatures are disabled up front.
"""

from __future__ import annotations

from typing import Iterable

from core.config import ReconcileConfig
from core.linting import LintCode
from core.types import PreProcessedSequence, SourceRow
from transforms.field_validators import validate_offset, validate_relativity, validate_signature
from transforms.signature_converter import SignatureConverter


def collect_preprocessed_sequences(rows: Iterable[SourceRow]) -> list[PreProcessedSequence]:
    """Collect distinct signature attributes of rows in arrival order.

    Query results repeat signature attributes once per extension or
    MIME type combination, so identical tuples are kept once.
    """
    sequences: list[PreProcessedSequence] = []
    for row in rows:
        if not row.has_signature:
            continue
        sequence = PreProcessedSequence.from_row(row)
        if sequence not in sequences:
            sequences.append(sequence)
    return sequences


def preflight_accepts(
    sequences: list[PreProcessedSequence],
    converter: SignatureConverter,
    config: ReconcileConfig,
) -> bool:
    """Decide whether a record's sequences can seed a signature.

    Args:
        sequences: Distinct pre-processed sequences for one record.
        converter: Encoding lookup and normalization collaborator.
        config: Reconciliation settings.

    Returns:
        True when the sequences are consistent enough to reconcile.
    """
    if not sequences:
        return False
    normalized_signatures: list[str] = []
    for sequence in sequences:
        _, _, relativity_error = validate_relativity(sequence.relativity_label, config)
        if relativity_error is not None:
            return False
        encoding = converter.lookup_encoding(sequence.encoding_label)
        signature, _, signature_error = validate_signature(
            sequence.signature, encoding, converter
        )
        if signature_error is not None:
            return False
        normalized_signatures.append(signature)
    encodings = [sequence.encoding_label for sequence in sequences]
    relativities = [
        sequence.relativity_label for sequence in sequences if sequence.relativity_label != ""
    ]
    usable_offsets = [sequence for sequence in sequences if _offset_is_usable(sequence, config)]
    row_count = len(sequences)
    if len(usable_offsets) != row_count:
        return False
    if row_count == 2:
        if len(set(relativities)) == 2 or len(set(normalized_signatures)) == 2:
            return True
    if row_count > 2:
        if len(set(encodings)) > 1:
            return False
        if len(set(relativities)) > 1:
            return False
    # Signatures and encodings are bound on every tuple; relativity may be all or nothing.
    return len(relativities) in (0, row_count)


def _offset_is_usable(sequence: PreProcessedSequence, config: ReconcileConfig) -> bool:
    _, offset_lint = validate_offset(sequence.offset, sequence.offset_node_type, config)
    return offset_lint == LintCode.NO_LINTING_ERROR
