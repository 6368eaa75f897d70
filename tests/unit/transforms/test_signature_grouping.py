"""Unit tests for the signature grouping heuristic."""

from __future__ import annotations

from core.config import ReconcileConfig
from core.linting import LintCode
from core.types import ByteSequence, FormatRecord, SignatureEncoding
from transforms.signature_grouping import (
    GroupingState,
    apply_sequence,
    encodings_compatible,
    grouping_state,
    seed_signature,
)

_CONFIG = ReconcileConfig()


def _sequence(
    signature: str,
    relativity: str = _CONFIG.relative_bof,
    encoding: SignatureEncoding = SignatureEncoding.HEX,
) -> ByteSequence:
    return ByteSequence(
        signature=signature,
        offset=0,
        encoding=encoding,
        relativity=relativity,
        provenance="Registry",
        date="2020-01-01",
    )


def _seeded_record(first: ByteSequence) -> FormatRecord:
    record = FormatRecord(identifier="Q1", name="Format", uri="http://example.org/Q1")
    seed_signature(record, first)
    return record


def test_grouping_state_follows_record_lifecycle() -> None:
    """State should move from empty to accumulating to disabled."""
    record = FormatRecord(identifier="Q1", name="Format", uri="http://example.org/Q1")
    states = [grouping_state(record)]
    seed_signature(record, _sequence("aa"))
    states.append(grouping_state(record))
    record.disable_signatures()
    states.append(grouping_state(record))

    assert states == [GroupingState.EMPTY, GroupingState.ACCUMULATING, GroupingState.DISABLED]
    assert record.signatures == []


def test_duplicate_sequence_is_discarded_silently() -> None:
    """A repeated normalized pattern should not add a byte sequence."""
    record = _seeded_record(_sequence("aa"))

    lint = apply_sequence(record, _sequence("aa", _CONFIG.relative_eof), _CONFIG)

    assert lint == LintCode.NO_LINTING_ERROR and len(record.all_byte_sequences()) == 1


def test_new_relativity_extends_last_signature() -> None:
    """An unseen relativity should join the last signature."""
    record = _seeded_record(_sequence("aa"))

    lint = apply_sequence(record, _sequence("bb", _CONFIG.relative_eof), _CONFIG)

    assert lint == LintCode.NO_LINTING_ERROR
    assert len(record.signatures) == 1 and len(record.signatures[0].byte_sequences) == 2


def test_incompatible_encoding_gives_up() -> None:
    """Mixing hex with a PRONOM pattern in one signature is a bad heuristic."""
    record = _seeded_record(_sequence("aa"))

    lint = apply_sequence(
        record,
        _sequence("bb{2}cc", _CONFIG.relative_eof, SignatureEncoding.PRONOM),
        _CONFIG,
    )

    assert lint == LintCode.BAD_HEURISTIC and len(record.all_byte_sequences()) == 1


def test_repeated_beginning_of_file_starts_new_signature() -> None:
    """A second beginning-of-file pattern should open a new signature."""
    record = _seeded_record(_sequence("aa"))

    lint = apply_sequence(record, _sequence("bb"), _CONFIG)

    assert lint == LintCode.NO_LINTING_ERROR and len(record.signatures) == 2


def test_repeated_end_of_file_gives_up() -> None:
    """A second end-of-file pattern cannot be paired and gives up."""
    record = _seeded_record(_sequence("aa", _CONFIG.relative_eof))

    lint = apply_sequence(record, _sequence("bb", _CONFIG.relative_eof), _CONFIG)

    assert lint == LintCode.BAD_HEURISTIC


def test_encodings_compatible_pairs() -> None:
    """Only GUID or PRONOM paired with another kind is incompatible."""
    hex_, ascii_ = SignatureEncoding.HEX, SignatureEncoding.ASCII
    guid, pronom = SignatureEncoding.GUID, SignatureEncoding.PRONOM

    assert encodings_compatible(hex_, ascii_)
    assert encodings_compatible(guid, guid)
    assert encodings_compatible(pronom, pronom)
    assert encodings_compatible(SignatureEncoding.UNKNOWN, hex_)
    assert not encodings_compatible(guid, hex_)
    assert not encodings_compatible(hex_, pronom)
    assert not encodings_compatible(guid, pronom)
