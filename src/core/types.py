"""Shared typed models.

This module defines the row, record, signature, and byte sequence
models shared by the ingest, transform, and reporting layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SignatureEncoding(Enum):
    """Encoding category of a byte sequence pattern."""

    UNKNOWN = "unknown"
    HEX = "hexadecimal"
    GUID = "guid"
    PRONOM = "pronom"
    ASCII = "ascii"


@dataclass(frozen=True)
class SourceRow:
    """One flattened knowledge-base query row.

    Every attribute is the raw string returned by the query, blank when
    the query variable was unbound for this row.

    Attributes:
        uri: Record URI, the final path segment is the identifier.
        format_label: Display name of the format.
        puid: Registry code for the format.
        extension: File extension.
        mimetype: MIME type.
        signature: Raw signature pattern text.
        reference_label: Provenance citation label.
        date: Submission date of the signature.
        encoding_label: Encoding label of the signature.
        offset: Raw offset value.
        offset_node_type: Query node type of the offset binding.
        relativity_label: Relativity of the offset.
    """

    uri: str
    format_label: str = ""
    puid: str = ""
    extension: str = ""
    mimetype: str = ""
    signature: str = ""
    reference_label: str = ""
    date: str = ""
    encoding_label: str = ""
    offset: str = ""
    offset_node_type: str = ""
    relativity_label: str = ""

    @property
    def has_signature(self) -> bool:
        """Whether the row carries signature data."""
        return self.signature != ""


@dataclass(frozen=True)
class ByteSequence:
    """One validated detection pattern.

    Attributes:
        signature: Normalized pattern text.
        offset: Offset measured from the relativity anchor.
        encoding: Encoding category of the pattern.
        relativity: Beginning-of-file or end-of-file anchor value.
        provenance: Citation the pattern was derived from.
        date: Date the pattern was submitted.
    """

    signature: str
    offset: int
    encoding: SignatureEncoding
    relativity: str
    provenance: str
    date: str


@dataclass
class Signature:
    """Byte sequences that together identify one format variant."""

    byte_sequences: list[ByteSequence] = field(default_factory=list)


@dataclass
class FormatRecord:
    """Reconciled format record built from all rows sharing an identifier.

    Attributes:
        identifier: Short identifier taken from the URI.
        name: Display name of the format.
        uri: Absolute record URI.
        puids: Distinct registry codes in first-seen order.
        extensions: Distinct extensions in first-seen order.
        mimetypes: Distinct MIME types in first-seen order.
        signatures: Reconciled signatures.
        signatures_disabled: Set once signature data proved unreliable.
    """

    identifier: str
    name: str
    uri: str
    puids: list[str] = field(default_factory=list)
    extensions: list[str] = field(default_factory=list)
    mimetypes: list[str] = field(default_factory=list)
    signatures: list[Signature] = field(default_factory=list)
    signatures_disabled: bool = False

    def add_classifications(self, row: SourceRow) -> None:
        """Append unseen registry code, extension, and MIME type values."""
        _append_distinct(self.puids, row.puid)
        _append_distinct(self.extensions, row.extension)
        _append_distinct(self.mimetypes, row.mimetype)

    def disable_signatures(self) -> None:
        """Drop all signatures and refuse further signature updates."""
        self.signatures = []
        self.signatures_disabled = True

    def all_byte_sequences(self) -> list[ByteSequence]:
        """Return every byte sequence across all signatures."""
        return [sequence for sig in self.signatures for sequence in sig.byte_sequences]

    def has_sequence(self, signature_text: str) -> bool:
        """Check whether normalized text already occurs in any signature."""
        return any(seq.signature == signature_text for seq in self.all_byte_sequences())

    def has_relativity(self, relativity: str) -> bool:
        """Check whether a relativity already occurs in any signature."""
        return any(seq.relativity == relativity for seq in self.all_byte_sequences())


@dataclass(frozen=True)
class PreProcessedSequence:
    """Raw, unvalidated signature attributes used by the pre-flight check."""

    signature: str
    offset: str
    offset_node_type: str
    encoding_label: str
    relativity_label: str

    @classmethod
    def from_row(cls, row: SourceRow) -> "PreProcessedSequence":
        """Capture the signature-related attributes of a row."""
        return cls(
            signature=row.signature,
            offset=row.offset,
            offset_node_type=row.offset_node_type,
            encoding_label=row.encoding_label,
            relativity_label=row.relativity_label,
        )


def _append_distinct(values: list[str], value: str) -> None:
    if value not in values:
        values.append(value)
