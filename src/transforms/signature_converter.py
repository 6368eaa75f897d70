"""Signature encoding lookup and pattern normalization.

This module resolves knowledge-base encoding labels to encoding
categories and normalizes raw pattern text so sequences can be
compared verbatim. Hex and ASCII patterns normalize to lowercase hex.
"""

from __future__ import annotations

import re
import uuid
from typing import Protocol

from core.errors import SignatureConversionError
from core.types import SignatureEncoding


class SignatureConverter(Protocol):
    """Collaborator that resolves encodings and normalizes patterns."""

    def lookup_encoding(self, label: str) -> SignatureEncoding:
        """Resolve an encoding label, UNKNOWN when unrecognized."""
        ...

    def normalize(self, pattern: str, encoding: SignatureEncoding) -> str:
        """Normalize pattern text or raise SignatureConversionError."""
        ...


_ENCODING_LABELS = {
    "hexadecimal": SignatureEncoding.HEX,
    "hex": SignatureEncoding.HEX,
    "ascii": SignatureEncoding.ASCII,
    "globally unique identifier": SignatureEncoding.GUID,
    "guid": SignatureEncoding.GUID,
    "pronom internal signature": SignatureEncoding.PRONOM,
    "pronom": SignatureEncoding.PRONOM,
}
_HEX_PATTERN = re.compile(r"^[0-9a-f]+$")
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


class BasicSignatureConverter:
    """Default converter for the encodings seen in knowledge-base rows."""

    def lookup_encoding(self, label: str) -> SignatureEncoding:
        return _ENCODING_LABELS.get(label.strip().lower(), SignatureEncoding.UNKNOWN)

    def normalize(self, pattern: str, encoding: SignatureEncoding) -> str:
        """Normalize a raw pattern for its encoding.

        Args:
            pattern: Raw pattern text from the source row.
            encoding: Resolved encoding category.

        Returns:
            Normalized pattern text.

        Raises:
            SignatureConversionError: If the pattern is empty or malformed.
        """
        if not pattern.strip():
            raise SignatureConversionError("Cannot normalize an empty signature pattern.")
        if encoding == SignatureEncoding.ASCII:
            return pattern.encode("utf-8").hex()
        if encoding == SignatureEncoding.GUID:
            return _normalize_guid(pattern)
        if encoding == SignatureEncoding.PRONOM:
            return _normalize_pronom(pattern)
        return _normalize_hex(pattern)


def _strip_whitespace(pattern: str) -> str:
    return "".join(pattern.split())


def _normalize_hex(pattern: str) -> str:
    normalized = _strip_whitespace(pattern).lower()
    if not _HEX_PATTERN.match(normalized):
        raise SignatureConversionError(
            f"Invalid hexadecimal signature '{pattern}': non-hex characters present."
        )
    if len(normalized) % 2:
        raise SignatureConversionError(
            f"Invalid hexadecimal signature '{pattern}': odd number of digits."
        )
    return normalized


def _normalize_guid(pattern: str) -> str:
    try:
        return str(uuid.UUID(pattern.strip()))
    except ValueError as error:
        raise SignatureConversionError(f"Invalid GUID signature '{pattern}': {error}") from error


def _normalize_pronom(pattern: str) -> str:
    normalized = _strip_whitespace(pattern).lower()
    open_brackets: list[str] = []
    for character in normalized:
        if character in "([{":
            open_brackets.append(character)
        elif character in _BRACKET_PAIRS:
            if not open_brackets or open_brackets.pop() != _BRACKET_PAIRS[character]:
                raise SignatureConversionError(
                    f"Invalid PRONOM signature '{pattern}': unbalanced '{character}'."
                )
    if open_brackets:
        raise SignatureConversionError(
            f"Invalid PRONOM signature '{pattern}': unclosed '{open_brackets[-1]}'."
        )
    return normalized
