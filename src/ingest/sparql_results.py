"""SPARQL JSON results reader.

This module loads saved knowledge-base query results in the SPARQL 1.1
JSON results format and converts each binding into a typed source row.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from core.constants import (
    DATE_FIELD,
    ENCODING_FIELD,
    EXTENSION_FIELD,
    FORMAT_LABEL_FIELD,
    MIMETYPE_FIELD,
    OFFSET_FIELD,
    PUID_FIELD,
    REFERENCE_FIELD,
    RELATIVITY_FIELD,
    SIGNATURE_FIELD,
    URI_FIELD,
    URI_LABEL_FIELD,
)
from core.errors import SigReconIngestError
from core.logging_config import get_logger
from core.types import SourceRow

_LOGGER = get_logger(__name__)


def read_sparql_rows(source_path: str) -> list[SourceRow]:
    """Read query rows from a SPARQL JSON results file.

    Args:
        source_path: Path to a saved results document.

    Returns:
        Source rows in document order.

    Raises:
        SigReconIngestError: If the file is missing or not a results document.
    """
    path = Path(source_path).expanduser()
    if not path.is_file():
        raise SigReconIngestError(
            f"Failed to read query results at {path}: file does not exist."
        )
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise SigReconIngestError(f"Invalid JSON in query results {path}: {error}") from error
    rows = parse_sparql_bindings(_extract_bindings(payload, path))
    _LOGGER.info("sparql_rows_read", source_path=str(path), row_count=len(rows))
    return rows


def parse_sparql_bindings(bindings: list[Mapping[str, Any]]) -> list[SourceRow]:
    """Convert raw binding mappings into source rows.

    Raises:
        SigReconIngestError: If a binding lacks the record uri.
    """
    rows: list[SourceRow] = []
    for index, binding in enumerate(bindings):
        uri = _binding_value(binding, URI_FIELD)
        if not uri:
            raise SigReconIngestError(
                f"Query binding {index} has no '{URI_FIELD}' value; cannot identify record."
            )
        rows.append(
            SourceRow(
                uri=uri,
                format_label=_binding_value(binding, FORMAT_LABEL_FIELD)
                or _binding_value(binding, URI_LABEL_FIELD),
                puid=_binding_value(binding, PUID_FIELD),
                extension=_binding_value(binding, EXTENSION_FIELD),
                mimetype=_binding_value(binding, MIMETYPE_FIELD),
                signature=_binding_value(binding, SIGNATURE_FIELD),
                reference_label=_binding_value(binding, REFERENCE_FIELD),
                date=_binding_value(binding, DATE_FIELD),
                encoding_label=_binding_value(binding, ENCODING_FIELD),
                offset=_binding_value(binding, OFFSET_FIELD),
                offset_node_type=_binding_type(binding, OFFSET_FIELD),
                relativity_label=_binding_value(binding, RELATIVITY_FIELD),
            )
        )
    return rows


def _extract_bindings(payload: object, path: Path) -> list[Mapping[str, Any]]:
    if not isinstance(payload, dict):
        raise SigReconIngestError(f"Query results {path} must be a JSON object.")
    results = payload.get("results")
    bindings = results.get("bindings") if isinstance(results, dict) else None
    if not isinstance(bindings, list):
        raise SigReconIngestError(
            f"Query results {path} has no 'results.bindings' list."
        )
    for index, binding in enumerate(bindings):
        if not isinstance(binding, dict):
            raise SigReconIngestError(f"Query binding {index} in {path} must be an object.")
    return bindings


def _binding_value(binding: Mapping[str, Any], variable: str) -> str:
    term = binding.get(variable)
    if not isinstance(term, dict):
        return ""
    return str(term.get("value", ""))


def _binding_type(binding: Mapping[str, Any], variable: str) -> str:
    term = binding.get(variable)
    if not isinstance(term, dict):
        return ""
    return str(term.get("type", ""))
