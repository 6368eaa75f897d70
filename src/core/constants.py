"""Core constants used across sigrecon modules.

This module centralizes knowledge-base sentinels and query variable
names. Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_RELATIVE_BOF = "http://www.wikidata.org/entity/Q35436009"
DEFAULT_RELATIVE_EOF = "http://www.wikidata.org/entity/Q1148480"
DEFAULT_TRANSCRIPTION_MARKER = "PRONOM"
DEFAULT_BLANK_NODE_TYPE = "bnode"

URI_FIELD = "uri"
FORMAT_LABEL_FIELD = "formatLabel"
URI_LABEL_FIELD = "uriLabel"
PUID_FIELD = "puid"
EXTENSION_FIELD = "extension"
MIMETYPE_FIELD = "mimetype"
SIGNATURE_FIELD = "sig"
OFFSET_FIELD = "offset"
ENCODING_FIELD = "encodingLabel"
RELATIVITY_FIELD = "relativityLabel"
DATE_FIELD = "date"
REFERENCE_FIELD = "referenceLabel"

CONFIG_ENV_PREFIX = "SIGRECON_"
SUPPORTED_CONFIG_KEYS = (
    "relative_bof",
    "relative_eof",
    "transcription_marker",
    "blank_node_type",
)
