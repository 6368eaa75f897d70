"""Runtime configuration model for sigrecon.

This module owns environment variable and YAML config parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

import yaml

from core.constants import (
    CONFIG_ENV_PREFIX,
    DEFAULT_BLANK_NODE_TYPE,
    DEFAULT_RELATIVE_BOF,
    DEFAULT_RELATIVE_EOF,
    DEFAULT_TRANSCRIPTION_MARKER,
    SUPPORTED_CONFIG_KEYS,
)
from core.errors import SigReconConfigError


@dataclass(frozen=True)
class ReconcileConfig:
    """Validated reconciliation configuration.

    Attributes:
        relative_bof: Relativity value meaning "measured from file start".
        relative_eof: Relativity value meaning "measured from file end".
        transcription_marker: Provenance value exempt from date linting.
        blank_node_type: Offset node type signalling an unresolved node.
    """

    relative_bof: str = DEFAULT_RELATIVE_BOF
    relative_eof: str = DEFAULT_RELATIVE_EOF
    transcription_marker: str = DEFAULT_TRANSCRIPTION_MARKER
    blank_node_type: str = DEFAULT_BLANK_NODE_TYPE

    @classmethod
    def from_env(cls) -> "ReconcileConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SigReconConfigError: If environment values are invalid.
        """
        values = {
            key: os.getenv(f"{CONFIG_ENV_PREFIX}{key.upper()}", getattr(cls, key))
            for key in SUPPORTED_CONFIG_KEYS
        }
        return _build_config(cls(), values, "environment")

    def with_overrides(self, overrides: Mapping[str, object]) -> "ReconcileConfig":
        """Return a copy with validated overrides applied."""
        return _build_config(self, overrides, "overrides")


def load_config_file(config_path: str, base: ReconcileConfig | None = None) -> ReconcileConfig:
    """Load reconciliation settings from a YAML mapping.

    Args:
        config_path: Path to a YAML file with top-level config keys.
        base: Config to apply file values onto, env config if omitted.

    Returns:
        Validated config object.

    Raises:
        SigReconConfigError: If the file is missing, malformed, or has unknown keys.
    """
    path = Path(config_path).expanduser()
    if not path.is_file():
        raise SigReconConfigError(
            f"Config file not found at {path}. Provide an existing YAML file."
        )
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as error:
        raise SigReconConfigError(f"Failed to parse config file {path}: {error}") from error
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise SigReconConfigError(
            f"Config file {path} must contain a mapping, got {type(payload).__name__}."
        )
    return _build_config(base or ReconcileConfig.from_env(), payload, str(path))


def _build_config(
    base: ReconcileConfig,
    values: Mapping[str, object],
    source: str,
) -> ReconcileConfig:
    """Validate raw values and apply them onto a base config.

    Raises:
        SigReconConfigError: If keys are unknown or values are blank or non-string.
    """
    unknown_keys = sorted(set(values) - set(SUPPORTED_CONFIG_KEYS))
    if unknown_keys:
        supported = ", ".join(SUPPORTED_CONFIG_KEYS)
        raise SigReconConfigError(
            f"Unsupported config keys in {source}: {', '.join(unknown_keys)}. "
            f"Supported keys: {supported}."
        )
    validated: dict[str, str] = {}
    for key, value in values.items():
        if not isinstance(value, str) or not value.strip():
            raise SigReconConfigError(
                f"Invalid {key} value in {source}: expected non-empty string, got {value!r}."
            )
        validated[key] = value.strip()
    config = replace(base, **validated)
    if config.relative_bof == config.relative_eof:
        raise SigReconConfigError(
            f"Invalid relativity settings in {source}: beginning-of-file and "
            "end-of-file values must differ."
        )
    return config
