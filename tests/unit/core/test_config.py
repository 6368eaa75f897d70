"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import ReconcileConfig, load_config_file
from core.constants import DEFAULT_RELATIVE_BOF
from core.errors import SigReconConfigError
from tests.fixture_paths import fixture_path


def test_from_env_uses_defaults_without_overrides() -> None:
    """Config should fall back to the knowledge-base sentinels."""
    config = ReconcileConfig.from_env()

    assert config.relative_bof == DEFAULT_RELATIVE_BOF and config.blank_node_type == "bnode"


def test_from_env_reads_transcription_marker(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the transcription marker from environment."""
    monkeypatch.setenv("SIGRECON_TRANSCRIPTION_MARKER", "Transcribed")

    config = ReconcileConfig.from_env()

    assert config.transcription_marker == "Transcribed"


def test_from_env_raises_for_matching_relativities(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject identical beginning and end of file values."""
    monkeypatch.setenv("SIGRECON_RELATIVE_BOF", "same")
    monkeypatch.setenv("SIGRECON_RELATIVE_EOF", "same")

    with pytest.raises(SigReconConfigError):
        ReconcileConfig.from_env()


def test_load_config_file_applies_yaml_values() -> None:
    """YAML values should override the base config."""
    config = load_config_file(str(fixture_path("config/settings.yaml")), ReconcileConfig())

    assert config.transcription_marker == "Transcribed from PRONOM"


def test_load_config_file_rejects_unknown_keys() -> None:
    """Unknown YAML keys should fail loudly."""
    with pytest.raises(SigReconConfigError, match="threshold"):
        load_config_file(str(fixture_path("config/unknown_key.yaml")), ReconcileConfig())


def test_load_config_file_raises_for_missing_file(tmp_path) -> None:
    """Missing config files should raise a config error."""
    with pytest.raises(SigReconConfigError):
        load_config_file(str(tmp_path / "missing.yaml"))


def test_with_overrides_rejects_blank_values() -> None:
    """Blank override values should be rejected."""
    with pytest.raises(SigReconConfigError):
        ReconcileConfig().with_overrides({"relative_eof": "  "})
