"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_cli_analyze_prints_summary(capsys) -> None:
    """CLI analyze should print the run summary as JSON."""
    exit_code = main(["analyze", str(fixture_path("sparql/results.json"))])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and payload["all_rows"] == 8


def test_cli_analyze_debug_includes_lint_messages(capsys) -> None:
    """Debug flag should add every linting message to the summary."""
    main(["analyze", str(fixture_path("sparql/results.json")), "--debug"])
    payload = json.loads(capsys.readouterr().out)

    assert any("bad heuristic" in message for message in payload["lint_messages"])


def test_cli_analyze_threshold_lists_identifiers(tmp_path, capsys) -> None:
    """Threshold option should print records with more signatures."""
    bof = "http://www.wikidata.org/entity/Q35436009"
    bindings = [
        {
            "uri": {"type": "uri", "value": "http://www.wikidata.org/entity/Q700"},
            "uriLabel": {"type": "literal", "value": "Twin Header"},
            "sig": {"type": "literal", "value": signature},
            "referenceLabel": {"type": "literal", "value": "PRONOM"},
            "encodingLabel": {"type": "literal", "value": "hexadecimal"},
            "offset": {"type": "literal", "value": "0"},
            "relativityLabel": {"type": "literal", "value": bof},
        }
        for signature in ("0102", "0304")
    ]
    source = tmp_path / "twin.json"
    source.write_text(json.dumps({"results": {"bindings": bindings}}), encoding="utf-8")

    exit_code = main(["analyze", str(source), "--threshold", "1"])
    lines = capsys.readouterr().out.rstrip().splitlines()

    assert exit_code == 0 and lines[-1] == "Q700"


def test_cli_analyze_threshold_skips_records_at_limit(capsys) -> None:
    """Records whose signature count equals the threshold are not listed."""
    main(
        [
            "--config",
            str(fixture_path("config/settings.yaml")),
            "analyze",
            str(fixture_path("sparql/results.json")),
            "--threshold",
            "1",
        ]
    )
    output = capsys.readouterr().out

    assert output.rstrip().endswith("}")


def test_cli_requires_command() -> None:
    """CLI should exit with usage error without a command."""
    with pytest.raises(SystemExit):
        main([])
