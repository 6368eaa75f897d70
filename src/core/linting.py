"""Linting codes and the run-scoped linting ledger.

Linting runs in parallel with signature reconciliation. Every issue
found in a knowledge-base record is kept once per (uri, code) so the
whole set of problems for a record can be fixed at the source in one go.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class LintCode(Enum):
    """Closed set of linting codes with fixed criticality."""

    NO_LINTING_ERROR = ("nle", False)
    CANNOT_PARSE_OFFSET = ("offWDE02", True)
    BLANK_NODE_OFFSET = ("offWDE03", True)
    NO_RELATIVITY = ("relWDE01", False)
    UNKNOWN_RELATIVITY = ("relWDE02", True)
    NO_ENCODING = ("encWDE01", False)
    NO_PROVENANCE = ("proWDE01", False)
    NO_DATE = ("proWDE02", False)
    BAD_HEURISTIC = ("heuWDE01", True)
    CANNOT_PROCESS_SEQUENCE = ("heuWDE02", True)

    @property
    def code(self) -> str:
        """Short identifier used in reports."""
        return self.value[0]

    @property
    def critical(self) -> bool:
        """Whether the issue makes the row unusable."""
        return self.value[1]


_LINT_DESCRIPTIONS = {
    LintCode.NO_LINTING_ERROR: "Linting: INFO no linting errors",
    LintCode.CANNOT_PARSE_OFFSET: "Linting: ERROR cannot parse offset",
    LintCode.BLANK_NODE_OFFSET: "Linting: ERROR blank node returned for offset",
    LintCode.NO_RELATIVITY: "Linting: WARNING no relativity",
    LintCode.UNKNOWN_RELATIVITY: "Linting: ERROR unknown relativity",
    LintCode.NO_ENCODING: "Linting: WARNING no encoding",
    LintCode.NO_PROVENANCE: "Linting: WARNING no provenance",
    LintCode.NO_DATE: "Linting: WARNING no provenance date",
    LintCode.BAD_HEURISTIC: "Linting: ERROR bad heuristic",
    LintCode.CANNOT_PROCESS_SEQUENCE: "Linting: ERROR cannot process sequence",
}
UNKNOWN_LINT_DESCRIPTION = "Linting: ERROR unknown linting error"


def describe_lint(code: object) -> str:
    """Return the human description for a lint code."""
    if not isinstance(code, LintCode):
        return UNKNOWN_LINT_DESCRIPTION
    return _LINT_DESCRIPTIONS.get(code, UNKNOWN_LINT_DESCRIPTION)


@dataclass(frozen=True)
class LintFinding:
    """One linting issue recorded against a knowledge-base record."""

    uri: str
    code: LintCode
    critical: bool


@dataclass(frozen=True)
class LintSummary:
    """Aggregate linting counts for a run.

    Attributes:
        records_with_linting: Distinct records with at least one finding.
        lint_count: Total distinct findings across all records.
        bad_heuristic_count: Findings recording a heuristic give-up.
    """

    records_with_linting: int
    lint_count: int
    bad_heuristic_count: int


class LintingLedger:
    """Accumulates deduplicated findings per record uri."""

    def __init__(self) -> None:
        self._findings: dict[str, set[LintFinding]] = {}

    def record(self, uri: str, code: LintCode) -> None:
        """Record a finding for a uri, ignoring the no-error sentinel."""
        if code == LintCode.NO_LINTING_ERROR:
            return
        finding = LintFinding(uri=uri, code=code, critical=code.critical)
        self._findings.setdefault(uri, set()).add(finding)

    def findings(self, uri: str | None = None) -> tuple[LintFinding, ...]:
        """Return stored findings, optionally limited to one uri."""
        if uri is not None:
            return tuple(_sorted_findings(self._findings.get(uri, set())))
        all_findings: list[LintFinding] = []
        for uri_findings in self._findings.values():
            all_findings.extend(uri_findings)
        return tuple(_sorted_findings(all_findings))

    def has_finding(self, uri: str, code: LintCode) -> bool:
        """Check whether a uri carries a specific finding."""
        return any(finding.code == code for finding in self._findings.get(uri, ()))

    def has_critical(self, uri: str) -> bool:
        """Check whether a uri carries any critical finding."""
        return any(finding.critical for finding in self._findings.get(uri, ()))

    def summarize(self) -> LintSummary:
        """Count affected records, findings, and heuristic give-ups."""
        lint_count = 0
        bad_heuristic_count = 0
        for uri_findings in self._findings.values():
            lint_count += len(uri_findings)
            bad_heuristic_count += sum(
                1 for finding in uri_findings if finding.code == LintCode.BAD_HEURISTIC
            )
        return LintSummary(
            records_with_linting=len(self._findings),
            lint_count=lint_count,
            bad_heuristic_count=bad_heuristic_count,
        )

    def render(self) -> list[str]:
        """Render one report line per stored finding."""
        return [
            f"{describe_lint(finding.code)}: URI: {finding.uri} "
            f"Critical: {str(finding.critical).lower()}"
            for finding in self.findings()
        ]

    def __len__(self) -> int:
        return sum(len(uri_findings) for uri_findings in self._findings.values())


def _sorted_findings(findings: Iterable[LintFinding]) -> list[LintFinding]:
    return sorted(findings, key=lambda finding: (finding.uri, finding.code.code))
