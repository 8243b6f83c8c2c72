"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .severity import Severity

META_KEY = "_meta"
DIAGNOSTICS_KEY = "_diagnostics"


@dataclass(frozen=True)
class Issue:
    """One rule match on one line of one file."""

    severity: Severity
    message: str
    line: int

    def to_dict(self) -> Dict[str, object]:
        return {"severity": self.severity.value, "message": self.message, "line": self.line}


@dataclass(frozen=True)
class ScanMeta:
    """Run-wide counters attached to a scan that visited at least one file."""

    scanned_count: int
    issue_count: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class RuleDiagnostic:
    """A rule that could not be evaluated against a file."""

    rule_id: str
    path: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ScanResult:
    """Issues keyed by file path, plus out-of-band metadata.

    ``files`` only holds files with at least one issue. ``meta`` is ``None``
    when the scan visited no file.
    """

    files: Dict[str, List[Issue]] = field(default_factory=dict)
    meta: Optional[ScanMeta] = None
    diagnostics: List[RuleDiagnostic] = field(default_factory=list)

    @property
    def scanned_count(self) -> int:
        return self.meta.scanned_count if self.meta else 0

    @property
    def issue_count(self) -> int:
        return self.meta.issue_count if self.meta else 0

    def record(self, path: str, issues: List[Issue]) -> None:
        if issues:
            self.files[path] = issues

    def items(self) -> Iterator[Tuple[str, List[Issue]]]:
        return iter(self.files.items())

    def to_dict(self) -> Dict[str, object]:
        """Return the sparse mapping form, with metadata under ``_meta``."""

        data: Dict[str, object] = {
            path: [issue.to_dict() for issue in issues] for path, issues in self.files.items()
        }
        if self.meta is not None:
            data[META_KEY] = self.meta.to_dict()
        if self.diagnostics:
            data[DIAGNOSTICS_KEY] = [diagnostic.to_dict() for diagnostic in self.diagnostics]
        return data


def format_results(result: ScanResult) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    lines.append("Scan results")
    lines.append("=" * 40)
    lines.append("")
    for path, issues in result.items():
        lines.append(f"File: {path}")
        for issue in issues:
            lines.append(f"  ✗ [{issue.severity.label}] {issue.message} (Line {issue.line})")
        lines.append("")
    lines.append(
        f"Summary: Scanned {result.scanned_count} files, found {result.issue_count} potential issues."
    )
    if result.diagnostics:
        lines.append("")
        lines.append("Rule errors:")
        for diagnostic in result.diagnostics:
            lines.append(f"  {diagnostic.rule_id} in {diagnostic.path}: {diagnostic.error}")
    return "\n".join(lines)
