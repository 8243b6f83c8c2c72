"""Scan orchestration: walk a tree, filter it, scan each PHP file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .errors import PathNotFoundError, RuleError
from .file_scanner import scan_file
from .path_filter import PathFilter
from .result import RuleDiagnostic, ScanMeta, ScanResult
from .rules import RuleTable, load_rule_table
from .utils import iter_source_files

logger = logging.getLogger(__name__)


class Linter:
    """Scan PHP sources against an injected rule table.

    The table is fixed at construction. ``scan`` keeps no state between
    calls, so one instance can serve several sequential scans.
    """

    def __init__(self, rules: Optional[RuleTable] = None, exclude_rules: Iterable[str] = ()) -> None:
        table = rules if rules is not None else load_rule_table()
        self._rules = table.without(exclude_rules)

    @property
    def rules(self) -> RuleTable:
        return self._rules

    def scan(self, path: Union[str, Path], exclude: Iterable[str] = ()) -> ScanResult:
        """Scan every ``.php`` file under ``path`` that is not excluded.

        Raises ``PathNotFoundError`` before any traversal when ``path`` does
        not exist.
        """

        if not os.path.exists(path):
            raise PathNotFoundError(str(path))

        path_filter = PathFilter(exclude)
        result = ScanResult()
        rules = self._usable_rules(str(path), result)
        scanned_count = 0
        issue_count = 0

        logger.info("Scanning %s with %d rules", path, len(rules))
        for file_path in iter_source_files(Path(path)):
            if path_filter.excludes(file_path):
                continue

            scanned_count += 1
            issues = scan_file(file_path, rules, diagnostics=result.diagnostics)
            if issues:
                result.record(str(file_path), issues)
                issue_count += len(issues)

        if scanned_count > 0:
            result.meta = ScanMeta(scanned_count=scanned_count, issue_count=issue_count)
        logger.info("Scanned %d files, found %d issues", scanned_count, issue_count)
        return result

    def _usable_rules(self, root: str, result: ScanResult) -> RuleTable:
        """Drop rules whose pattern does not compile, once per scan."""

        usable = []
        for rule in self._rules:
            try:
                rule.compile()
            except RuleError as exc:
                logger.warning("Skipping rule %s for this scan: %s", rule.id, exc)
                result.diagnostics.append(RuleDiagnostic(rule_id=rule.id, path=root, error=str(exc)))
                continue
            usable.append(rule)
        return RuleTable(usable)
