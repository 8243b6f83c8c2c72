"""Evaluate the rule table against a single file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import RuleError, UnreadableFileError
from .result import Issue, RuleDiagnostic
from .rules import Rule
from .utils import read_text_file

logger = logging.getLogger(__name__)


def scan_file(
    path: Union[str, Path],
    rules: Iterable[Rule],
    diagnostics: Optional[List[RuleDiagnostic]] = None,
) -> List[Issue]:
    """Return the issues found in ``path``; unreadable files yield none."""

    try:
        content = read_text_file(Path(path))
    except UnreadableFileError as exc:
        logger.debug("Treating unreadable file as empty: %s", exc)
        return []
    return scan_text(content, rules, path=str(path), diagnostics=diagnostics)


def scan_text(
    content: str,
    rules: Iterable[Rule],
    path: str = "<string>",
    diagnostics: Optional[List[RuleDiagnostic]] = None,
) -> List[Issue]:
    """Match every rule against ``content`` and attribute line numbers.

    A rule is first tested against the whole content and only then line by
    line. When the whole content matches but line attribution does not end
    on this rule (a pattern spanning several lines, for instance), one
    extra issue is pinned to line 1 so no match goes unreported. This can
    produce a duplicate or a misplaced line-1 entry.
    """

    issues: List[Issue] = []
    if not content.strip():
        return issues

    lines = content.split("\n")
    for rule in rules:
        try:
            pattern = rule.compile()
            if not pattern.search(content):
                continue
            matched = [
                Issue(severity=rule.severity, message=rule.message, line=number)
                for number, line in enumerate(lines, start=1)
                if pattern.search(line)
            ]
        except RuleError as exc:
            logger.warning("Skipping rule %s for %s: %s", rule.id, path, exc)
            if diagnostics is not None:
                diagnostics.append(RuleDiagnostic(rule_id=rule.id, path=path, error=str(exc)))
            continue

        issues.extend(matched)
        if not issues or issues[-1].message != rule.message:
            issues.append(Issue(severity=rule.severity, message=rule.message, line=1))

    return issues
