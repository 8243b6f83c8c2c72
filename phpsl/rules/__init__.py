"""Rule records and the ordered rule table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from phpsl.errors import RuleError
from phpsl.severity import Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """One security anti-pattern expressed as a regular expression.

    The pattern is kept as source text and compiled on first use, so a table
    of rules can always be built; a malformed pattern only surfaces as a
    ``RuleError`` when the rule is evaluated.
    """

    id: str
    severity: Severity
    message: str
    pattern: str
    reference: Optional[str] = None
    flags: int = re.IGNORECASE

    def compile(self) -> re.Pattern[str]:
        try:
            return re.compile(self.pattern, self.flags)
        except re.error as exc:
            raise RuleError(self.id, str(exc)) from exc

    def search(self, text: str) -> bool:
        """Return ``True`` when the pattern matches anywhere in ``text``."""

        return self.compile().search(text) is not None


class RuleTable:
    """Immutable, ordered sequence of rules handed to the linter."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @classmethod
    def concat(cls, *tables: Iterable[Rule]) -> "RuleTable":
        """Join sub-tables in the given order without deduplication."""

        return cls(rule for table in tables for rule in table)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleTable({len(self._rules)} rules)"

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(rule.id for rule in self._rules)

    def get(self, rule_id: str) -> Optional[Rule]:
        wanted = rule_id.strip().upper()
        for rule in self._rules:
            if rule.id.upper() == wanted:
                return rule
        return None

    def without(self, rule_ids: Iterable[str]) -> "RuleTable":
        """Return a copy of the table that skips the given rule IDs."""

        excluded = {rule_id.strip().upper() for rule_id in rule_ids if rule_id and rule_id.strip()}
        if not excluded:
            return self
        known = {rule.id.upper() for rule in self._rules}
        for unknown in sorted(excluded - known):
            logger.debug("Ignoring exclusion of unknown rule %s", unknown)
        return RuleTable(rule for rule in self._rules if rule.id.upper() not in excluded)


def load_rule_table() -> RuleTable:
    """Build the default table: CIS rules first, then OWASP rules."""

    from . import cis, owasp

    return RuleTable.concat(cis.RULES, owasp.RULES)


__all__ = ["Rule", "RuleTable", "load_rule_table"]
