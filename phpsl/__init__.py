"""PHP security linter package."""

from importlib.metadata import version, PackageNotFoundError

from .errors import LinterError, PathNotFoundError, RuleError, UnreadableFileError
from .linter import Linter
from .result import Issue, ScanResult
from .rules import Rule, RuleTable, load_rule_table
from .severity import Severity

try:
    __version__ = version("php-security-linter")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "Issue",
    "Linter",
    "LinterError",
    "PathNotFoundError",
    "Rule",
    "RuleError",
    "RuleTable",
    "ScanResult",
    "Severity",
    "UnreadableFileError",
    "load_rule_table",
]
