"""Error taxonomy raised by the linter."""

from __future__ import annotations

from typing import Optional


class LinterError(RuntimeError):
    """Base class for every error the linter raises on purpose.

    Each subclass carries a numeric ``code`` so the command line can report
    ``SCAN ERROR [<code>]`` and an optional ``context`` hint for the user.
    """

    code = 0

    def __init__(self, message: str = "", *, code: Optional[int] = None, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context = context

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        text = f"{type(self).__name__}: [{self.code}]: {self.message}"
        if self.context:
            text += f"\nContext: {self.context}"
        return text


class PathNotFoundError(LinterError):
    """The scan root does not exist."""

    code = 0

    def __init__(self, path: str) -> None:
        super().__init__(f"Path does not exist: {path}", context="Check the path passed to the scan")
        self.path = path


class UnreadableFileError(LinterError):
    """A candidate file could not be opened or read."""

    code = 100

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Could not access file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, context="Check file permissions and existence")
        self.path = path


class RuleError(LinterError):
    """A rule pattern failed to compile or evaluate."""

    code = 300

    def __init__(self, rule_id: str, detail: str) -> None:
        super().__init__(
            f"Invalid security rule: {rule_id}: {detail}",
            context="Check rule configuration and pattern validity",
        )
        self.rule_id = rule_id


class ConfigError(LinterError):
    """The configuration file is missing or malformed."""

    code = 400
