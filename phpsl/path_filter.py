"""Decide whether a candidate file is excluded from a scan.

Exclusion tokens come in two flavours:

* absolute paths (``/srv/app/vendor`` or ``C:\\app\\vendor``), which exclude
  every file whose canonical path starts with the token's canonical path;
* fragments (``vendor``, ``tests``, ``config.php``), which exclude a file
  whose basename equals the token or whose canonical path contains it.

Fragment matching is a plain substring test, so ``tests`` also excludes
``mytests/`` and ``log`` excludes ``catalog.php``.
"""

from __future__ import annotations

import logging
import posixpath
import re
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:[/\\]")


def is_absolute_token(token: str) -> bool:
    return token.startswith("/") or bool(_DRIVE_PREFIX.match(token))


def canonical_path(path: PathLike) -> Optional[str]:
    """Resolve symlinks and normalise separators; ``None`` if unresolvable."""

    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return None
    return str(resolved).replace("\\", "/")


class PathFilter:
    """Reusable exclusion check for one set of tokens."""

    def __init__(self, exclusions: Iterable[str] = ()) -> None:
        self._tokens: Tuple[str, ...] = tuple(
            token.strip() for token in exclusions if token and token.strip()
        )
        self._absolute: Dict[str, Optional[str]] = {
            token: canonical_path(token) for token in self._tokens if is_absolute_token(token)
        }

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def excludes(self, file_path: PathLike) -> bool:
        if not self._tokens:
            return False

        candidate = canonical_path(file_path)
        if candidate is None:
            return False

        for token in self._tokens:
            if self._matches_absolute(candidate, token) or self._matches_fragment(candidate, token):
                logger.debug("Excluding %s (matched %r)", file_path, token)
                return True
        return False

    def _matches_absolute(self, candidate: str, token: str) -> bool:
        resolved = self._absolute.get(token)
        if resolved is None:
            return False
        return candidate.startswith(resolved)

    @staticmethod
    def _matches_fragment(candidate: str, token: str) -> bool:
        return posixpath.basename(candidate) == token or token in candidate


def should_exclude(file_path: PathLike, exclusions: Iterable[str]) -> bool:
    """One-shot form of :meth:`PathFilter.excludes`."""

    return PathFilter(exclusions).excludes(file_path)
