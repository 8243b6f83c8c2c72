"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from phpsl.errors import UnreadableFileError


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> str:
    """Return the file contents decoded as UTF-8.

    Bytes are decoded without newline translation so that line numbers
    follow the physical ``\\n`` boundaries of the file. Undecodable bytes are
    replaced rather than rejected.
    """

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise UnreadableFileError(str(path), exc.strerror or type(exc).__name__) from exc
    return data.decode("utf-8", errors="replace")
