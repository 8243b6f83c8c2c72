"""Source code helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Tuple

SOURCE_EXTENSIONS: Tuple[str, ...] = (".php",)


def is_source_file(path: Path, extensions: Tuple[str, ...] = SOURCE_EXTENSIONS) -> bool:
    """Match the file name ending case-insensitively (``index.PHP`` and ``.php`` count)."""

    return path.name.lower().endswith(extensions)


def iter_source_files(root: Path, extensions: Tuple[str, ...] = SOURCE_EXTENSIONS) -> Generator[Path, None, None]:
    """Yield non-directory source entries beneath ``root`` in filesystem order.

    Broken symlinks are yielded too; reading them fails later and they are
    scanned as empty files. A root that is itself a matching file is yielded
    on its own.
    """

    if root.is_file():
        if is_source_file(root, extensions):
            yield root
        return
    for path in root.rglob("*"):
        if is_source_file(path, extensions) and not path.is_dir():
            yield path
