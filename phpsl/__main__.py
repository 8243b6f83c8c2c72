"""Allow ``python -m phpsl`` to behave like the CLI entry point."""

import sys

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
