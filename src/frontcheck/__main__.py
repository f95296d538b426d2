"""Allow ``python -m frontcheck``."""

from __future__ import annotations

import sys

from frontcheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
