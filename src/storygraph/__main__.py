"""Entry point for ``python -m storygraph``."""

from __future__ import annotations

import sys

from storygraph.cli import main

if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
