"""Run storygraph straight from a source checkout: ``python app.py [--export out.html]``."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

SRC_DIR = Path(__file__).resolve().parent / "src"


def main(argv: Sequence[str] | None = None) -> None:
    if SRC_DIR.is_dir() and str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    from storygraph.cli import main as cli_main

    cli_main(argv)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
