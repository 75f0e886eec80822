#!/usr/bin/env python3
"""Run Word Tier from a source checkout without installing it.

    ./tier.py analyze "An obfuscated windowsill" --legend
    ./tier.py analyze "An obfuscated windowsill" -c 5   # define "obfuscated"
    ./tier.py define windowsill

Installed copies expose the same commands as ``word-tier``.
"""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if SRC_DIR.is_dir() and str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from word_tier.cli import app

    app(prog_name="tier.py")


if __name__ == "__main__":
    main()
