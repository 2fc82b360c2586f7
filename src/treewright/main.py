from __future__ import annotations

"""
Main Entry Point.

Allows running the CLI as a script (``python src/treewright/main.py``) or as
a module (``python -m treewright.main``).
"""

import os
import sys

# Make the package importable when executed as a plain script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from treewright.interface.cli.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
