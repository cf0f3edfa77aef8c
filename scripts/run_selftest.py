"""CLI entry point for the Speck self-test.

Usage:
    python scripts/run_selftest.py                          # full run, writes reports/<timestamp>/report.json
    python scripts/run_selftest.py --roundtrip-vectors 20   # quick run
    python scripts/run_selftest.py --no-save -v
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from specklab.cli import selftest_main


if __name__ == "__main__":
    sys.exit(selftest_main())
