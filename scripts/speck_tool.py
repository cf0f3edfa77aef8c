"""CLI wrapper for encrypting / decrypting with Speck.

Usage:
    python scripts/speck_tool.py encrypt --key 000102030405060708090a0b0c0d0e0f --hex 206d616465206974206571756976616c --padding none
    python scripts/speck_tool.py decrypt --variant speck64_96 --key 0001020308090a0b10111213 --in data.bin --out plain.bin
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from specklab.cli import tool_main


if __name__ == "__main__":
    sys.exit(tool_main())
