#!/usr/bin/env python3
"""
Sim Commander - natural language control of iOS simulators

Development entry point; the installed package exposes the same CLI as
the ``sim-commander`` console script.
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from sim_commander.main import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)
