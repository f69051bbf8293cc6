#!/usr/bin/env python3
"""
Standalone launcher for rowshift
Run this to use the command line tool from a source checkout without installing

Usage:
    python run_standalone.py translate "A1+B2" --move 1
    python run_standalone.py insert-row book.xlsx --row 4 --template 3
"""

import sys
from pathlib import Path

# Add the client directory to path
client_dir = Path(__file__).parent / "client"
sys.path.insert(0, str(client_dir))

from rowshift.cli import main

if __name__ == "__main__":
    sys.exit(main())
