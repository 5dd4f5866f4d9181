#!/usr/bin/env python3
"""
Search PRP16 list keys for consecutive blocks of a u16 data file.

Usage:
    python3 demo.py data.bin                      # 50 blocks of 64 values
    python3 demo.py data.bin --block-len 128      # Custom block length
    python3 demo.py data.bin --blocks 10 -v       # Fewer blocks, per-block timing
"""

import sys

from prplist.cli import main


if __name__ == "__main__":
    sys.exit(main())
