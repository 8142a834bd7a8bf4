#!/usr/bin/env python
"""Wrapper script to run benchmarks with correct PYTHONPATH."""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from lapbench.cli.run_benchmark import main

if __name__ == "__main__":
    main()
