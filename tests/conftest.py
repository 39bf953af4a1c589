"""Pytest configuration for the ieeebits test suite."""

import sys
from pathlib import Path

# Add the repository root to the path so the package imports uninstalled
sys.path.insert(0, str(Path(__file__).parent.parent))
