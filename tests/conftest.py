"""
Pytest configuration for validator tests.

This file adds the project root to the Python path so that tests
can import the timeguard package without an install step.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
