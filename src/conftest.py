"""
Pytest Configuration
====================

Automatically loaded by pytest. Adds src/ to sys.path
so all modules are importable without installation.

Portable - works wherever the project is cloned.

Usage:
    cd src
    pytest tests/ -v
    pytest tests/ -v -m "not slow"     # skip period 11-14 builds
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """Add src/ to path before any imports happen."""
    src_root = Path(__file__).parent
    if str(src_root) not in sys.path:
        sys.path.insert(0, str(src_root))
    config.addinivalue_line("markers", "slow: builds covers of period 11 and above")


# Also do it at module level for non-pytest usage
src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))
