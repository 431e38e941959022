"""Pytest configuration to make the project root importable.

The calculator modules live at the repository root, so tests run from
any directory need it on ``sys.path``.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
