"""
Pytest configuration for the loader tests.
Puts the project root on sys.path so app, domain, repositories, services and
adapters import without installing the package.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
