"""Pytest configuration.

unitconv/ lives at the repo root (flat layout) and tests may run without an
editable install, from a working directory that does not put the repo root on
sys.path. Insert it here so `import unitconv` always resolves.
"""

from __future__ import annotations

import sys
from pathlib import Path


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
