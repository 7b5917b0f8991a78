# SPDX-License-Identifier: LGPL-3.0-or-later
import sys
from pathlib import Path

import pytest

_THIS_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _THIS_DIR.parent

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

FIXTURES = _THIS_DIR / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def sample_reg() -> Path:
    return FIXTURES / "sample.reg"


@pytest.fixture
def sample_ps1_text() -> str:
    return (FIXTURES / "sample.ps1").read_text(encoding="utf-8")
