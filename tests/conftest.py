import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

YEAR = timedelta(days=365.25)


@pytest.fixture()
def start():
    return datetime(2020, 1, 1)


@pytest.fixture()
def twenty_percent_cashflows(start):
    return [
        {"date": start, "amount": -1000.0},
        {"date": start + YEAR, "amount": 1200.0},
    ]


@pytest.fixture()
def settings_file(tmp_path):
    def _write(body: str) -> Path:
        path = tmp_path / "metrics.yml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
