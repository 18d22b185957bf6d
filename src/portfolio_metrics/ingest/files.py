"""Read cashflow and value series from CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from ..cashflows import Cashflow


def _read_csv(path: Path, columns: Iterable[str], parse_dates: list[str] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"CSV file {path} not found")
    frame = pd.read_csv(path)
    for column in columns:
        if column not in frame.columns:
            raise ValueError(f"Column {column!r} not found in {path}")
    for column in parse_dates or []:
        frame[column] = pd.to_datetime(frame[column])
    return frame


def read_cashflows(path: Path, date_column: str = "date", amount_column: str = "amount") -> list[Cashflow]:
    frame = _read_csv(Path(path), [date_column, amount_column], parse_dates=[date_column])
    return [
        Cashflow(date=row[date_column], amount=row[amount_column])
        for _, row in frame.iterrows()
    ]


def read_series(path: Path, column: str) -> list[float]:
    frame = _read_csv(Path(path), [column])
    return frame[column].tolist()


def read_equity_curve(path: Path, date_column: str = "date", value_column: str = "value") -> pd.Series:
    frame = _read_csv(Path(path), [date_column, value_column], parse_dates=[date_column])
    return frame.set_index(date_column)[value_column]
