"""Typer CLI for portfolio metrics."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import Callable, NoReturn, Optional, TypeVar

import typer
from rich import print as rprint
from rich.markup import escape

from .config import MetricsSettings, load_settings
from .errors import MetricsError
from .ingest import read_cashflows, read_equity_curve, read_series
from .logging_setup import setup_logging
from .reports import compute_summary
from .returns import calculate_cagr, calculate_xirr
from .risk import calculate_max_drawdown, calculate_sharpe_ratio

T = TypeVar("T")

app = typer.Typer(help="Portfolio metrics CLI")


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise typer.BadParameter(f"{value} is not a YYYY-MM-DD date") from exc


def _settings(ctx: typer.Context) -> MetricsSettings:
    return ctx.obj["settings"]


def _fail(exc: MetricsError) -> NoReturn:
    rprint(f"[red]{exc.kind.value}: {escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def _read(reader: Callable[..., T], csv_path: str, *args: str) -> T:
    try:
        return reader(Path(csv_path), *args)
    except (FileNotFoundError, ValueError) as exc:
        rprint(f"[red]input_error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, help="YAML settings file"),
    log_level: Optional[str] = typer.Option(None, help="Logging level, e.g. DEBUG"),
) -> None:
    setup_logging(log_level)
    ctx.obj = {"settings": load_settings(Path(config) if config else None)}


@app.command()
def cagr(
    ctx: typer.Context,
    initial: float = typer.Argument(..., help="Initial value"),
    final: float = typer.Argument(..., help="Final value"),
    start: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="End date (YYYY-MM-DD)"),
    expense_ratio: Optional[float] = typer.Option(None, help="Annual expense ratio, e.g. 0.01"),
) -> None:
    try:
        result = calculate_cagr(
            initial,
            final,
            _parse_date(start),
            _parse_date(end),
            expense_ratio,
            settings=_settings(ctx),
        )
    except MetricsError as exc:
        _fail(exc)
    rprint(f"CAGR: [cyan]{result:.4%}[/cyan]")


@app.command()
def xirr(
    ctx: typer.Context,
    csv_path: str = typer.Argument(..., help="CSV file with cashflows"),
    date_column: str = typer.Option("date"),
    amount_column: str = typer.Option("amount"),
) -> None:
    cashflows = _read(read_cashflows, csv_path, date_column, amount_column)
    try:
        result = calculate_xirr(cashflows, settings=_settings(ctx))
    except MetricsError as exc:
        _fail(exc)
    rprint(f"XIRR: [cyan]{result:.4%}[/cyan]")


@app.command()
def sharpe(
    ctx: typer.Context,
    csv_path: str = typer.Argument(..., help="CSV file with periodic returns"),
    column: str = typer.Option("return", help="Returns column"),
    risk_free_rate: float = typer.Option(0.0, help="Risk-free rate per period"),
) -> None:
    returns = _read(read_series, csv_path, column)
    try:
        result = calculate_sharpe_ratio(returns, risk_free_rate, settings=_settings(ctx))
    except MetricsError as exc:
        _fail(exc)
    rprint(f"Sharpe ratio: [cyan]{result:.4f}[/cyan]")


@app.command()
def drawdown(
    csv_path: str = typer.Argument(..., help="CSV file with portfolio values"),
    column: str = typer.Option("value", help="Values column"),
) -> None:
    values = _read(read_series, csv_path, column)
    try:
        result = calculate_max_drawdown(values)
    except MetricsError as exc:
        _fail(exc)
    rprint(f"Max drawdown: [cyan]{result:.2%}[/cyan]")


@app.command()
def summary(
    ctx: typer.Context,
    csv_path: str = typer.Argument(..., help="CSV file with a dated equity curve"),
    date_column: str = typer.Option("date"),
    value_column: str = typer.Option("value"),
    risk_free_rate: float = typer.Option(0.0, help="Risk-free rate per period"),
    periods_per_year: int = typer.Option(12, help="Periods per year for volatility"),
) -> None:
    curve = _read(read_equity_curve, csv_path, date_column, value_column)
    try:
        report = compute_summary(curve, risk_free_rate, periods_per_year, settings=_settings(ctx))
    except MetricsError as exc:
        _fail(exc)
    for name, value in asdict(report).items():
        shown = "n/a" if value is None else f"{value:.4f}" if isinstance(value, float) else value
        rprint(f"{name}: [cyan]{shown}[/cyan]")


if __name__ == "__main__":
    app()
