"""Typer CLI application for box-score queries."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from ncaa_boxscore.evaluation import (
    Err,
    Ok,
    average_points_player,
    generate_matches_history,
    generate_player_report,
    match_most_valuable_player,
    purdue_best_month,
    purdue_best_winning_match_score,
)
from ncaa_boxscore.utils.logger import configure_logging, get_logger

app = typer.Typer(help="Purdue box-score log statistics")
console = Console()
logger = get_logger("cli")


@app.callback()
def _callback(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="QUIET | NORMAL | VERBOSE | DEBUG (default: $NCAA_BOXSCORE_LOG_LEVEL or NORMAL)",
    ),
) -> None:
    """Box-score log queries: match history, MVP, averages, best win/month, player reports."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    logger.debug("logging configured (--log-level=%s)", log_level)


def _fail(result: Err) -> NoReturn:
    logger.debug("command failed with %s", result.code.name)
    console.print(f"[red]ERROR: {result.code.name}[/red]")
    if result.message:
        console.print(result.message, markup=False, highlight=False)
    raise typer.Exit(code=1)


def _report_file(result: Ok[None] | Err, out_file: Path, *, show: bool) -> None:
    if isinstance(result, Err):
        _fail(result)
    console.print("[green]SUCCESS[/green]")
    if show:
        console.rule(str(out_file))
        text = out_file.read_text(encoding="utf-8", errors="replace")
        console.print(text, end="", markup=False, highlight=False)
        console.rule()


@app.command()
def history(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
    year: int = typer.Argument(..., help="Season year to summarise"),
    out_file: Path = typer.Argument(..., help="History file to write"),
    show: bool = typer.Option(False, "--show", help="Print the generated file"),
) -> None:
    """Write Purdue's match history and record for YEAR."""
    _report_file(generate_matches_history(in_file, year, out_file), out_file, show=show)


@app.command()
def mvp(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
    year: int = typer.Argument(...),
    month: int = typer.Argument(...),
    day: int = typer.Argument(...),
) -> None:
    """Print the best combined score (points + 1.5*ast + 2*blk + 0.2*min) of a match."""
    result = match_most_valuable_player(in_file, year, month, day)
    if isinstance(result, Err):
        _fail(result)
    console.print(f"MVP Combined Score: {result.value:.2f}")


@app.command()
def average(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
    player: str = typer.Argument(..., help="Exact player name"),
) -> None:
    """Print a player's average points per game."""
    result = average_points_player(in_file, player)
    if isinstance(result, Err):
        _fail(result)
    console.print(f"Average Points: {result.value:.2f}")


@app.command("best-win")
def best_win(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
    year: int = typer.Argument(...),
    month: int = typer.Argument(...),
) -> None:
    """Print Purdue's score in its widest-margin win of YEAR/MONTH."""
    result = purdue_best_winning_match_score(in_file, year, month)
    if isinstance(result, Err):
        _fail(result)
    console.print(f"Best Winning Match Score: {result.value}")


@app.command("best-month")
def best_month(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
) -> None:
    """Print the month with Purdue's highest win rate."""
    result = purdue_best_month(in_file)
    if isinstance(result, Err):
        _fail(result)
    console.print(f"Best Month: {result.value}")


@app.command()
def report(
    in_file: Path = typer.Argument(..., help="Box-score log to read"),
    player: str = typer.Argument(..., help="Exact Purdue player name"),
    out_file: Path = typer.Argument(..., help="Report file to write"),
    show: bool = typer.Option(False, "--show", help="Print the generated file"),
) -> None:
    """Write a per-game report for a Purdue player."""
    _report_file(generate_player_report(in_file, player, out_file), out_file, show=show)
