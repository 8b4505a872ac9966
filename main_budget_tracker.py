"""Mini README: Entry point CLI for the budget tracker.

This script exposes a Typer CLI that records transactions, prints the
history and summary from the terminal, and launches the FastAPI interface
with configurable host and port. Settings come from ``BUDGET_TRACKER_*``
environment variables when available.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from budgettracker.configuration import get_settings
from budgettracker.finance import TransactionKind, ValidationError
from budgettracker.finance.projection import format_currency
from budgettracker.logging_utils import configure_root_logger
from budgettracker.session import BudgetSession

cli = typer.Typer(help="Record income and expenses and review your budget.")


def _open_session() -> BudgetSession:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return BudgetSession.from_settings(settings)


def _report_save(session: BudgetSession) -> None:
    result = session.store.last_save
    if result is not None and not result.ok:
        typer.secho(result.message, fg=typer.colors.YELLOW, err=True)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Tracker on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "budgettracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Positive amount."),
    category: str = typer.Option(..., "--category", "-c", help="Category label."),
    kind: TransactionKind = typer.Option(
        TransactionKind.INCOME, "--kind", "-k", case_sensitive=False, help="income or expense."
    ),
) -> None:
    """Record a new transaction."""

    session = _open_session()
    try:
        transaction = session.store.add(description, amount, category, kind)
    except ValidationError as error:
        typer.secho(error.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error
    typer.echo(
        f"{transaction.kind.label} added successfully! "
        f"{format_currency(transaction.amount, session.currency_symbol)} "
        f"({transaction.category}) id={transaction.id}"
    )
    _report_save(session)


@cli.command()
def history(
    limit: Optional[int] = typer.Option(None, min=1, help="Show only the newest N entries.")
) -> None:
    """Print transactions newest-first."""

    session = _open_session()
    rows = session.dashboard()["history"]
    if not rows:
        typer.echo("No transactions yet.")
        return
    for row in rows if limit is None else rows[:limit]:
        typer.echo(f"{row['id']}  {row['amount']:>14}  {row['description']}  ({row['meta']})")


@cli.command()
def summary() -> None:
    """Print totals and the expense breakdown."""

    session = _open_session()
    dashboard = session.dashboard()
    cards = dashboard["summary"]
    typer.echo(f"Balance: {cards['balance']}")
    typer.echo(f"Income:  {cards['income']}")
    typer.echo(f"Expense: {cards['expense']}")
    chart = dashboard["chart"]
    if not chart["has_data"]:
        typer.echo("No expense data to chart.")
        return
    typer.echo("Breakdown:")
    for entry in chart["legend"]:
        typer.echo(f"  {entry['label']:<28} {entry['amount']}")


@cli.command()
def delete(transaction_id: str = typer.Argument(..., help="Identifier to delete.")) -> None:
    """Delete a transaction by id."""

    session = _open_session()
    if session.store.remove(transaction_id):
        typer.echo("Transaction deleted.")
        _report_save(session)
    else:
        typer.echo(f"Transaction {transaction_id} not found.")


@cli.command()
def clear(yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt.")) -> None:
    """Remove every transaction."""

    session = _open_session()
    if session.store.is_empty:
        typer.echo("Nothing to clear!")
        return
    if not yes and not typer.confirm("Clear all transactions? This cannot be undone."):
        typer.echo("Cancelled.")
        return
    session.store.clear()
    typer.echo("All transactions cleared.")
    _report_save(session)


if __name__ == "__main__":
    cli()
