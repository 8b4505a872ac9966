"""Mini README: Display-ready projection of the ledger and its aggregates.

Structure:
    * format_currency - magnitude with two decimals and Indian digit grouping.
    * format_balance - signed variant used for the net balance card.
    * history_rows - newest-first rows for the history list.
    * chart_projection - conic-gradient stops and legend entries.
    * build_dashboard - JSON-serialisable bundle consumed by the interfaces.

Nothing here renders markup; the functions only turn model data into strings
and plain dictionaries that a browser or terminal front-end can show as-is.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Iterable, List, Sequence

from .aggregation import AggregationResult
from .models import Transaction

DEFAULT_CURRENCY_SYMBOL = "₹"
CENT = Decimal("0.01")


def _group_indian(digits: str) -> str:
    """Group an integer string as 12,34,567."""

    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Decimal | float | int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format the absolute amount, e.g. ``₹12,34,567.89``."""

    magnitude = abs(Decimal(str(amount)))
    with localcontext() as context:
        context.prec = max(context.prec, magnitude.adjusted() + 4)
        quantised = magnitude.quantize(CENT, rounding=ROUND_HALF_UP)
    whole, _, fraction = f"{quantised:f}".partition(".")
    return f"{symbol}{_group_indian(whole)}.{fraction or '00'}"


def format_balance(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a balance, prefixing ``-`` when it is negative."""

    prefix = "-" if amount < 0 else ""
    return prefix + format_currency(amount, symbol)


def format_date(transaction: Transaction) -> str:
    """Short human date such as ``18 Oct 2026``."""

    stamp = transaction.timestamp
    return f"{stamp.day} {stamp.strftime('%b')} {stamp.year}"


def history_rows(
    transactions: Iterable[Transaction], symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> List[Dict[str, str]]:
    """Project transactions into history list rows, preserving order."""

    rows: List[Dict[str, str]] = []
    for transaction in transactions:
        sign = "+" if transaction.signed_amount > 0 else "-"
        rows.append(
            {
                "id": transaction.id,
                "kind": transaction.kind.value,
                "description": transaction.description,
                "category": transaction.category,
                "meta": f"{transaction.category} · {format_date(transaction)}",
                "amount": f"{sign}{format_currency(transaction.amount, symbol)}",
                "timestamp": transaction.timestamp.isoformat(),
            }
        )
    return rows


def chart_projection(
    result: AggregationResult, symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> Dict[str, object]:
    """Build the pie chart stops and legend for the expense breakdown."""

    if not result.has_chart_data:
        return {"has_data": False, "gradient": "", "legend": [], "total": format_currency(0, symbol)}

    stops = [
        f"{share.colour} {share.start_percent:.2f}% {share.end_percent:.2f}%"
        for share in result.category_breakdown
    ]
    legend = [
        {
            "category": share.category,
            "colour": share.colour,
            "percentage": f"{share.percentage:.1f}",
            "label": f"{share.category} ({share.percentage:.1f}%)",
            "amount": format_currency(share.total, symbol),
        }
        for share in result.category_breakdown
    ]
    return {
        "has_data": True,
        "gradient": f"conic-gradient({', '.join(stops)})",
        "legend": legend,
        "total": format_currency(result.total_expense, symbol),
    }


def build_dashboard(
    transactions: Sequence[Transaction],
    result: AggregationResult,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> Dict[str, object]:
    """Bundle summary cards, history rows and chart data."""

    return {
        "summary": {
            "balance": format_balance(result.net_balance, symbol),
            "income": format_currency(result.total_income, symbol),
            "expense": format_currency(result.total_expense, symbol),
        },
        "totals": result.as_dict(),
        "history": history_rows(transactions, symbol),
        "chart": chart_projection(result, symbol),
        "is_empty": not transactions,
    }
