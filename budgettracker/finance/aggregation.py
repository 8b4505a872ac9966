"""Mini README: Derived totals and category breakdown for the ledger.

Structure:
    * CategoryShare - one expense category with its sum and chart range.
    * AggregationResult - totals plus the ordered category breakdown.
    * AggregationEngine - stateless calculator producing ``AggregationResult``.

Breakdown order is descending by summed amount with ties broken by category
name, so the same persisted ledger always produces the same chart. Chart
ranges are contiguous, rounded to two decimals and pinned to end at 100.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from ..logging_utils import get_logger
from .models import Transaction, TransactionKind, category_colour

LOGGER = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class CategoryShare:
    """Expense total for one category and its slice of the chart."""

    category: str
    total: Decimal
    percentage: float
    start_percent: float
    end_percent: float
    colour: str

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "total": str(self.total),
            "percentage": self.percentage,
            "start_percent": self.start_percent,
            "end_percent": self.end_percent,
            "colour": self.colour,
        }


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Totals and breakdown derived from the current ledger."""

    total_income: Decimal
    total_expense: Decimal
    net_balance: Decimal
    category_breakdown: Tuple[CategoryShare, ...]

    @property
    def has_chart_data(self) -> bool:
        return bool(self.category_breakdown)

    def category_totals(self) -> Dict[str, Decimal]:
        """Ordered mapping of category to summed expense."""

        return {share.category: share.total for share in self.category_breakdown}

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_income": str(self.total_income),
            "total_expense": str(self.total_expense),
            "net_balance": str(self.net_balance),
            "category_breakdown": [share.as_dict() for share in self.category_breakdown],
        }


class AggregationEngine:
    """Compute aggregation results from a sequence of transactions."""

    def compute(self, transactions: Iterable[Transaction]) -> AggregationResult:
        total_income = ZERO
        total_expense = ZERO
        category_sums: Dict[str, Decimal] = {}

        for transaction in transactions:
            if transaction.kind is TransactionKind.INCOME:
                total_income += transaction.amount
            else:
                total_expense += transaction.amount
                category_sums[transaction.category] = (
                    category_sums.get(transaction.category, ZERO) + transaction.amount
                )

        breakdown = self._breakdown(category_sums, total_expense)
        LOGGER.debug(
            "Aggregated income=%s expense=%s categories=%s",
            total_income,
            total_expense,
            len(breakdown),
        )
        return AggregationResult(
            total_income=total_income,
            total_expense=total_expense,
            net_balance=total_income - total_expense,
            category_breakdown=breakdown,
        )

    @staticmethod
    def sort_categories(category_sums: Dict[str, Decimal]) -> List[Tuple[str, Decimal]]:
        """Order categories by descending sum, then by name."""

        return sorted(category_sums.items(), key=lambda item: (-item[1], item[0]))

    def _breakdown(
        self, category_sums: Dict[str, Decimal], total_expense: Decimal
    ) -> Tuple[CategoryShare, ...]:
        if total_expense <= ZERO:
            return ()

        ordered = self.sort_categories(category_sums)
        shares: List[CategoryShare] = []
        accumulated = ZERO
        for index, (category, total) in enumerate(ordered):
            share = total / total_expense * HUNDRED
            start = accumulated
            accumulated += share
            end = HUNDRED if index == len(ordered) - 1 else accumulated
            shares.append(
                CategoryShare(
                    category=category,
                    total=total,
                    percentage=float(share),
                    start_percent=round(float(start), 2),
                    end_percent=round(float(end), 2),
                    colour=category_colour(category),
                )
            )
        return tuple(shares)
