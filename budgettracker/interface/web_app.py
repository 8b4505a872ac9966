"""Mini README: FastAPI-powered JSON interface for the budget tracker.

Structure:
    * create_application - application factory wiring routes to a session.

The interface exposes the ledger intents (add, delete, clear) and the derived
dashboard as JSON so any browser front-end can drive it. Handlers are
coroutines without awaits, so every mutation (including its write-through)
completes on the event loop before the next request is processed.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..finance import (
    Transaction,
    TransactionKind,
    ValidationError,
    category_colour,
)
from ..finance.projection import format_currency
from ..logging_utils import get_logger
from ..session import BudgetSession

LOGGER = get_logger(__name__)


def _transaction_payload(transaction: Transaction, symbol: str) -> Dict[str, object]:
    payload: Dict[str, object] = transaction.as_dict()
    payload["formatted_amount"] = format_currency(transaction.amount, symbol)
    return payload


def create_application(session: Optional[BudgetSession] = None) -> FastAPI:
    """Create the FastAPI application bound to a budget session."""

    app = FastAPI(title="Budget Tracker", version="0.1.0")
    session = session or BudgetSession.from_settings()
    store = session.store
    symbol = session.currency_symbol

    def _save_payload() -> Dict[str, object]:
        result = store.last_save
        return {
            "saved": result is None or result.ok,
            "save_message": None if result is None or result.ok else result.message,
        }

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return the ledger newest-first."""

        transactions = [_transaction_payload(item, symbol) for item in store.all()]
        LOGGER.debug("Returning %s transactions", len(transactions))
        return JSONResponse({"transactions": transactions})

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: str) -> JSONResponse:
        """Return a single transaction."""

        try:
            transaction = store.get(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(_transaction_payload(transaction, symbol))

    @app.post("/transactions", status_code=201)
    async def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        category: str = Form(""),
        kind: str = Form(TransactionKind.INCOME.value),
    ) -> JSONResponse:
        """Validate form input and record a new transaction."""

        try:
            transaction = store.add(description, amount, category, kind)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=error.message) from error
        payload = {
            "transaction": _transaction_payload(transaction, symbol),
            "message": f"{transaction.kind.label} added successfully!",
            **_save_payload(),
        }
        return JSONResponse(payload, status_code=201)

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        """Delete a transaction; unknown ids are reported, not rejected."""

        removed = store.remove(transaction_id)
        message = "Transaction deleted." if removed else "Transaction not found."
        return JSONResponse({"removed": removed, "message": message, **_save_payload()})

    @app.post("/transactions/clear")
    async def clear_transactions(confirm: bool = Form(False)) -> JSONResponse:
        """Clear the ledger once the caller confirms."""

        if store.is_empty:
            return JSONResponse({"cleared": False, "message": "Nothing to clear!", "saved": True})
        if not confirm:
            raise HTTPException(status_code=400, detail="Clearing requires confirm=true.")
        store.clear()
        return JSONResponse(
            {"cleared": True, "message": "All transactions cleared.", **_save_payload()}
        )

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return totals, history rows and chart data."""

        return JSONResponse(session.dashboard())

    @app.get("/categories")
    async def categories() -> JSONResponse:
        """Return the category sets offered per kind, with colours."""

        return JSONResponse(
            {
                kind.value: [
                    {"name": name, "colour": category_colour(name)} for name in kind.categories()
                ]
                for kind in TransactionKind
            }
        )

    return app
