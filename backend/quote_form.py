"""
Interactive quote form — the state behind the pricing screen.

Holds an editable, ordered list of supply rows plus the profit percent.
Every edit re-prices the quote in-process with calculate_quote(); a bad
value just blanks the local result. The same input can be sent to the
quote API, and while a server result is held it is shown instead of the
local one until clear_remote() is called.
"""

import math
import uuid
from typing import Optional

from .calculators import InvalidInput, calculate_quote
from .config import settings
from .remote_client import RemoteQuoteClient, RemoteQuoteError

EDITABLE_FIELDS = ("name", "unit", "unit_cost", "quantity")


def _new_id() -> str:
    return uuid.uuid4().hex[:10]


def _format_money(value: Optional[float]) -> str:
    return f"{value:.2f}" if value is not None else "-"


class QuoteForm:
    """Editable quote with local and remote pricing."""

    def __init__(self, profit_percent: Optional[float] = None, supplies: Optional[list] = None,
                 remote: Optional[RemoteQuoteClient] = None):
        self.profit_percent = (
            profit_percent if profit_percent is not None else settings.DEFAULT_PROFIT_PERCENT
        )
        if supplies is None:
            supplies = [
                {"id": _new_id(), "name": "PLA", "unit": "g", "unit_cost": 0.02, "quantity": 100},
            ]
        self.supplies = [dict(s) for s in supplies]
        self.remote = remote or RemoteQuoteClient()

        self.local_quote: Optional[dict] = None
        self.remote_quote: Optional[dict] = None
        self.remote_error: Optional[str] = None
        self.is_calculating = False

        self._recalculate()

    # --- Editing ---

    def add_supply(self) -> str:
        """Append a blank row and return its id."""
        row_id = _new_id()
        self.supplies.append(
            {"id": row_id, "name": "New supply", "unit": "g", "unit_cost": 0.0, "quantity": 0.0}
        )
        self._recalculate()
        return row_id

    def update_supply(self, row_id: str, **changes):
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")
        row = self._find(row_id)
        row.update(changes)
        self._recalculate()

    def remove_supply(self, row_id: str):
        row = self._find(row_id)
        self.supplies.remove(row)
        self._recalculate()

    def set_profit_percent(self, value: float):
        self.profit_percent = value
        self._recalculate()

    def row_cost(self, row_id: str) -> Optional[float]:
        """Cost shown next to a row; None when it isn't a finite number."""
        row = self._find(row_id)
        try:
            cost = row["quantity"] * row["unit_cost"]
        except TypeError:
            return None
        return cost if math.isfinite(cost) else None

    # --- Pricing ---

    def request(self) -> dict:
        return {"supplies": self.supplies, "profit_percent": self.profit_percent}

    def calculate_remote(self) -> Optional[dict]:
        """Price the current input on the server. Local result is kept either way."""
        self.is_calculating = True
        self.remote_error = None
        try:
            self.remote_quote = self.remote.request_quote(self.supplies, self.profit_percent)
        except RemoteQuoteError as e:
            self.remote_quote = None
            self.remote_error = str(e)
        finally:
            self.is_calculating = False
        return self.remote_quote

    def clear_remote(self):
        """Back to the locally computed quote."""
        self.remote_quote = None
        self.remote_error = None

    @property
    def shown_quote(self) -> Optional[dict]:
        return self.remote_quote if self.remote_quote is not None else self.local_quote

    @property
    def source(self) -> str:
        return "remote" if self.remote_quote is not None else "local"

    def display(self) -> dict:
        """Strings for the totals panel."""
        shown = self.shown_quote
        breakdown = []
        if self.remote_quote is not None:
            breakdown = [f"{it['name']}: {it['cost']:.2f}" for it in self.remote_quote["items"]]
        return {
            "materials_cost": _format_money(shown["materials_cost"] if shown else None),
            "sale_price_suggested": _format_money(shown["sale_price_suggested"] if shown else None),
            "source": self.source,
            "error": self.remote_error,
            "breakdown": breakdown,
        }

    # --- Internals ---

    def _find(self, row_id: str) -> dict:
        for row in self.supplies:
            if row["id"] == row_id:
                return row
        raise KeyError(row_id)

    def _recalculate(self):
        try:
            self.local_quote = calculate_quote(self.request())
        except InvalidInput:
            self.local_quote = None
