"""
Quote calculator — supplies + profit percent → materials cost + sale price.

Pure math. No I/O, no logging, no shared state.

Input: {"supplies": [SupplyLine dict, ...], "profit_percent": float}
Output: {"materials_cost": float, "sale_price_suggested": float,
         "items": [{"id", "name", "cost"}, ...]}
"""

import math


class InvalidInput(ValueError):
    """A supply line or the profit percent failed validation."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must be a non-negative number")


def _assert_finite_non_negative(value, field: str) -> None:
    # bool is an int subclass; True/False are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field)
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(field)


def calculate_quote(request: dict) -> dict:
    """
    Price a list of supplies and apply the profit markup.

    Raises InvalidInput on the first bad field, checked in order:
    profitPercent, then unitCost / quantity of each supply in input order.
    An empty supply list is valid here and prices to zero.
    """
    profit_percent = request.get("profit_percent")
    _assert_finite_non_negative(profit_percent, "profitPercent")

    items = []
    for supply in request.get("supplies", []):
        name = supply.get("name")
        unit_cost = supply.get("unit_cost")
        quantity = supply.get("quantity")
        _assert_finite_non_negative(unit_cost, f"unitCost({name})")
        _assert_finite_non_negative(quantity, f"quantity({name})")

        # unit ("g" or "fixed") is descriptive only
        items.append({"id": supply.get("id"), "name": name, "cost": quantity * unit_cost})

    # Left-to-right accumulation; sum() compensates rounding on 3.12+
    materials_cost = 0.0
    for item in items:
        materials_cost += item["cost"]

    sale_price_suggested = materials_cost * (1 + profit_percent / 100)

    return {
        "materials_cost": materials_cost,
        "sale_price_suggested": sale_price_suggested,
        "items": items,
    }
