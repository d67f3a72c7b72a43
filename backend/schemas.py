from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SupplyUnit(str, Enum):
    GRAMS = "g"        # unit_cost is per gram
    FIXED = "fixed"    # unit_cost is a flat cost per unit of quantity


class SupplyLine(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    unit: SupplyUnit
    # strict: JSON numbers only, no "100" strings or true/false
    unit_cost: float = Field(..., ge=0, strict=True, alias="unitCost")
    quantity: float = Field(..., ge=0, strict=True)

    class Config:
        populate_by_name = True


class QuoteRequest(BaseModel):
    supplies: List[SupplyLine] = Field(..., min_length=1)
    profit_percent: float = Field(..., ge=0, strict=True, alias="profitPercent")

    class Config:
        populate_by_name = True


class QuoteItem(BaseModel):
    id: str
    name: str
    cost: float


class QuoteResult(BaseModel):
    materials_cost: float = Field(..., alias="materialsCost")
    sale_price_suggested: float = Field(..., alias="salePriceSuggested")
    items: List[QuoteItem] = []

    class Config:
        populate_by_name = True
