import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators import InvalidInput, calculate_quote

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])


@router.post("/quote", response_model=schemas.QuoteResult)
def create_quote(payload: schemas.QuoteRequest):
    """
    Price a quote server-side. Same calculation the form runs locally.

    The payload shape is already checked by pydantic; the calculator
    re-checks its own domain rules (Infinity passes ge=0, for one).
    """
    try:
        result = calculate_quote(payload.model_dump())
    except InvalidInput as e:
        logger.warning("Rejected quote input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "Quote computed: %d supplies, materials %.4f, sale price %.4f",
        len(result["items"]), result["materials_cost"], result["sale_price_suggested"],
    )
    return result
