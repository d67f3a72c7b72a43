"""
HTTP client for the quote API.

Sends the form's supplies + profit percent to POST /api/quote and returns
the server's result in the same shape calculate_quote() returns locally.
"""

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Optional

from pydantic import ValidationError

from .config import settings
from .schemas import QuoteResult

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Error calculating quote on the server"


class RemoteQuoteError(Exception):
    """The quote service rejected the request or could not be reached."""


def _error_message(body: bytes) -> str:
    """Pull a readable message out of an error response body."""
    try:
        data = json.loads(body)
    except (ValueError, TypeError):
        return DEFAULT_ERROR
    if not isinstance(data, dict):
        return DEFAULT_ERROR
    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    error = data.get("error")
    if isinstance(error, str) and error:
        return error
    return DEFAULT_ERROR


class RemoteQuoteClient:
    """Thin urllib wrapper around the quote endpoint."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REMOTE_TIMEOUT_SECONDS

    def build_payload(self, supplies: list, profit_percent: float) -> dict:
        """Wire payload, camelCase field names."""
        return {
            "supplies": [
                {
                    "id": s["id"],
                    "name": s["name"],
                    "unit": s["unit"],
                    "unitCost": s["unit_cost"],
                    "quantity": s["quantity"],
                }
                for s in supplies
            ],
            "profitPercent": profit_percent,
        }

    def request_quote(self, supplies: list, profit_percent: float) -> dict:
        """
        POST the quote and return {"materials_cost", "sale_price_suggested", "items"}.

        Raises RemoteQuoteError with the server's message on a non-2xx
        response, or a connection message when the server is unreachable.
        """
        url = f"{self.base_url}/quote"
        payload = json.dumps(self.build_payload(supplies, profit_percent)).encode()

        req = urllib.request.Request(
            url,
            data=payload,
            headers={"Content-Type": "application/json"},
            method="POST"
        )

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                data = json.loads(response.read())
        except urllib.error.HTTPError as e:
            message = _error_message(e.read())
            logger.warning("Quote API returned %s: %s", e.code, message)
            raise RemoteQuoteError(message) from e
        except urllib.error.URLError as e:
            logger.warning("Quote API unreachable at %s: %s", url, e.reason)
            raise RemoteQuoteError(f"Quote service unreachable: {e.reason}") from e
        except (OSError, http.client.HTTPException) as e:
            # Read timeouts and dropped connections don't come wrapped in URLError
            logger.warning("Quote API connection failed at %s: %s", url, e)
            raise RemoteQuoteError(f"Quote service unreachable: {e}") from e
        except ValueError as e:
            raise RemoteQuoteError(f"Quote service returned invalid JSON: {e}") from e

        try:
            return QuoteResult.model_validate(data).model_dump()
        except ValidationError as e:
            raise RemoteQuoteError(f"Quote service returned an unexpected response: {e}") from e
