"""
Run the quote API under uvicorn.

    python -m backend.server        # or: print-pricer
"""

import logging

import uvicorn

from .config import settings

logger = logging.getLogger("print_pricer")


def log_level(name: str) -> int:
    """stdlib level for a uvicorn level name; unknown names (e.g. "trace") fall back to INFO."""
    return getattr(logging, name.upper(), logging.INFO)


def main():
    logging.basicConfig(
        level=log_level(settings.LOG_LEVEL),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger.info("API running at http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(
        "backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
