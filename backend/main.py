from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .routers import quotes

logger = logging.getLogger("print_pricer")

app = FastAPI(
    title=settings.APP_NAME,
    description="Quote pricing for 3D-printed parts",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(quotes.router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def invalid_payload(request: Request, exc: RequestValidationError):
    """400 with a field-by-field breakdown. Input values are left out; NaN/Infinity can't go back out as JSON."""
    errors = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    logger.warning("Invalid payload on %s: %d error(s)", request.url.path, len(errors))
    return JSONResponse(status_code=400, content={"error": "Invalid payload", "detail": errors})


@app.get("/health")
def health():
    return {"status": "ok", "app": "print-pricer"}
