"""
Number Reader — FastAPI Server
===============================

RESTful API for spelling out numeric literals in words.

Endpoints:
    POST /read              Read one number
    POST /read/batch        Read up to 100 numbers in one call
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    NUMBER_READER_CONFIG=en.json uvicorn api:app --host 0.0.0.0

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, StrictInt, StrictStr

from number_reader import __version__
from number_reader.config import load_config_from_env
from number_reader.exceptions import NumberReadingError
from number_reader.models import ReadingConfig
from number_reader.reader import convert_number_to_words

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load config once) ────────────────────────

_config: ReadingConfig | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the reading config ($NUMBER_READER_CONFIG) on startup."""
    global _config  # noqa: PLW0603
    _config = load_config_from_env()
    yield
    _config = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Reader API",
    description=(
        "Spell out integers and decimals in words, with grouping separators, "
        "negative numbers, tone-mutated trailing digits and a currency unit."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

# Strict: JSON true or 2.0 must not slip through as an int
NumberValue = Union[StrictStr, StrictInt]


class ReadRequest(BaseModel):
    """Request body for the /read endpoint."""

    value: NumberValue = Field(
        ...,
        description="A decimal literal string (e.g. \"-1,234.50\") or a JSON integer.",
        json_schema_extra={"example": "3,000,001"},
    )


class ReadResponse(BaseModel):
    value: NumberValue
    text: str

    model_config = {"json_schema_extra": {"example": {
        "value": "3,000,001",
        "text": "Ba triệu không trăm lẻ một đồng",
    }}}


class ErrorOut(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class BatchReadRequest(BaseModel):
    """Request body for the /read/batch endpoint."""

    values: list[NumberValue] = Field(..., min_length=1, max_length=100)


class BatchItem(BaseModel):
    """One batch result: exactly one of `text` or `error` is set."""

    value: NumberValue
    text: Optional[str] = None
    error: Optional[ErrorOut] = None


class BatchReadResponse(BaseModel):
    results: list[BatchItem]


class HealthResponse(BaseModel):
    status: str
    version: str
    language_unit: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_config() -> ReadingConfig:
    if _config is None:
        raise HTTPException(status_code=503, detail="Reading config not initialised")
    return _config


def _error_out(exc: NumberReadingError) -> ErrorOut:
    return ErrorOut(code=exc.code, message=exc.message, details=exc.details)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/read",
    summary="Read a number in words",
    tags=["Reading"],
    responses={
        422: {"description": "Unsupported or malformed number"},
        503: {"description": "Reading config not yet initialised"},
    },
)
def read_number(request: ReadRequest) -> ReadResponse:
    """Convert one numeric literal to its written-word form."""
    config = _get_config()
    try:
        text = convert_number_to_words(request.value, config)
    except NumberReadingError as exc:
        logger.warning("Rejected %r: [%s] %s", request.value, exc.code, exc.message)
        raise HTTPException(status_code=422, detail=_error_out(exc).model_dump())
    return ReadResponse(value=request.value, text=text)


@app.post(
    "/read/batch",
    summary="Read several numbers in words",
    tags=["Reading"],
    responses={503: {"description": "Reading config not yet initialised"}},
)
def read_batch(request: BatchReadRequest) -> BatchReadResponse:
    """Convert each value independently; one bad value does not fail the batch."""
    config = _get_config()
    results: list[BatchItem] = []
    for value in request.values:
        try:
            results.append(BatchItem(value=value, text=convert_number_to_words(value, config)))
        except NumberReadingError as exc:
            logger.warning("Rejected %r in batch: [%s] %s", value, exc.code, exc.message)
            results.append(BatchItem(value=value, error=_error_out(exc)))
    return BatchReadResponse(results=results)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Reading config not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    config = _get_config()
    return HealthResponse(
        status="healthy",
        version=__version__,
        language_unit=" ".join(config.unit),
    )
