# file: backend/main.py
"""
FastAPI Backend — Marble Rendering API v1.

Stateless: every request builds its own Marble from the seed parameter.
No in-memory state between requests.

Endpoints:
  GET /marble?seed=              — PNG render (image/png)
  GET /marble.svg?seed=          — SVG document (image/svg+xml)
  GET /colors?seed=              — the three colors as JSON
  GET /verify-determinism?seed=  — build twice, compare hashes
  GET /health
"""
from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)

from fastapi import FastAPI, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Add project root to path for kernel imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from marble_kernel.constants import DEFAULT_RENDER_SIZE, MAX_RENDER_SIZE
from marble_kernel.raster import RenderError
from marble_kernel.seed import SeedFormatError

from marble_generator.marble import Marble
from marble_generator.verification import DeterminismError, verify_marble

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

RENDER_SIZE = int(os.environ.get("MARBLE_RENDER_SIZE", DEFAULT_RENDER_SIZE))
MAX_SIZE = int(os.environ.get("MARBLE_MAX_RENDER_SIZE", MAX_RENDER_SIZE))
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

# ---------------------------------------------------------------------------
# Client-facing messages (never include internal detail)
# ---------------------------------------------------------------------------

MSG_SEED_MISSING = "Seed not provided."
MSG_SEED_INVALID = "Invalid seed."
MSG_RENDER_FAILED = "Failed to render marble."
MSG_RESPONSE_FAILED = "Failed to build response."
MSG_NOT_DETERMINISTIC = "Determinism check failed."

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Marbles API",
    version="1.0.0",
    description="Deterministic seed → marble renderer",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    message: str


class ColorsResponse(BaseModel):
    seed: str
    colors: List[str]


class DeterminismResponse(BaseModel):
    status: str
    seed: str
    descriptor_hash: str
    svg_hash: str


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content=ErrorResponse(message=message).model_dump())


def _marble_or_error(seed: Optional[str]):
    """
    Build a Marble from the raw query value.

    Returns (marble, None) on success, (None, error_response) otherwise.
    A missing or empty seed never reaches the generator.
    """
    if not seed:
        log.warning("Rejected request: seed missing")
        return None, _error(MSG_SEED_MISSING)
    try:
        return Marble(seed), None
    except SeedFormatError as exc:
        log.warning("Rejected request: %s", exc.reason)
        return None, _error(MSG_SEED_INVALID)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/")
def read_root():
    return {"status": "ok", "message": "Marbles backend is running. GET /marble?seed=<digits>"}


@app.get("/health")
def health():
    return {"status": "ok", "version": "1.0.0"}


@app.get("/marble", responses={400: {"model": ErrorResponse}})
def get_marble_png(seed: Optional[str] = Query(None, description="Base-10 seed")):
    marble, error = _marble_or_error(seed)
    if error is not None:
        return error

    try:
        png = marble.render_png(RENDER_SIZE, max_size=MAX_SIZE)
    except RenderError as exc:
        log.error("Render failed for seed=%s at stage=%s: %r",
                  marble.seed, exc.stage, exc.cause or exc)
        return _error(MSG_RENDER_FAILED)

    try:
        return Response(content=png, media_type="image/png")
    except Exception as exc:
        log.error("Response construction failed for seed=%s: %s", marble.seed, exc)
        return _error(MSG_RESPONSE_FAILED)


@app.get("/marble.svg", responses={400: {"model": ErrorResponse}})
def get_marble_svg(seed: Optional[str] = Query(None, description="Base-10 seed")):
    marble, error = _marble_or_error(seed)
    if error is not None:
        return error

    try:
        return Response(content=marble.build_svg(), media_type="image/svg+xml")
    except Exception as exc:
        log.error("Response construction failed for seed=%s: %s", marble.seed, exc)
        return _error(MSG_RESPONSE_FAILED)


@app.get("/colors", response_model=ColorsResponse, responses={400: {"model": ErrorResponse}})
def get_colors(seed: Optional[str] = Query(None, description="Base-10 seed")):
    marble, error = _marble_or_error(seed)
    if error is not None:
        return error
    return ColorsResponse(seed=str(marble.seed), colors=list(marble.get_colors()))


@app.get("/verify-determinism", response_model=DeterminismResponse,
         responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}})
def verify_determinism(seed: Optional[str] = Query(None, description="Base-10 seed")):
    marble, error = _marble_or_error(seed)
    if error is not None:
        return error

    try:
        result = verify_marble(marble.seed)
    except DeterminismError as exc:
        log.error("%s", exc)
        return JSONResponse(
            status_code=409,
            content=ErrorResponse(message=MSG_NOT_DETERMINISTIC).model_dump(),
        )
    return DeterminismResponse(
        status="ok",
        seed=result["seed"],
        descriptor_hash=result["descriptor_hash"],
        svg_hash=result["svg_hash"],
    )
