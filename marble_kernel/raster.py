"""
Marble Kernel — Raster Adapter

Rasterizes an SVG document to a square, transparent-background PNG with
resvg (full SVG filter support, including feGaussianBlur).

Stages (each maps to exactly one RenderError subclass):
  1. parse      — well-formed <svg> document        → SvgParseError
  2. allocate   — size bounds / MemoryError         → PixelBufferError
  3. rasterize  — resvg_py.svg_to_bytes             → RasterizationError
  4. encode     — PNG bytes checked with Pillow     → EncodingError

Nothing is retried. Either a complete PNG is returned or a RenderError
is raised; partial output never escapes.
"""

from __future__ import annotations

import io
import logging
import time
import xml.etree.ElementTree as ElementTree

import resvg_py
from PIL import Image

from .constants import MAX_RENDER_SIZE

log = logging.getLogger(__name__)

_SVG_TAG = "{http://www.w3.org/2000/svg}svg"


# ══════════════════════════════════════════════════════════════
# Exception Hierarchy
# ══════════════════════════════════════════════════════════════

class RenderError(Exception):
    """Base exception for all rendering failures."""

    stage = "render"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class SvgParseError(RenderError):
    """Raised when the SVG document cannot be parsed."""

    stage = "parse"


class PixelBufferError(RenderError):
    """Raised when the target pixel buffer cannot be allocated."""

    stage = "allocate"


class RasterizationError(RenderError):
    """Raised when drawing the parsed document fails."""

    stage = "rasterize"


class EncodingError(RenderError):
    """Raised when the rendered pixels are not a valid PNG of the requested size."""

    stage = "encode"


# ══════════════════════════════════════════════════════════════
# Adapter
# ══════════════════════════════════════════════════════════════

def render_png(svg: str, size: int, max_size: int = MAX_RENDER_SIZE) -> bytes:
    """
    Rasterize an SVG document to PNG bytes of exactly size x size pixels.

    Raises a RenderError subclass naming the failed stage.
    """
    start = time.perf_counter()
    try:
        _parse(svg)
        _check_size(size, max_size)
        raw = _rasterize(svg, size)
        png = _encode(raw, size)
    except RenderError as exc:
        log.warning("Render failed at stage=%s size=%s: %s (cause: %r)",
                    exc.stage, size, exc, exc.cause)
        raise

    elapsed_ms = round((time.perf_counter() - start) * 1000.0, 2)
    log.debug("Rendered %dx%d PNG (%d bytes) in %sms", size, size, len(png), elapsed_ms)
    return png


def _parse(svg: str) -> None:
    try:
        root = ElementTree.fromstring(svg)
    except ElementTree.ParseError as exc:
        raise SvgParseError(f"Failed to parse SVG: {exc}", exc) from exc
    if root.tag != _SVG_TAG:
        raise SvgParseError(f"Root element is {root.tag!r}, expected <svg>")


def _check_size(size: int, max_size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise PixelBufferError(f"Pixel size must be an int, got {type(size).__name__}")
    if not 1 <= size <= max_size:
        raise PixelBufferError(
            f"Failed to create pixmap with size {size}x{size} (allowed 1..{max_size})"
        )


def _rasterize(svg: str, size: int):
    try:
        return resvg_py.svg_to_bytes(svg_string=svg, width=size, height=size)
    except MemoryError as exc:
        raise PixelBufferError(
            f"Failed to create pixmap with size {size}x{size}", exc
        ) from exc
    except Exception as exc:
        raise RasterizationError(f"Failed to render SVG: {exc}", exc) from exc


def _encode(raw, size: int) -> bytes:
    try:
        # Older resvg_py releases hand back a list of ints
        png = bytes(raw)
        with Image.open(io.BytesIO(png)) as img:
            fmt, dimensions = img.format, img.size
    except Exception as exc:
        raise EncodingError(f"Failed to encode PNG: {exc}", exc) from exc

    if fmt != "PNG" or dimensions != (size, size):
        raise EncodingError(
            f"Encoded image is {fmt} {dimensions[0]}x{dimensions[1]}, expected PNG {size}x{size}"
        )
    return png
