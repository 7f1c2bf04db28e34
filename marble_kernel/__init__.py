"""
Marble Kernel
Pure domain for deterministic marbles: constants, seed conversion,
descriptor type, invariants, hashing and the raster adapter.
"""

from .constants import (
    PALETTE,
    COLOR_COUNT,
    SHAPE_COUNT,
    ROTATION_MODULUS,
    SEED_MAX,
    DEFAULT_RENDER_SIZE,
    MAX_RENDER_SIZE,
)
from .domain_types import MarbleDescriptor
from .seed import SeedFormatError, parse_seed
from .invariants import InvariantViolationError, check_draw_modulus, validate_descriptor
from .hashing import canonical_serialize, canonical_hash, svg_hash
from .raster import (
    RenderError,
    SvgParseError,
    PixelBufferError,
    RasterizationError,
    EncodingError,
    render_png,
)

__all__ = [
    "PALETTE",
    "COLOR_COUNT",
    "SHAPE_COUNT",
    "ROTATION_MODULUS",
    "SEED_MAX",
    "DEFAULT_RENDER_SIZE",
    "MAX_RENDER_SIZE",
    "MarbleDescriptor",
    "SeedFormatError",
    "parse_seed",
    "InvariantViolationError",
    "check_draw_modulus",
    "validate_descriptor",
    "canonical_serialize",
    "canonical_hash",
    "svg_hash",
    "RenderError",
    "SvgParseError",
    "PixelBufferError",
    "RasterizationError",
    "EncodingError",
    "render_png",
]
