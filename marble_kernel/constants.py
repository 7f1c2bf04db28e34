"""
Marble Kernel — Fixed Constants

The palette and every modulus the generator draws with live here.
All values are immutable module-level data.
"""

from typing import Tuple

# --- Palette ---
# Order is part of the reproducibility contract. Duplicate entries
# (#00FF2A, #0000FF) are kept as shipped.
PALETTE: Tuple[str, ...] = (
    "#FF0000", "#FF2B00", "#FF5500", "#FF8000", "#FFAA00", "#FFD500", "#FFFF00", "#D4FF00",
    "#AAFF00", "#80FF00", "#55FF00", "#2BFF00", "#00FF00", "#00FF2A", "#00FF2A", "#00FF80",
    "#00FFAA", "#00FFD4", "#00FFFF", "#00D4FF", "#00AAFF", "#0080FF", "#0055FF", "#002AFF",
    "#0000FF", "#2A00FF", "#0000FF", "#5500FF", "#8000FF", "#AA00FF", "#D500FF", "#FF00FF",
    "#FF00D5", "#FF00AA", "#FF0080", "#FF0055",
)

# --- Draw moduli ---
COLOR_COUNT: int = len(PALETTE)
SHAPE_COUNT: int = 3
ROTATION_MODULUS: int = 359

# --- Seed bounds ---
SEED_BITS: int = 256
SEED_MAX: int = 2**SEED_BITS - 1

# --- Document geometry (logical units) ---
VIEWBOX_SIZE: int = 80
VIEWBOX_CENTER: int = VIEWBOX_SIZE // 2

# --- Rendering ---
DEFAULT_RENDER_SIZE: int = 1024
MAX_RENDER_SIZE: int = 4096
