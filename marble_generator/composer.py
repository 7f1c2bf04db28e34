"""
Marble Composer — Deterministic seed → SVG document.

compose_descriptor(stream) → MarbleDescriptor
render_svg(descriptor)     → str

Draw order (the reproducibility contract; never reorder):
  1-3. color index per shape template          modulus 36 each
  4.   destructive shuffle of the filled shapes moduli 3, 2, 1
  5.   rotation                                 modulus 359

Output is validated against the descriptor invariants before returning.
"""

from __future__ import annotations

from typing import Tuple

from marble_kernel.constants import COLOR_COUNT, PALETTE, ROTATION_MODULUS, SHAPE_COUNT
from marble_kernel.domain_types import MarbleDescriptor
from marble_kernel.invariants import validate_descriptor

from .deterministic_rng import SeedStream
from .shape_templates import DOCUMENT_TEMPLATE, SHAPE_TEMPLATES


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def compose_descriptor(stream: SeedStream) -> MarbleDescriptor:
    """
    Perform every draw for one marble, in contract order.

    Consumes entropy from `stream`; callers must hand in a fresh stream
    and call this exactly once per marble.
    """
    # ── Steps 1-3: one color per template, template order ─────────────
    color_indices = _draw_color_indices(stream)

    # ── Step 4: draw order of the filled templates ────────────────────
    order = tuple(stream.shuffle(range(SHAPE_COUNT)))

    # ── Step 5: rotation ──────────────────────────────────────────────
    rotation = stream.draw(ROTATION_MODULUS)

    descriptor = MarbleDescriptor(
        color_indices=color_indices,
        colors=tuple(PALETTE[i] for i in color_indices),
        order=order,
        rotation=rotation,
    )
    validate_descriptor(descriptor)
    return descriptor


def render_svg(descriptor: MarbleDescriptor) -> str:
    """Assemble the full SVG document. Pure: no draws happen here."""
    shapes = "".join(
        SHAPE_TEMPLATES[i].fill(descriptor.colors[i]) for i in descriptor.order
    )
    return DOCUMENT_TEMPLATE.format(rotation=descriptor.rotation, shapes=shapes)


# ---------------------------------------------------------------------------
# Steps 1-3 — Colors
# ---------------------------------------------------------------------------

def _draw_color_indices(stream: SeedStream) -> Tuple[int, int, int]:
    first = stream.draw(COLOR_COUNT)
    second = stream.draw(COLOR_COUNT)
    third = stream.draw(COLOR_COUNT)
    return first, second, third
