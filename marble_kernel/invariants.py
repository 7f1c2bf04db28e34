"""
Marble Kernel — Invariant Checks

Hard-fail validation. Every check raises InvariantViolationError on failure.
These guard programming errors, never bad user input: a seed value alone
can never trigger one.
"""

from __future__ import annotations

from .constants import COLOR_COUNT, PALETTE, ROTATION_MODULUS, SHAPE_COUNT
from .domain_types import MarbleDescriptor


class InvariantViolationError(Exception):
    """Raised when a generator invariant is violated."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def check_draw_modulus(modulus: int) -> None:
    """A draw needs a strictly positive modulus."""
    if modulus <= 0:
        raise InvariantViolationError(
            "draw_modulus",
            f"Draw requested with modulus {modulus}; choice sets must be non-empty",
        )


def validate_descriptor(descriptor: MarbleDescriptor) -> None:
    """
    Run all descriptor checks. Raises InvariantViolationError on the
    first failure.
    """
    _check_color_indices(descriptor)
    _check_order_is_permutation(descriptor)
    _check_rotation_range(descriptor)


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _check_color_indices(descriptor: MarbleDescriptor) -> None:
    if len(descriptor.color_indices) != SHAPE_COUNT:
        raise InvariantViolationError(
            "color_count",
            f"Expected {SHAPE_COUNT} colors, got {len(descriptor.color_indices)}",
        )
    for i, idx in enumerate(descriptor.color_indices):
        if not 0 <= idx < COLOR_COUNT:
            raise InvariantViolationError(
                "color_index",
                f"Color {i} index {idx} outside [0, {COLOR_COUNT})",
            )
        if descriptor.colors[i] != PALETTE[idx]:
            raise InvariantViolationError(
                "color_value",
                f"Color {i} is {descriptor.colors[i]!r}, palette has {PALETTE[idx]!r}",
            )


def _check_order_is_permutation(descriptor: MarbleDescriptor) -> None:
    if sorted(descriptor.order) != list(range(SHAPE_COUNT)):
        raise InvariantViolationError(
            "draw_order",
            f"Draw order {descriptor.order} is not a permutation of 0..{SHAPE_COUNT - 1}",
        )


def _check_rotation_range(descriptor: MarbleDescriptor) -> None:
    if not 0 <= descriptor.rotation < ROTATION_MODULUS:
        raise InvariantViolationError(
            "rotation_range",
            f"Rotation {descriptor.rotation} outside [0, {ROTATION_MODULUS})",
        )
