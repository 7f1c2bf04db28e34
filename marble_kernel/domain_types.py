"""
Marble Kernel — Domain Types

Frozen value types describing one derived marble.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MarbleDescriptor:
    """Everything the generator derives from a seed."""

    color_indices: Tuple[int, int, int]   # one per shape template, template order
    colors: Tuple[str, str, str]          # PALETTE[i] for each index above
    order: Tuple[int, int, int]           # template indices, bottom to top
    rotation: int                         # degrees, 0..358

    def to_dict(self) -> dict:
        """Serialise to plain dict for JSON export."""
        return {
            "color_indices": list(self.color_indices),
            "colors": list(self.colors),
            "order": list(self.order),
            "rotation": self.rotation,
        }
