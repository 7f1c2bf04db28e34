"""
Marble — One seed, one piece of vector art.

A Marble owns its SeedStream and lazily derives a MarbleDescriptor on
first access. The descriptor is cached for the lifetime of the instance,
so colors, SVG and PNG all come from a single consumption of the seed.
Instances are not shared; one per request.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Tuple, Union

from marble_kernel.constants import DEFAULT_RENDER_SIZE, MAX_RENDER_SIZE
from marble_kernel.domain_types import MarbleDescriptor
from marble_kernel.raster import render_png
from marble_kernel.seed import SeedLike, parse_seed

from .composer import compose_descriptor, render_svg
from .deterministic_rng import SeedStream

log = logging.getLogger(__name__)


class Marble:
    """Deterministic marble derived from a single seed."""

    def __init__(self, seed: SeedLike) -> None:
        # Raises SeedFormatError before any state exists.
        self._seed = parse_seed(seed)
        self._stream = SeedStream(self._seed)
        self._descriptor: Optional[MarbleDescriptor] = None

    def __repr__(self) -> str:
        return f"Marble(seed={self._seed})"

    @property
    def seed(self) -> int:
        """The seed this marble was created from (not the remaining entropy)."""
        return self._seed

    @property
    def remaining_entropy(self) -> int:
        return self._stream.value

    @property
    def descriptor(self) -> MarbleDescriptor:
        if self._descriptor is None:
            self._descriptor = compose_descriptor(self._stream)
        return self._descriptor

    def get_colors(self) -> Tuple[str, str, str]:
        """The three colors, in shape-template order."""
        return self.descriptor.colors

    def build_svg(self) -> str:
        """Build the SVG for the marble."""
        return render_svg(self.descriptor)

    def render_png(self, size: int = DEFAULT_RENDER_SIZE,
                   max_size: int = MAX_RENDER_SIZE) -> bytes:
        """
        Render the marble as a size x size PNG.

        Raises RenderError if the SVG cannot be parsed, the pixel buffer
        cannot be allocated, drawing fails, or PNG encoding fails.
        """
        return render_png(self.build_svg(), size, max_size=max_size)

    def save_png(self, size: int, path: Union[str, "os.PathLike[str]"]) -> None:
        """Render and write the PNG to `path`. Nothing is written on failure."""
        png = self.render_png(size)
        with open(path, "wb") as f:
            f.write(png)
        log.info("Saved marble seed=%s (%dx%d) to %s", self._seed, size, size, path)
