"""
Deterministic Marble Generator.

Produces reproducible SVG/PNG marbles from a single integer seed.
"""

from .composer import compose_descriptor, render_svg
from .deterministic_rng import SeedStream
from .exporter import export_marble
from .marble import Marble
from .shape_templates import SHAPE_TEMPLATES, ShapeTemplate
from .verification import DeterminismError, verify_marble

__all__ = [
    "compose_descriptor",
    "render_svg",
    "SeedStream",
    "export_marble",
    "Marble",
    "SHAPE_TEMPLATES",
    "ShapeTemplate",
    "DeterminismError",
    "verify_marble",
]
