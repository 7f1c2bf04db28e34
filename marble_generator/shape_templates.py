"""
Shape Templates — The three fixed colored fragments of every marble.

Template order (ellipse-A, path, ellipse-B) fixes which drawn color
fills which shape; it is independent of the shuffled draw order.
Coordinates are kept verbatim: changing any byte changes every marble.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShapeTemplate:
    """One SVG fragment with a single {color} substitution point."""

    name: str
    fragment: str

    def fill(self, color: str) -> str:
        return self.fragment.format(color=color)


ELLIPSE_A = ShapeTemplate(
    name="ellipse_a",
    fragment=(
        '<g filter="url(#blur)" opacity=".9">\n'
        '    <ellipse cx="33.545" cy="32.494" fill="{color}" rx="33.545" ry="32.494" '
        'transform="matrix(-.48289 -.87568 .7985 -.602 9.46 74.034)"/>\n'
        '</g>\n'
    ),
)

PATH = ShapeTemplate(
    name="path",
    fragment=(
        '<g filter="url(#blur)" opacity=".8">\n'
        '    <path fill="{color}" d="M78.824-16.686c17.78 14.541 4.24 87.76-2.637 82.948-4.194-2.935'
        '-9.153-27.765-22.32-38.405-8.418-6.802-23.488-1.839-33.086-1.137-24.614 1.8 '
        '40.115-58.069 58.043-43.406Z"/>\n'
        '</g>\n'
    ),
)

ELLIPSE_B = ShapeTemplate(
    name="ellipse_b",
    fragment=(
        '<g filter="url(#blur)" opacity=".8">\n'
        '    <ellipse cx="39.533" cy="39.042" fill="{color}" rx="39.533" ry="39.042" '
        'transform="matrix(-.2882 -.95757 .93652 -.35062 13.847 67.74)" />\n'
        '</g>\n'
    ),
)

SHAPE_TEMPLATES: Tuple[ShapeTemplate, ShapeTemplate, ShapeTemplate] = (
    ELLIPSE_A,
    PATH,
    ELLIPSE_B,
)


# The enclosing document. Filter and clip definitions carry no random
# content; only {rotation} and {shapes} vary per marble.
DOCUMENT_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 80 80" '
    'transform="rotate({rotation} 40 40)">\n'
    '    <g clip-path="url(#a)">\n'
    '        <circle cx="40" cy="40" r="40" fill="#F8F8F8" />\n'
    '        {shapes}\n'
    '    </g>\n'
    '    <defs>\n'
    '        <filter id="blur" width="300" height="300" x="0" y="0" '
    'color-interpolation-filters="sRGB" filterUnits="userSpaceOnUse">\n'
    '            <feGaussianBlur result="effect1_foregroundBlur_557_59789" stdDeviation="9.6" />\n'
    '        </filter>\n'
    '        <clipPath id="a">\n'
    '            <rect width="80" height="80" fill="#fff" rx="40" />\n'
    '        </clipPath>\n'
    '    </defs>\n'
    '</svg>\n'
)
