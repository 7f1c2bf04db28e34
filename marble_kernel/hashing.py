"""
Marble Kernel — Canonical Hashing

Deterministic canonical serialization + SHA-256 hashing of derived
marble state and of the rendered SVG text.

Rules:
  - Descriptor fields in fixed order
  - UTF-8 JSON, no whitespace, no float
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from .domain_types import MarbleDescriptor


def canonical_serialize(descriptor: MarbleDescriptor) -> bytes:
    """Canonical serialization of a descriptor to UTF-8 JSON bytes."""
    obj = _build_canonical_dict(descriptor)
    return json.dumps(obj, ensure_ascii=True, separators=(",", ":"), sort_keys=False).encode("utf-8")


def canonical_hash(descriptor: MarbleDescriptor) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(descriptor)).hexdigest()


def svg_hash(svg: str) -> str:
    """SHA-256 of the SVG document bytes. Lowercase hex string."""
    return hashlib.sha256(svg.encode("utf-8")).hexdigest()


def _build_canonical_dict(descriptor: MarbleDescriptor) -> Dict[str, Any]:
    return {
        "color_indices": list(descriptor.color_indices),
        "colors": list(descriptor.colors),
        "order": list(descriptor.order),
        "rotation": descriptor.rotation,
    }
