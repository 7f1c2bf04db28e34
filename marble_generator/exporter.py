"""
Marble Exporter.

Writes one marble as <seed>.svg, <seed>.png and <seed>.json
(metadata: seed, descriptor, hashes) into a directory.
"""

from __future__ import annotations

import json
import os
from typing import Dict

from marble_kernel.constants import DEFAULT_RENDER_SIZE
from marble_kernel.hashing import canonical_hash, svg_hash
from marble_kernel.seed import SeedLike

from .marble import Marble


def export_marble(
    seed: SeedLike,
    directory: str,
    size: int = DEFAULT_RENDER_SIZE,
) -> Dict[str, str]:
    """
    Render a marble and write its three artifacts.

    The PNG is rendered before anything is written, so a RenderError
    leaves the directory untouched. Files are staged under temporary
    names and moved into place; if any step fails, every file this call
    wrote is removed again.

    Metadata format:
    {
        "seed": str,
        "size": int,
        "descriptor": {...},
        "descriptor_hash": str,
        "svg_hash": str
    }

    Returns the written paths keyed by "svg", "png", "json".
    """
    marble = Marble(seed)
    svg = marble.build_svg()
    png = marble.render_png(size)

    os.makedirs(directory, exist_ok=True)
    stem = os.path.join(directory, str(marble.seed))
    paths = {"svg": stem + ".svg", "png": stem + ".png", "json": stem + ".json"}

    doc = {
        "seed": str(marble.seed),
        "size": size,
        "descriptor": marble.descriptor.to_dict(),
        "descriptor_hash": canonical_hash(marble.descriptor),
        "svg_hash": svg_hash(svg),
    }

    contents = {
        "svg": svg.encode("utf-8"),
        "png": png,
        "json": json.dumps(doc, ensure_ascii=True, indent=2).encode("utf-8"),
    }
    _write_all(paths, contents)
    return paths


def _write_all(paths: Dict[str, str], contents: Dict[str, bytes]) -> None:
    """Write every artifact or none of them."""
    written = []
    try:
        for key, data in contents.items():
            tmp = paths[key] + ".tmp"
            written.append(tmp)
            with open(tmp, "wb") as f:
                f.write(data)
        for key in contents:
            os.replace(paths[key] + ".tmp", paths[key])
            written.append(paths[key])
    except Exception:
        for path in written:
            if os.path.exists(path):
                os.remove(path)
        raise
