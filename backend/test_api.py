# file: backend/test_api.py
"""
Marbles API — Request handler tests (FastAPI TestClient).

Covers:
  - PNG / SVG / colors endpoints for a valid seed
  - Missing or empty seed → "Seed not provided." and no generator call
  - Malformed seed → "Invalid seed."
  - Render failure → "Failed to render marble." (no internal detail leaked)
  - Response construction failure → "Failed to build response."
  - Determinism endpoint

Run:  py -3 backend/test_api.py
"""

from __future__ import annotations

import io
import os
import sys
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from PIL import Image

import backend.main as api
from marble_kernel.raster import RasterizationError, SvgParseError

client = TestClient(api.app)


def _assert_message(resp, message):
    assert resp.status_code == 400, resp.status_code
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"message": message}


# ---------------------------------------------------------------------------
# Success paths
# ---------------------------------------------------------------------------

def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_marble_png():
    with mock.patch.object(api, "RENDER_SIZE", 64):
        resp = client.get("/marble", params={"seed": "0"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    with Image.open(io.BytesIO(resp.content)) as img:
        assert img.size == (64, 64)


def test_marble_svg():
    resp = client.get("/marble.svg", params={"seed": "0"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert 'transform="rotate(0 40 40)"' in resp.text
    assert resp.text.count('fill="#FF0000"') == 3


def test_colors():
    resp = client.get("/colors", params={"seed": "0"})
    assert resp.status_code == 200
    assert resp.json() == {"seed": "0", "colors": ["#FF0000", "#FF0000", "#FF0000"]}


def test_verify_determinism():
    resp = client.get("/verify-determinism", params={"seed": "123456789"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["seed"] == "123456789"
    assert len(body["svg_hash"]) == 64


# ---------------------------------------------------------------------------
# Error paths
# ---------------------------------------------------------------------------

def test_missing_seed_never_reaches_generator():
    with mock.patch.object(api, "Marble") as marble_cls:
        for path in ("/marble", "/marble.svg", "/colors"):
            _assert_message(client.get(path), "Seed not provided.")
            _assert_message(client.get(path, params={"seed": ""}), "Seed not provided.")
        marble_cls.assert_not_called()
    _assert_message(client.get("/verify-determinism"), "Seed not provided.")


def test_invalid_seed():
    for bad in ("12a", "-1", "1.5", " 7", str(2**256)):
        _assert_message(client.get("/marble", params={"seed": bad}), "Invalid seed.")
    _assert_message(client.get("/colors", params={"seed": "12a"}), "Invalid seed.")
    _assert_message(client.get("/verify-determinism", params={"seed": "12a"}), "Invalid seed.")


def test_verify_determinism_rejections_logged():
    with mock.patch.object(api, "log") as log:
        _assert_message(client.get("/verify-determinism"), "Seed not provided.")
        _assert_message(client.get("/verify-determinism", params={"seed": "7x"}), "Invalid seed.")
    assert log.warning.call_count == 2


def test_render_failure_hides_detail():
    failures = (
        RasterizationError("resvg exploded: secret internals"),
        SvgParseError("bad xml: secret internals", ValueError("x")),
    )
    for failure in failures:
        with mock.patch.object(api.Marble, "render_png", side_effect=failure):
            resp = client.get("/marble", params={"seed": "42"})
        _assert_message(resp, "Failed to render marble.")
        assert "secret" not in resp.text


def test_response_construction_failure():
    with mock.patch.object(api, "RENDER_SIZE", 16), \
            mock.patch.object(api, "Response", side_effect=RuntimeError("boom")):
        resp = client.get("/marble", params={"seed": "42"})
    _assert_message(resp, "Failed to build response.")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def main():
    tests = [
        test_health,
        test_marble_png,
        test_marble_svg,
        test_colors,
        test_verify_determinism,
        test_missing_seed_never_reaches_generator,
        test_invalid_seed,
        test_verify_determinism_rejections_logged,
        test_render_failure_hides_detail,
        test_response_construction_failure,
    ]
    failed = 0
    for fn in tests:
        try:
            fn()
            print(f"  [PASS] {fn.__name__}")
        except Exception as exc:
            print(f"  [FAIL] {fn.__name__}: {exc}")
            failed += 1

    print(f"\n{'='*60}")
    print(f"  {len(tests) - failed} passed, {failed} failed out of {len(tests)}")
    print(f"{'='*60}")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
