"""
Poly Secret Web API.

JSON endpoints backed by the poly_secret library:

    POST /api/solve    recover the secret from a record
    POST /api/decode   decode a single value from its base
    GET  /api/methods  list interpolation methods
"""

import logging
import sys
from pathlib import Path

from aiohttp import web

# Ensure poly_secret is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from poly_secret import base, recovery
from poly_secret.interpolate import DEFAULT_METHODS, METHODS

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"
PORT = 8787


# ---------------------------------------------------------------------------
# API handlers
# ---------------------------------------------------------------------------

async def api_solve(request: web.Request) -> web.Response:
    """
    POST /api/solve
    Body JSON: { record: {...}, methods?: [str], primary?: str, exact?: bool }

    Returns: { ok, n, k, degree, points, selected, primary, secret, validation, ... }
    """
    try:
        data = await request.json()
    except ValueError:
        return _err("Invalid JSON body", 400)

    if not isinstance(data, dict):
        return _err("Body must be a JSON object", 400)

    record = data.get("record")
    if record is None:
        return _err("Missing record", 400)

    methods = data.get("methods") or list(DEFAULT_METHODS)
    if not isinstance(methods, list) or not all(isinstance(m, str) for m in methods):
        return _err("methods must be a list of method names", 400)
    primary = data.get("primary") or methods[0]
    exact = data.get("exact", True)
    if not isinstance(exact, bool):
        return _err("exact must be a boolean", 400)

    try:
        rec = recovery.solve(record, methods=methods, primary=primary, exact=exact)
    except ValueError as exc:
        logger.info("Solve rejected: %s", exc)
        return _err(f"Solve failed: {exc}", 400)

    result = rec.to_dict()
    result["ok"] = True
    return web.json_response(result)


async def api_decode(request: web.Request) -> web.Response:
    """
    POST /api/decode
    Body JSON: { value: str, base: int }

    Returns: { ok, value, base, decimal }
    """
    try:
        data = await request.json()
    except ValueError:
        return _err("Invalid JSON body", 400)

    if not isinstance(data, dict):
        return _err("Body must be a JSON object", 400)

    value = data.get("value")
    raw_base = data.get("base")
    if not isinstance(value, str) or raw_base is None:
        return _err("Missing value or base", 400)

    try:
        b = int(raw_base)
    except (ValueError, TypeError):
        return _err("base must be an integer", 400)

    try:
        decimal = base.decode(value, b)
    except ValueError as exc:
        return _err(str(exc), 400)

    # decimal_str is exact for clients limited to 53-bit integers
    return web.json_response({
        "ok": True,
        "value": value,
        "base": b,
        "decimal": decimal,
        "decimal_str": str(decimal),
    })


async def api_methods(request: web.Request) -> web.Response:
    """GET /api/methods"""
    return web.json_response({
        "ok": True,
        "methods": sorted(METHODS),
        "default": list(DEFAULT_METHODS),
    })


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _err(msg: str, status: int = 400) -> web.Response:
    return web.json_response({"ok": False, "error": msg}, status=status)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> web.Application:
    app = web.Application(client_max_size=1024 * 1024)

    app.router.add_post("/api/solve", api_solve)
    app.router.add_post("/api/decode", api_decode)
    app.router.add_get("/api/methods", api_methods)

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    print(f"Poly Secret API — http://localhost:{PORT}")
    web.run_app(app, host=HOST, port=PORT)
