# Create a main router that includes all the individual routers
import re

from fastapi import FastAPI
from fastapi.routing import APIRoute

from bookshelf.metrics.router import MetricsRouter

from .books import router as books_router
from .chapters import router as chapters_router
from .sync import router as sync_router

router = MetricsRouter()

# Include all routers
router.include_router(sync_router)
router.include_router(books_router)
router.include_router(chapters_router)

_SEGMENT = re.compile(r"^(?:[A-Za-z0-9_.\-]+|\{[A-Za-z_][A-Za-z0-9_]*\})$")


def is_well_formed_path(path: str) -> bool:
    if path == "/":
        return True
    if not path.startswith("/") or path.endswith("/"):
        return False
    return all(_SEGMENT.match(segment) for segment in path[1:].split("/"))


def iter_api_routes(routes, prefix: str = ""):
    """Yield ``(full_path, route)`` for every API route, descending into included routers.

    Older FastAPI copies included routes into the parent with the prefix
    applied; newer releases keep a reference to the included router instead.
    """
    for route in routes:
        if isinstance(route, APIRoute):
            yield prefix + route.path, route
            continue
        included = getattr(route, "original_router", None)
        if included is not None:
            context = getattr(route, "include_context", None)
            yield from iter_api_routes(included.routes, prefix + getattr(context, "prefix", ""))


def verify_routes(app: FastAPI) -> list:
    """Refuse to start when an API route is declared with a malformed path.

    Returns the checked paths.
    """
    paths = [path for path, _ in iter_api_routes(app.routes)]
    if not paths:
        raise RuntimeError("No API routes registered.")
    bad = [path for path in paths if not is_well_formed_path(path)]
    if bad:
        raise RuntimeError(f"Malformed route path(s): {', '.join(bad)}")
    return paths
