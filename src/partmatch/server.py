"""partmatch MCP Server - Classify and compare electronic component part numbers."""

import logging
import math
import time
from collections import deque
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import __version__
from .config import (
    HIGH_SIMILARITY,
    HTTP_PORT,
    LOG_LEVEL,
    MAX_MPN_LENGTH,
    MAX_TEXT_LENGTH,
    MAX_TEXT_RESULTS,
    MEDIUM_SIMILARITY,
    NO_SIMILARITY,
    RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW,
)
from .engine import get_engine
from .extraction import extract_mpns

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Build the engine (pattern tables, registry) once on startup."""
    engine = get_engine()
    logger.info(f"Loaded {len(engine.handlers())} manufacturer handlers")
    yield


# Create MCP server
mcp = FastMCP(
    name="partmatch",
    instructions=(
        "Electronic component MPN classification and interchangeability. No auth required. "
        "Use classify_part to identify an MPN, compare_parts to score two parts, "
        "check_replacement to ask whether one part can replace another."
    ),
    lifespan=lifespan,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window request limit per client IP. /health is exempt.

    The client table is capped at MAX_TRACKED_IPS. When it is full and no idle
    client can be evicted, unseen clients are refused until entries age out.
    """

    MAX_TRACKED_IPS = 10_000

    def __init__(self, app, requests: int = RATE_LIMIT_REQUESTS, window: int = RATE_LIMIT_WINDOW):
        super().__init__(app)
        self.requests = requests
        self.window = window
        self.hits: dict[str, deque[float]] = {}
        self._next_sweep = time.monotonic() + window

    @staticmethod
    def client_ip(request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            # Rightmost hop is the one our reverse proxy appended
            return forwarded.rsplit(",", 1)[-1].strip() or "unknown"
        return request.client.host if request.client else "unknown"

    def sweep(self, now: float) -> None:
        """Forget clients with no request inside the window."""
        cutoff = now - self.window
        for ip in [ip for ip, hits in self.hits.items() if not hits or hits[-1] <= cutoff]:
            del self.hits[ip]

    def retry_after(self, client_ip: str, now: float | None = None) -> int | None:
        """Seconds until client_ip may send again, or None when the request is admitted and recorded."""
        now = time.monotonic() if now is None else now
        if now >= self._next_sweep:
            self.sweep(now)
            self._next_sweep = now + self.window

        hits = self.hits.get(client_ip)
        if hits is None:
            if len(self.hits) >= self.MAX_TRACKED_IPS:
                self.sweep(now)
            if len(self.hits) >= self.MAX_TRACKED_IPS:
                logger.warning(f"Rate limiter full ({len(self.hits)} clients), refusing {client_ip}")
                return self.window
            hits = self.hits[client_ip] = deque()

        cutoff = now - self.window
        while hits and hits[0] <= cutoff:
            hits.popleft()
        if len(hits) >= self.requests:
            return max(1, math.ceil(hits[0] + self.window - now))
        hits.append(now)
        return None

    async def dispatch(self, request, call_next):
        if request.url.path == "/health":
            return await call_next(request)

        wait = self.retry_after(self.client_ip(request))
        if wait is not None:
            return JSONResponse(
                status_code=429,
                content={"error": "Rate limit exceeded", "retry_after": wait},
                headers={"Retry-After": str(wait)},
            )
        return await call_next(request)


def _validate_mpn(mpn: str | None, label: str = "mpn") -> str | None:
    """Return an error message for an unusable MPN argument, else None."""
    if not mpn or not mpn.strip():
        return f"{label} is required"
    if len(mpn) > MAX_MPN_LENGTH:
        return f"{label} too long (max {MAX_MPN_LENGTH} characters)"
    return None


# Tools

@mcp.tool(
    annotations=ToolAnnotations(
        title="Classify Part Number",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def classify_part(mpn: str) -> dict:
    """Identify a manufacturer part number.

    Args:
        mpn: Manufacturer part number (e.g., "AOD4184A", "LM358DR", "GRM188R71H104KA93D")

    Returns:
        mpn, recognized, primary_type, category, types (every matching type tag),
        manufacturer, package, series, attributes (category-specific: channels,
        density_kbit, pitch, capacitance, ...), other_manufacturers (vendors whose
        patterns also accept the MPN).
    """
    error = _validate_mpn(mpn)
    if error:
        return {"error": error}
    try:
        return get_engine().classify(mpn).to_dict()
    except Exception as e:
        logger.error(f"classify_part failed for {mpn!r}: {type(e).__name__}: {e}")
        return {"error": "Classification failed"}


@mcp.tool(
    annotations=ToolAnnotations(
        title="Compare Two Parts",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def compare_parts(mpn_a: str, mpn_b: str) -> dict:
    """Score how interchangeable two parts are.

    Args:
        mpn_a: First manufacturer part number
        mpn_b: Second manufacturer part number

    Returns:
        similarity (0.0-1.0: 0.9 drop-in equivalent, 0.7 compatible with caveats,
        0.3 same category, 0.0 different category or unrecognized), band, and
        both classifications.
    """
    for value, label in ((mpn_a, "mpn_a"), (mpn_b, "mpn_b")):
        error = _validate_mpn(value, label)
        if error:
            return {"error": error}
    try:
        engine = get_engine()
        a, b = engine.classify(mpn_a), engine.classify(mpn_b)
        score = engine.similarity_of(a, b)
    except Exception as e:
        logger.error(f"compare_parts failed for {mpn_a!r}, {mpn_b!r}: {type(e).__name__}: {e}")
        return {"error": "Comparison failed"}
    return {
        "similarity": score,
        "band": _band(score),
        "part_a": a.to_dict(),
        "part_b": b.to_dict(),
    }


def _band(score: float) -> str:
    if score >= 1.0:
        return "identical"
    if score >= HIGH_SIMILARITY:
        return "high"
    if score >= MEDIUM_SIMILARITY:
        return "medium"
    if score > NO_SIMILARITY:
        return "low"
    return "none"


@mcp.tool(
    annotations=ToolAnnotations(
        title="Check Replacement",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def check_replacement(candidate: str, original: str) -> dict:
    """Check whether one part can replace another (directional).

    Args:
        candidate: Part you want to use instead (e.g., "UHS1E101MPD")
        original: Part in the existing design (e.g., "UHW1E101MPD")

    Returns:
        can_replace, reason, similarity, specs_verified (attributes confirmed equal
        or better), specs_unparseable (attributes known on only one side).
    """
    for value, label in ((candidate, "candidate"), (original, "original")):
        error = _validate_mpn(value, label)
        if error:
            return {"error": error}
    try:
        verdict, info = get_engine().explain_replacement(candidate, original)
    except Exception as e:
        logger.error(f"check_replacement failed for {candidate!r}, {original!r}: {type(e).__name__}: {e}")
        return {"error": "Replacement check failed"}
    return {"candidate": candidate, "original": original, "can_replace": verdict, **info}


@mcp.tool(
    annotations=ToolAnnotations(
        title="Find Parts in Text",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def find_parts_in_text(text: str) -> dict:
    """Extract recognized part numbers from free text such as a BOM line or order note.

    Args:
        text: Free text (e.g., "U1 P/N: LM358DR; C3 GRM188R71H104KA93D")

    Returns:
        parts: list of classifications in order of appearance, count.
    """
    if not text or not text.strip():
        return {"error": "text is required"}
    if len(text) > MAX_TEXT_LENGTH:
        return {"error": f"Text too long (max {MAX_TEXT_LENGTH} characters)"}
    try:
        engine = get_engine()
        mpns = extract_mpns(text, engine=engine, limit=MAX_TEXT_RESULTS)
        parts = [engine.classify(mpn).to_dict() for mpn in mpns]
    except Exception as e:
        logger.error(f"find_parts_in_text failed: {type(e).__name__}: {e}")
        return {"error": "Extraction failed"}
    return {"parts": parts, "count": len(parts)}


@mcp.tool(
    annotations=ToolAnnotations(
        title="List Manufacturers",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def list_manufacturers() -> dict:
    """List supported manufacturers and the component types each one classifies.

    Returns:
        manufacturers: list of {name, manufacturer, types} in dispatch order.
    """
    manufacturers = [
        {
            "name": handler.name,
            "manufacturer": handler.manufacturer,
            "types": [t.value for t in handler.ordered_types()],
        }
        for handler in get_engine().handlers()
    ]
    return {"manufacturers": manufacturers, "count": len(manufacturers)}


async def health(request):
    return JSONResponse({
        "status": "healthy",
        "service": "partmatch-mcp",
        "version": __version__,
    })


# Create ASGI app
def create_app():
    """Create the ASGI application."""
    middleware = [
        Middleware(RateLimitMiddleware, requests=RATE_LIMIT_REQUESTS, window=RATE_LIMIT_WINDOW),
    ]

    # stateless_http=True: clients do not forward session cookies
    app = mcp.http_app(
        path="/mcp",
        middleware=middleware,
        transport="streamable-http",
        stateless_http=True,
    )

    app.routes.append(Route("/health", health))

    return app


app = create_app()


class _HealthFilterLog(logging.Filter):
    """Suppress noisy /health access logs from container healthchecks."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "/health" not in record.getMessage()


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("uvicorn.access").addFilter(_HealthFilterLog())

    uvicorn.run(
        "partmatch.server:app",
        host="0.0.0.0",
        port=HTTP_PORT,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
