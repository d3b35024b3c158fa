import logging
import os

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import sentry_sdk
from slowapi.errors import RateLimitExceeded

from .routers import scoring, standings
from .exceptions import DomainException, ProblemDetail
from .config import API_PREFIX
from .rate_limit import limiter, rate_limit_handler
from .utils.sentry import init_sentry, sentry_enabled

logger = logging.getLogger(__name__)

init_sentry()

# -----------------------------------------------------------------------------
# CORS configuration
# -----------------------------------------------------------------------------
allowed_origins_raw = os.getenv("ALLOWED_ORIGINS", "").strip()

if not allowed_origins_raw:
    raise ValueError(
        "ALLOWED_ORIGINS environment variable must be set to a comma-separated "
        "list of trusted origins."
    )

ALLOWED_ORIGINS = [o.strip() for o in allowed_origins_raw.split(",") if o.strip()]

if not ALLOWED_ORIGINS:
    raise ValueError("ALLOWED_ORIGINS must contain at least one non-empty origin.")
ALLOW_CREDENTIALS = os.getenv("ALLOW_CREDENTIALS", "true").lower() == "true"

if "*" in ALLOWED_ORIGINS:
    raise ValueError(
        "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
    )

# -----------------------------------------------------------------------------
# FastAPI app
# -----------------------------------------------------------------------------
app = FastAPI(
    title="Club Scoring API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("API_PREFIX=%r", API_PREFIX)

# -----------------------------------------------------------------------------
# Health checks
# -----------------------------------------------------------------------------
@app.get("/healthz", tags=["health"])  # Unprefixed for reverse proxy / uptime checks
def root_healthz():
    return {"status": "ok"}


@app.post(f"{API_PREFIX}/sentry-test", tags=["health"])
def sentry_test_check():
    if not sentry_enabled():
        raise HTTPException(status_code=400, detail="Sentry is not configured (SENTRY_DSN missing)")

    event_id = sentry_sdk.capture_message("Sentry self-test trigger", level="info")
    return {"status": "sent", "eventId": str(event_id)}


# -----------------------------------------------------------------------------
# Error handling
# -----------------------------------------------------------------------------
@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    return exc.to_problem(instance=request.url.path).to_response()


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    problem = ProblemDetail(
        title=detail,
        detail=detail,
        status=exc.status_code,
        instance=request.url.path,
        code=f"http_{exc.status_code}",
    )
    return problem.to_response(headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", exc_info=(type(exc), exc, exc.__traceback__))
    problem = ProblemDetail(
        title="Internal Server Error",
        status=500,
        detail=str(exc),
        instance=request.url.path,
        code="internal_server_error",
    )
    return problem.to_response()


# -----------------------------------------------------------------------------
# Routers
# -----------------------------------------------------------------------------
api_router = APIRouter(prefix=API_PREFIX, tags=["meta"])


@api_router.get("/healthz", tags=["health"])
def api_healthz():
    return {"status": "ok"}


@api_router.get("")
def api_root():
    return {"message": "Club Scoring API. See /docs."}


v0_router = APIRouter(prefix="/v0")
v0_router.include_router(scoring.router)
v0_router.include_router(standings.router)

api_router.include_router(v0_router)
app.include_router(api_router)
