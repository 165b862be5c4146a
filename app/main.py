# app/main.py
"""
FastAPI application entry point.
Includes security middleware, error handlers, all routers, and the
startup hook that seeds the space pool and builds the parking engine.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import entry_exit, whitelist, spaces, vehicles, parking_stats, health
from app.database import init_db, SessionLocal
from app.config import settings
from app.services.entry_exit_service import ParkingEngine
from app.services.exceptions import ParkingError
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Scenic Parking API",
    description="Space allocation, package whitelist and half-day billing for a single parking lot.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (dashboard is served from another origin in development) ──────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Restrict to dashboard origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional lightweight API key auth.
    Set API_KEY in .env. Leave empty to disable auth.
    """
    open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Parking Error Handler ────────────────────────────────────────────────────
@app.exception_handler(ParkingError)
async def parking_error_handler(request: Request, exc: ParkingError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.error_code},
    )


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(entry_exit.router,    prefix="/api/v1", tags=["Gate"])
app.include_router(whitelist.router,     prefix="/api/v1", tags=["Package Whitelist"])
app.include_router(spaces.router,        prefix="/api/v1", tags=["Spaces"])
app.include_router(vehicles.router,      prefix="/api/v1", tags=["Vehicles"])
app.include_router(parking_stats.router, prefix="/api/v1", tags=["Stats"])
app.include_router(health.router,        prefix="/api/v1", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Scenic Parking backend starting up...")
    created = init_db()
    logger.info(f"Database tables ready ({created} spaces seeded)" if created else "Database tables ready")
    app.state.parking_engine = ParkingEngine(SessionLocal)
    logger.info(f"Lot: {settings.TOTAL_SPACES} spaces, {settings.PACKAGE_SPACES} package | "
                f"Rate: {settings.UNIT_RATE} per {settings.HALF_DAY_HOURS}h")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Scenic Parking backend shutting down...")
