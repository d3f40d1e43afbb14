"""
PremiumCore FastAPI Service

REST API over the premium calculation engine. Stateless: every request
is rated against the read-only coverage catalog loaded at startup.

Endpoints:
    GET  /health                - Liveness probe
    GET  /coverages             - Coverage catalog
    GET  /coverages/{type_id}   - One coverage type
    POST /quotes/clamp          - Clamp an amount to coverage bounds
    POST /quotes/premium        - Annual premium for one coverage
    POST /quotes/aggregate      - Policy total with per-line breakdown
    POST /quotes/risk           - Risk-adjusted premium
    POST /quotes/schedule       - Installment schedule
    POST /validate/*            - Input validators
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from premiumcore.api.routes import coverages, quotes, validation
from premiumcore.api.schemas.responses import HealthResponse
from premiumcore.catalog import CatalogLoader, CoverageCatalog, get_default_catalog
from premiumcore.config import Settings, load_settings
from premiumcore.exceptions import PremiumCoreError, UnknownCoverageType


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        for key in ("request_id", "method", "path", "status_code", "duration_ms", "error_code"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry)


def configure_logging(level: str) -> logging.Logger:
    """Attach the JSON handler to the 'premiumcore' logger once."""
    logger = logging.getLogger("premiumcore")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    return logger


logger = logging.getLogger("premiumcore.api")


# =============================================================================
# Catalog Loading
# =============================================================================

def load_configured_catalog(settings: Settings) -> CoverageCatalog:
    """
    Catalog named by PC_CATALOG_PATH, or the built-in one.

    A configured catalog that fails to load is logged and the built-in
    catalog is used instead.
    """
    if not settings.catalog_path:
        return get_default_catalog()
    try:
        return CatalogLoader().load(settings.catalog_path)
    except PremiumCoreError as e:
        logger.warning(
            f"Failed to load catalog {settings.catalog_path}, using built-in: {e}",
            extra={"error_code": e.code},
        )
        return get_default_catalog()


# =============================================================================
# FastAPI App
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the service with the given (or environment) settings."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    state = {"catalog": get_default_catalog()}

    def install_catalog(catalog: CoverageCatalog) -> None:
        state["catalog"] = catalog
        coverages.set_catalog(catalog)
        quotes.set_catalog(catalog)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the coverage catalog on startup."""
        catalog = load_configured_catalog(settings)
        install_catalog(catalog)
        logger.info(f"Coverage catalog ready: {catalog.version} ({len(catalog)} types)")
        yield

    app = FastAPI(
        title="PremiumCore",
        description="Insurance premium calculation and coverage validation",
        version=settings.engine_version,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # CORS (restrict in production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    install_catalog(get_default_catalog())
    quotes.set_default_term(settings.default_term)
    validation.set_currency_bounds(settings.currency_min, settings.currency_max)

    app.include_router(coverages.router)
    app.include_router(quotes.router)
    app.include_router(validation.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    @app.exception_handler(PremiumCoreError)
    async def premium_core_error_handler(request: Request, exc: PremiumCoreError):
        status_code = 404 if isinstance(exc, UnknownCoverageType) else 422
        return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        """Liveness probe (process alive)."""
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            engine_version=settings.engine_version,
            catalog_version=state["catalog"].version,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
