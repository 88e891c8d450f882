# uicraft/main.py
"""
UICraft Backend - prompt-to-UI generation service.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from uicraft.api import health, generate, versions, providers
from uicraft.core.config import settings
from uicraft.core.exceptions import PersistenceError, UICraftError
from uicraft.core.logging import log
from uicraft.db import connect_db, disconnect_db


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    log("API", "UICraft starting...")
    log("API", f"Primary provider: {settings.llm.primary_provider} (key loaded: {bool(settings.llm.gemini_api_key)})")
    log("API", f"Fallback provider: {settings.llm.fallback_provider} (key loaded: {bool(settings.llm.groq_api_key)})")
    await connect_db()

    yield

    log("API", "Shutting down...")
    await disconnect_db()


# ---------------------------------------------------------------------------
# APP INITIALIZATION
# ---------------------------------------------------------------------------

app = FastAPI(
    title="UICraft",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.cors_origins == ["*"] and not settings.debug:
    log("API", "Warning: allow_origins=['*'] - set CORS_ORIGINS in production")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate Limiting - every generation costs provider quota
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# ---------------------------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------------------------

@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=503, content={"detail": exc.message, **exc.details})


@app.exception_handler(UICraftError)
async def uicraft_error_handler(request: Request, exc: UICraftError):
    log("API", f"Unhandled error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"detail": exc.message})


# ---------------------------------------------------------------------------
# API ROUTES
# ---------------------------------------------------------------------------

app.include_router(health.router)
app.include_router(generate.router)
app.include_router(versions.router)
app.include_router(providers.router)


def run():
    """Console entry point."""
    uvicorn.run("uicraft.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
