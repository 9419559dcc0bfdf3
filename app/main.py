# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Back To One API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    BackToOneException,
    backtoone_exception_handler,
    record_store_exception_handler,
)
from app.routers import call_sheet, crew, health, looks, productions, schedule
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the environment on startup and shutdown. The Supabase client is
    created lazily on first use.
    """
    logger.info(f"Starting Back To One API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Back To One API")


# Create FastAPI application
app = FastAPI(
    title="Back To One API",
    description="""
## Fashion Production Manager

Back To One helps producers plan a photo or video shoot and hand the crew
a call sheet.

### How It Works

1. **Create a Production** - Name the shoot and set its date
2. **Build the Schedule** - Start from a template or add items by hand
3. **Plan the Looks** - Add looks, upload reference images, put them in order
4. **Fill in the Call Sheet** - Location, contacts, crew and notes
5. **Export** - Download the call sheet as a PDF

### Quick Start

```bash
# 1. Create production
curl -X POST http://localhost:8000/api/v1/productions \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Spring Denim Lookbook"}'

# 2. Apply a schedule template
curl -X POST http://localhost:8000/api/v1/productions/{id}/schedule/apply-template \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"template_id": "..."}'

# 3. Download the call sheet
curl -OJ http://localhost:8000/api/v1/productions/{id}/call-sheet/pdf \\
  -H "Authorization: Bearer $TOKEN"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Productions",
            "description": "Create, list and edit productions",
        },
        {
            "name": "Schedule",
            "description": "Schedule builder and template catalog",
        },
        {
            "name": "Looks",
            "description": "Looks gallery: images and ordering",
        },
        {
            "name": "Crew",
            "description": "Crew list shown on the call sheet",
        },
        {
            "name": "Call Sheet",
            "description": "Call sheet preview and PDF export",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(BackToOneException)
async def handle_backtoone_exception(request: Request, exc: BackToOneException):
    """Handle custom Back To One exceptions."""
    return await backtoone_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_record_store_exception(request: Request, exc: SupabaseClientError):
    """Handle record store failures."""
    logger.error(f"Record store error on {request.method} {request.url.path}: {exc}")
    return await record_store_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Production endpoints (dashboard + details)
app.include_router(
    productions.router,
    prefix="/api/v1/productions",
    tags=["Productions"]
)

# Schedule builder endpoints
app.include_router(
    schedule.router,
    prefix="/api/v1/productions",
    tags=["Schedule"]
)

# Template catalog
app.include_router(
    schedule.templates_router,
    prefix="/api/v1",
    tags=["Schedule"]
)

# Looks gallery endpoints
app.include_router(
    looks.router,
    prefix="/api/v1/productions",
    tags=["Looks"]
)

# Crew endpoints
app.include_router(
    crew.router,
    prefix="/api/v1/productions",
    tags=["Crew"]
)

# Call sheet endpoints
app.include_router(
    call_sheet.router,
    prefix="/api/v1/productions",
    tags=["Call Sheet"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Back To One API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
