"""
Event Finder - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.core.config import settings
from app.core.errors import EventServiceError
from app.core.store import init_event_store
from app.api import routes_events, routes_pages, routes_public
from app.utils.responses import error_response

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    init_event_store(app)
    logger.info(f"{settings.APP_NAME} started, API under {settings.API_PREFIX}")
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Discover, create and register for events",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)

@app.exception_handler(EventServiceError)
async def event_error_handler(request: Request, exc: EventServiceError):
    return error_response(exc.message, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(
        "Invalid request body",
        details=jsonable_encoder(exc.errors()),
        status_code=400
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return error_response(error, status_code=exc.status_code)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal server error", status_code=500)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_events.router, prefix=f"{settings.API_PREFIX}/events", tags=["events"])
app.include_router(routes_pages.router, tags=["pages"])

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True
    )
