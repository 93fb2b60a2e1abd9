"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.config import settings
from app.database import database
from app.logging_config import setup_logging
from app.routers import games, goals, players, session, stats


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    setup_logging()
    await database.connect()
    yield
    # Shutdown
    await database.disconnect()


app = FastAPI(
    title="Match Log API",
    description="Match logging, season objectives and performance analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(session.router)
app.include_router(players.router)
app.include_router(games.router)
app.include_router(goals.router)
app.include_router(stats.router)


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError):
    """Record store failures are transient; nothing was committed."""
    logger.error("Record store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Record store unavailable"},
    )


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"status": "ok", "message": "Match Log API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
