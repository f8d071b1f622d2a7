"""
FastAPI application entry point for the FilmTrack record service.

Run: uvicorn filmtrack.api.main:app --port 5000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmtrack.api.config import get_api_host, get_api_port, get_database_path, get_log_level
from filmtrack.api.errors import register_exception_handlers
from filmtrack.api.routers import films, system
from filmtrack.database.connection import get_db_manager
from filmtrack.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configure logging and ensure the films table exists before serving."""
    setup_logging(log_file="api.log", level=get_log_level())
    db_manager = get_db_manager(db_path=get_database_path())
    logger.info("FilmTrack API using database %s", db_manager.database_url)
    yield


app = FastAPI(
    title="FilmTrack API",
    description="REST API for a personal film collection",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(films.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "FilmTrack API",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
