"""
FastAPI application entry point.

Run:
    uvicorn paperhub.main:app --reload
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from paperhub import __version__
from paperhub.api.errors import register_exception_handlers
from paperhub.api.routes.authors import router as authors_router
from paperhub.api.routes.papers import router as papers_router
from paperhub.config import Config
from paperhub.database.db.models import Base
from paperhub.database.db.session import engine
from paperhub.logging_config import setup_logging

setup_logging(Config.log_level, Config.log_file)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create any missing tables on startup
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()


app = FastAPI(title=Config.api_title, version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.cors_origins,
    allow_credentials="*" not in Config.cors_origins,  # "*" forbids credentials
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        # Unhandled errors propagate past this middleware and render as 500
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )


register_exception_handlers(app)

app.include_router(papers_router)
app.include_router(authors_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
