"""FastAPI application entry point for Sapiens.io."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import get_settings
from app.dependencies import close_db_client, open_db_client
from app.middleware.error_handler import ErrorHandlerMiddleware
from app.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

settings = get_settings()

configure_logging(
    debug=settings.debug,
    service=settings.app_name,
    environment=settings.environment,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the document store before serving and close it on shutdown."""
    logger.info(f"Starting {settings.app_name} API v{settings.api_version}")
    logger.info(f"Running in {settings.environment} mode")

    app.state.db_client = open_db_client(settings)
    logger.info("Document store connected")

    yield

    close_db_client(app.state.db_client)
    logger.info(f"Shutting down {settings.app_name} API")


app = FastAPI(
    title=settings.app_name,
    description="Lessons, comments, bookmarks and premium membership API",
    version=settings.api_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# ── Middleware (order matters: last-added = outermost = first to run) ──

# 1. Error handler added first → innermost layer
app.add_middleware(ErrorHandlerMiddleware)

# 2. CORS added last → outermost layer (processes OPTIONS preflight first)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

from app.api import router as api_router  # noqa: E402

app.include_router(api_router)


@app.get(
    "/health",
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Health check endpoint",
)
async def health_check() -> JSONResponse:
    """Health check endpoint for monitoring."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "success": True,
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.api_version,
        },
    )


@app.get("/", response_class=PlainTextResponse, tags=["Root"], summary="Liveness message")
async def root() -> str:
    return f"{settings.app_name} server is running!"


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
