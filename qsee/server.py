"""FastAPI query server for a parsed input file."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .engine.core import DataConversionError, DataNotFoundError, Input
from .models import (
    DataResponse,
    DataType,
    HealthResponse,
    InputFileSummary,
    ListResponse,
    SectionResponse,
)
from .services import summarize_input

logger = logging.getLogger(__name__)


def get_input(request: Request) -> Input:
    """Dependency returning the parsed input, or 503 if none is loaded."""
    inp = getattr(request.app.state, "input", None)
    if inp is None:
        raise HTTPException(status_code=503, detail="No input file loaded")
    return inp


def normalize_key(key: str) -> str:
    """Stored keys are upper case without surrounding whitespace."""
    return key.strip().upper()


def create_app(input_file: str | None = None, inp: Input | None = None) -> FastAPI:
    """Build the application.

    Args:
        input_file: Path parsed at startup (defaults to settings.input_file)
        inp: Already parsed input; takes precedence over ``input_file``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"Starting qsee server v{__version__}")

        if app.state.input is None:
            path = input_file or settings.input_file
            if path:
                # An unreadable input aborts startup
                app.state.input = Input.from_file(path, settings.case_sensitive_keys_list)
                logger.info(f"Loaded {len(app.state.input)} entries from {path}")
            else:
                logger.warning("No input file configured - data endpoints will return 503")

        yield
        logger.info("Shutting down qsee server")

    app = FastAPI(
        title="qsee",
        description="Read-only queries over a parsed ChronusQ input file",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.input = inp

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
        )

    @app.exception_handler(DataNotFoundError)
    async def not_found_handler(request: Request, exc: DataNotFoundError):
        return JSONResponse(status_code=404, content={"success": False, "error": str(exc)})

    @app.exception_handler(DataConversionError)
    async def conversion_handler(request: Request, exc: DataConversionError):
        return JSONResponse(status_code=422, content={"success": False, "error": str(exc)})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "An internal server error occurred."},
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request) -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        inp = request.app.state.input
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            source=inp.source if inp is not None else None,
            entries=len(inp) if inp is not None else 0,
        )

    # ============ QUERY ENDPOINTS ============

    @app.get("/v1/data/{key:path}", response_model=DataResponse, tags=["Query"])
    async def get_data(
        key: str,
        kind: DataType = Query(DataType.STRING, alias="type"),
        inp: Input = Depends(get_input),
    ) -> DataResponse:
        """Typed value of one key (404 if absent, 422 if not convertible)."""
        key = normalize_key(key)
        return DataResponse(key=key, type=kind, value=inp.get_data(key, kind))

    @app.get("/v1/sections/{section:path}", response_model=SectionResponse, tags=["Query"])
    async def get_section(section: str, inp: Input = Depends(get_input)) -> SectionResponse:
        """Immediate children and nested entries of a section."""
        section = normalize_key(section)
        return SectionResponse(
            section=section,
            exists=inp.contains_section(section),
            keys=inp.get_data_in_section(section),
            data=dict(inp.get_section(section).items()),
        )

    @app.get("/v1/lists/{key:path}", response_model=ListResponse, tags=["Query"])
    async def get_list(key: str, inp: Input = Depends(get_input)) -> ListResponse:
        """Whether ``key`` is a list and its size."""
        key = normalize_key(key)
        return ListResponse(key=key, exists=inp.contains_list(key), size=inp.get_list_size(key))

    @app.get("/v1/summary", response_model=InputFileSummary, tags=["Query"])
    async def get_summary(inp: Input = Depends(get_input)) -> InputFileSummary:
        """Title, molecule and parameter overview of the input."""
        return summarize_input(inp)

    return app


app = create_app()
