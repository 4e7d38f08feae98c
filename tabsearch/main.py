"""FastAPI application entry point."""

import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tabsearch.config import get_settings
from tabsearch.logging_config import clear_request_id, get_logger, set_request_id, setup_logging
from tabsearch.models.error import ErrorResponse
from tabsearch.models.query import (
    CollectRecordsRequest,
    DestinationResponse,
    SearchRequest,
    SearchResponse,
)
from tabsearch.models.record import TabRecord
from tabsearch.services.record_service import RecordService
from tabsearch.services.search_service import SearchService

# Setup logging configuration
setup_logging()
logger = get_logger(__name__)

# Load and validate configuration at startup
settings = get_settings()

# Global service instances
search_service: SearchService | None = None
record_service: RecordService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    global search_service, record_service

    logger.info("Starting Tab Search...")

    search_service = SearchService(settings=settings)
    record_service = RecordService(settings=settings)

    logger.info("Tab Search started successfully")

    yield

    logger.info("Tab Search shut down")


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Tiered fuzzy search and ranking over open tabs and browsing history",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_middleware(request: Request, call_next):
    """Add request ID tracking and error handling."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    set_request_id(request_id)

    try:
        logger.info(f"Request started: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(
            f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}"
        )
        return response
    except Exception as e:
        logger.error(
            f"Unhandled exception: {str(e)}",
            exc_info=True,
            extra={"path": request.url.path},
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=str(e),
                timestamp=datetime.now(UTC),
                request_id=request_id,
            ).model_dump(mode="json"),
        )
    finally:
        clear_request_id()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))

    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    detail = "; ".join(errors)

    logger.warning(
        f"Validation error for request {request_id}: {detail}",
        extra={"path": request.url.path},
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="Validation Error",
            detail=detail,
            timestamp=datetime.now(UTC),
            request_id=request_id,
        ).model_dump(mode="json"),
    )


def _require(service):
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search service not initialized",
        )
    return service


# API Endpoints


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.api_title,
        "version": settings.api_version,
        "history_threshold_hours": settings.history_threshold_hours,
        "recency_bonus": settings.enable_recency_bonus,
    }


@app.post(
    "/api/v1/search",
    response_model=SearchResponse,
    summary="Rank records against a query",
)
async def search_records(request: SearchRequest) -> SearchResponse:
    """Run the tiered search over the supplied records.

    Active records are searched by URL, then by title; history records
    only when no active record matched. A blank query lists the active
    records in their original order.
    """
    service = _require(search_service)
    return service.search(request.records, request.query, now=request.now)


@app.get(
    "/api/v1/destination",
    response_model=DestinationResponse,
    summary="Resolve where to navigate for a query",
)
async def get_destination(query: str) -> DestinationResponse:
    """Return the address for URL-like queries, otherwise a web search URL."""
    if not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="query must not be blank",
        )
    return _require(search_service).destination(query)


@app.post(
    "/api/v1/records",
    response_model=list[TabRecord],
    summary="Merge open tabs and history into a record set",
)
async def collect_records(request: CollectRecordsRequest) -> list[TabRecord]:
    """Build the ordered record set from open tabs and history entries."""
    service = _require(record_service)
    return service.collect_records(
        request.tabs,
        request.history,
        current_window_id=request.current_window_id,
        now=request.now,
    )
