from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError

from app.config import settings
from app.config.logging_config import configure_logging, get_logger
from app.models.request import ActivityQuery
from app.models.response import (
    ActivitiesResponse,
    Coordinate,
    ErrorResponse,
    HealthResponse,
)
from app.services.activity_service import ActivityService, UnknownCategoryError
from app.services.map.errors import UpstreamError
from app.services.static_service import StaticFileService

configure_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="Activity Explorer API",
    description="Find family activities around a place",
    version=settings.api_version,
    # Docs live under /api; every other path is a static file
    docs_url="/api/docs",
    redoc_url=None,
    openapi_url="/api/openapi.json",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_activity_service() -> ActivityService:
    return ActivityService()


def get_static_files() -> StaticFileService:
    return StaticFileService(settings.static_dir, settings.static_index)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return error_response(500, str(exc) or "Internal server error")


@app.get(
    "/api/geocode",
    response_model=Coordinate,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def geocode(
    city: Optional[str] = None,
    service: ActivityService = Depends(get_activity_service),
):
    """Resolve a city or place name to coordinates"""
    if not city:
        return error_response(400, "Missing city")

    try:
        return await service.locate(city)
    except UpstreamError as e:
        return error_response(500, str(e))


@app.get(
    "/api/activities",
    response_model=ActivitiesResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def activities(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    radius: Optional[str] = None,
    categories: Optional[str] = None,
    service: ActivityService = Depends(get_activity_service),
):
    """Search activities of the given categories within radius meters of a point"""
    try:
        query = ActivityQuery(lat=lat, lon=lon, radius=radius, categories=categories)
    except ValidationError:
        return error_response(400, "Invalid parameters")

    try:
        return await service.search(query)
    except UnknownCategoryError as e:
        logger.info("Rejected activity query: %s", e)
        return error_response(400, "Invalid parameters")
    except UpstreamError as e:
        return error_response(500, str(e))


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check"""
    return HealthResponse(version=settings.api_version)


# Registered last so the API routes above take precedence
@app.api_route("/{file_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def static_files(
    file_path: str, static: StaticFileService = Depends(get_static_files)
):
    path = static.resolve(file_path)
    if path is None:
        return PlainTextResponse("Not found", status_code=404)

    try:
        content, content_type = await static.load(path)
    except OSError:
        logger.exception("Failed to read static file %s", path)
        return PlainTextResponse("Internal server error", status_code=500)

    return Response(content=content, media_type=content_type)


def run() -> None:
    import uvicorn

    logger.info("Server listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
