# alertmaps/main.py

from contextlib import asynccontextmanager
from time import perf_counter

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alertmaps.api.v1 import routes_alerts, routes_health, routes_maps
from alertmaps.core.config import settings
from alertmaps.core.errors import AlertMapsError
from alertmaps.core.logger import logger
from alertmaps.models.maps import utc_now

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /health",
    "GET /getRoute",
    "GET /getSafeZones",
    "GET /getalerts",
    "GET /api/maps/config",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "{} {} started (environment={})",
        settings.APP_NAME,
        settings.APP_VERSION,
        settings.ENVIRONMENT,
    )
    if not settings.GOOGLE_MAPS_API_KEY:
        logger.warning(
            "GOOGLE_MAPS_API_KEY is not set: /getRoute and /getSafeZones will answer 503. "
            "Set it in the environment or in .env."
        )
    yield
    logger.info("{} shutting down", settings.APP_NAME)


def _error_body(title: str, message: str) -> dict:
    return {"error": title, "message": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AlertMapsError)
    async def alert_maps_error_handler(request: Request, exc: AlertMapsError) -> JSONResponse:
        log = logger.warning if exc.status_code < 500 else logger.error
        log("{} {} -> {} {}: {}", request.method, request.url.path, exc.status_code, exc.title, exc)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.title, str(exc)))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
        )
        return JSONResponse(status_code=400, content=_error_body("Invalid parameters", details))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            body = _error_body(
                "Route not found",
                f"The requested route {request.method} {request.url.path} was not found",
            )
            body["availableEndpoints"] = AVAILABLE_ENDPOINTS
            return JSONResponse(status_code=404, content=body)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail), str(exc.detail)),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on {} {}", request.method, request.url.path)
        message = (
            str(exc)
            if settings.ENVIRONMENT == "development"
            else "An unexpected error occurred"
        )
        return JSONResponse(status_code=500, content=_error_body("Internal server error", message))


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Disaster alert backend: Google Directions/Places proxy, maps configuration and alerts.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        t0 = perf_counter()
        response = await call_next(request)
        client_ip = request.client.host if request.client else "-"
        logger.info(
            "{} {} - {} - {} in {:.2f} ms",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            (perf_counter() - t0) * 1000.0,
        )
        return response

    register_exception_handlers(app)

    # Routers
    app.include_router(routes_health.router)
    app.include_router(routes_maps.router)
    app.include_router(routes_maps.config_router)
    app.include_router(routes_alerts.router)

    @app.get("/", tags=["info"])
    async def root() -> dict:
        """
        API information and the list of endpoints.
        """
        return {
            "message": "AI Alert System - Google Maps API Backend",
            "version": settings.APP_VERSION,
            "endpoints": {
                "health": "GET /health",
                "routes": "GET /getRoute?origin=lat,lng&dest=lat,lng",
                "safeZones": "GET /getSafeZones?lat=number&lng=number&radius=number",
                "alerts": "GET /getalerts?lat=number&lng=number&radius=number&active=bool",
                "mapsConfig": "GET /api/maps/config",
            },
            "documentation": "https://developers.google.com/maps/documentation",
            "timestamp": utc_now().isoformat(),
        }

    return app


app = create_app()
