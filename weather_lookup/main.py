from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from weather_lookup.api import routes
from weather_lookup.api.errors import register_exception_handlers
from weather_lookup.config import get_settings
from weather_lookup.middleware.request_tracker import RequestTrackerMiddleware
from weather_lookup.services.upstream_client import OpenWeatherClient
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Weather Lookup API...")

    if not settings.openweather_api_key:
        logger.warning(
            "OPENWEATHER_API_KEY is not set; weather requests will fail",
            extra={"event": "configuration_warning"},
        )

    upstream_client = OpenWeatherClient()
    app.state.upstream_client = upstream_client

    yield

    logger.info("Shutting down Weather Lookup API...")

    await upstream_client.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

register_exception_handlers(app)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router)


def run(reload: bool = False):
    uvicorn.run(
        "weather_lookup.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run(reload=True)
