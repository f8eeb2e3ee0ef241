"""FastAPI application entrypoint."""

import time
from contextlib import asynccontextmanager
from uuid import uuid4

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.inbound.http.routes import router
from app.adapters.outbound.vehicle.models import Base
from app.infrastructure.config.settings import settings
from app.infrastructure.db import init_database
from app.infrastructure.logging.logger import configure_logging, log_request, logger
from app.infrastructure.wiring.dependencies import get_vehicle_service

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the record store once; any failure aborts startup."""
    configure_logging(settings.log_level)
    try:
        if settings.vehicle_repository == "postgres":
            init_database(Base.metadata)
        get_vehicle_service()
    except Exception:
        logger.exception("Startup failed: record store unavailable")
        raise
    logger.info(f"Vehicle inventory API started | repository={settings.vehicle_repository!r}")
    yield


app = FastAPI(
    title="Vehicle Inventory API",
    description="Vehicle inventory management: list, view, add and edit vehicles",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with a correlation id and its duration."""
    request_id = str(uuid4())
    started = time.perf_counter()
    response = await call_next(request)
    log_request(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=(time.perf_counter() - started) * 1000,
    )
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
