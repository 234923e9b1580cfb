from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fsgateway.config.config import settings
from fsgateway.routers import fs as fs_router
from fsgateway.routers import health
from fsgateway.services.path_resolver import resolve_path

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer(),
    ]
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "server_started",
        url=f"http://localhost:{settings.port}",
        root=resolve_path(settings.root_dir),
    )
    yield
    logger.info("shutdown")


app = FastAPI(
    title="fsgateway",
    description="Filesystem operations over HTTP",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(fs_router.router)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port (3000 by default)."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
