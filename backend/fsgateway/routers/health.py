from fastapi import APIRouter
from pydantic import BaseModel

from fsgateway.config.config import settings
from fsgateway.services.path_resolver import resolve_path

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str
    root: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.app_version, root=resolve_path(settings.root_dir))
