"""Filesystem REST API — list, create, read, update, delete and search under the configured root."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from fsgateway.config.config import settings
from fsgateway.schemas.fs import (
    ErrorKind,
    ErrorResponse,
    FileContentResponse,
    FileDataRequest,
    MessageResponse,
    OperationError,
)
from fsgateway.services import fs_operations
from fsgateway.services.path_resolver import join_path, resolve_path
from fsgateway.services.search import search_files

router = APIRouter(tags=["filesystem"])

# Every kind currently collapses to 500; change an entry here to report it differently.
_ERROR_STATUS: dict[ErrorKind, int] = {kind: status.HTTP_500_INTERNAL_SERVER_ERROR for kind in ErrorKind}

_ERROR_RESPONSES = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


def get_root_dir() -> str:
    """The directory every request path is resolved against."""
    return settings.root_dir


RootDir = Annotated[str, Depends(get_root_dir)]


def _error_response(error: OperationError) -> JSONResponse:
    return JSONResponse(
        ErrorResponse(error=error.message).model_dump(),
        status_code=_ERROR_STATUS[error.kind],
    )


def _payload(body: FileDataRequest | None) -> str:
    return (body.data if body is not None else None) or ""


@router.get("/list", response_model=list[str], responses=_ERROR_RESPONSES)
@router.get("/list/{directory:path}", response_model=list[str], responses=_ERROR_RESPONSES)
async def list_directory(root: RootDir, directory: str = ".") -> list[str] | JSONResponse:
    outcome = await fs_operations.list_entries(resolve_path(root, directory))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return outcome.value


@router.get("/create-dir/{directory:path}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
async def create_dir(directory: str, root: RootDir) -> MessageResponse | JSONResponse:
    outcome = await fs_operations.create_directory(join_path(root, directory))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return MessageResponse(message=f"Directory '{directory}' created successfully")


@router.get("/create-file/{file_name:path}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
async def create_file(
    file_name: str,
    root: RootDir,
    body: FileDataRequest | None = None,
) -> MessageResponse | JSONResponse:
    """Write a new file. GET carries an optional JSON body ``{"data": "..."}``; an existing file is overwritten."""
    outcome = await fs_operations.create_file(resolve_path(root, file_name), _payload(body))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return MessageResponse(message=f"File '{file_name}' created successfully")


@router.get("/read-file/{file_name:path}", response_model=FileContentResponse, responses=_ERROR_RESPONSES)
async def read_file(file_name: str, root: RootDir) -> FileContentResponse | JSONResponse:
    outcome = await fs_operations.read_file(resolve_path(root, file_name))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return FileContentResponse(data=outcome.value)


@router.put("/update-file/{file_name:path}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
async def update_file(
    file_name: str,
    root: RootDir,
    body: FileDataRequest | None = None,
) -> MessageResponse | JSONResponse:
    outcome = await fs_operations.update_file(resolve_path(root, file_name), _payload(body))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return MessageResponse(message=f"File '{file_name}' updated successfully")


@router.get("/delete/{target:path}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
async def delete(target: str, root: RootDir) -> MessageResponse | JSONResponse:
    outcome = await fs_operations.delete_path(resolve_path(root, target))
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return MessageResponse(message=f"File or directory '{target}' deleted successfully")


@router.get("/search/{search_term}", response_model=list[str], responses=_ERROR_RESPONSES)
async def search(search_term: str, root: RootDir) -> list[str] | JSONResponse:
    """Search the whole root tree for files whose name contains ``search_term``."""
    outcome = await search_files(search_term, root)
    if isinstance(outcome, OperationError):
        return _error_response(outcome)
    return outcome.value
