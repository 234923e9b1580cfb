"""Result types and Pydantic schemas for the filesystem REST API."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel

_T = TypeVar("_T")


class ErrorKind(StrEnum):
    list = "list"
    create = "create"
    read = "read"
    update = "update"
    delete = "delete"
    search = "search"


# Prefix placed in front of the OS error text. Create failures pass their own prefix.
ERROR_PREFIXES: dict[ErrorKind, str] = {
    ErrorKind.list: "Error listing files and directories",
    ErrorKind.read: "Error reading file",
    ErrorKind.update: "Error updating file",
    ErrorKind.delete: "Error deleting file or directory",
    ErrorKind.search: "Error searching files and directories",
}


@dataclass(frozen=True)
class OperationError:
    """A failed filesystem operation: which action failed, and why."""

    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, kind: ErrorKind, exc: Exception, prefix: str | None = None) -> "OperationError":
        return cls(kind=kind, message=f"{prefix or ERROR_PREFIXES[kind]}: {exc}")


@dataclass(frozen=True)
class Success(Generic[_T]):
    value: _T


# Every filesystem operation returns one of these instead of raising.
Outcome = Success[_T] | OperationError


class FileDataRequest(BaseModel):
    """Optional body for file create/update. A missing ``data`` writes an empty file."""

    data: str | None = None


class MessageResponse(BaseModel):
    message: str


class FileContentResponse(BaseModel):
    data: str


class ErrorResponse(BaseModel):
    error: str
