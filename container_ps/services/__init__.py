"""Service layer for abstracting engine queries."""

from .docker_service import DockerService
from .exceptions import (
    ServiceError,
    DockerServiceError,
    ContainerNotFoundError,
    SortError,
    InvalidSortKeyError,
    EmptyNamesError,
)

__all__ = [
    "DockerService",
    "ServiceError",
    "DockerServiceError",
    "ContainerNotFoundError",
    "SortError",
    "InvalidSortKeyError",
    "EmptyNamesError",
]
