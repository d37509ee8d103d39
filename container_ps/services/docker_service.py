"""Docker service for abstracting engine queries."""

import logging
from typing import Any, Optional

import docker
import docker.errors

from .exceptions import ContainerNotFoundError, DockerServiceError

logger = logging.getLogger(__name__)


class DockerService:
    """Service for read-only Docker engine queries."""

    def __init__(self):
        """Initialize Docker service and test connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def list_containers(
        self,
        all: bool = False,
        size: bool = False,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """List containers as raw engine records.

        Args:
            all: Include stopped containers
            size: Ask the engine to report SizeRw and SizeRootFs
            filters: Engine-side filters

        Returns:
            List of container records as returned by the engine

        Raises:
            DockerServiceError: If listing fails
        """
        try:
            records = self.client.api.containers(all=all, size=size, filters=filters or None)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list containers: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error listing containers: {e}") from e
        logger.debug(f"Engine reported {len(records)} containers")
        return records

    def inspect_container(self, container_id: str) -> dict[str, Any]:
        """Inspect a container.

        Args:
            container_id: Container ID or name

        Returns:
            Container inspect document

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If inspection fails
        """
        try:
            return self.client.api.inspect_container(container_id)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(
                f"Container '{container_id}' not found"
            ) from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to inspect container: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error inspecting container: {e}") from e
