"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class SortError(ServiceError):
    """Base exception for listing sort failures."""

    pass


class InvalidSortKeyError(SortError):
    """Exception raised when a sort key is not one of the registered keys."""

    def __init__(self, key: str, choices: tuple[str, ...]):
        self.key = key
        self.choices = choices
        options = ", ".join(choices[:-1]) + f", or {choices[-1]}"
        super().__init__(f"invalid option for --sort, options are: {options}")


class EmptyNamesError(SortError):
    """Exception raised when sorting by name hits a container without names."""

    def __init__(self, container_id: str):
        self.container_id = container_id
        super().__init__(f"container {container_id} has no names to sort by")
