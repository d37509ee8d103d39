"""Core functionality for Container PS."""

from .container_query import ContainerQuery, ListOptions
from .sorting import SORT_KEYS, sort_by, sort_by_create_time

__all__ = [
    'ContainerQuery',
    'ListOptions',
    'SORT_KEYS',
    'sort_by',
    'sort_by_create_time'
]
