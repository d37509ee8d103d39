"""Models for Container PS."""

from .container import ContainerNamespaces, ContainerSize, ContainerSummary, PortMapping
from .config import PsDefaults

__all__ = [
    'ContainerNamespaces',
    'ContainerSize',
    'ContainerSummary',
    'PortMapping',
    'PsDefaults'
]
