"""Sort keys for container listings.

Each sort key maps to a function extracting the value a container is ordered
by. A key function may return None for a container it cannot rank; such
containers are incomparable with every other container and keep their
position while the rankable ones are sorted around them.
"""

import logging
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from ..models.container import ContainerSummary
from ..services.exceptions import EmptyNamesError, InvalidSortKeyError

logger = logging.getLogger(__name__)

T = TypeVar("T")
SortKeyFunc = Callable[[ContainerSummary], Any]


def _primary_name(container: ContainerSummary) -> str:
    if not container.names:
        raise EmptyNamesError(container.id)
    return container.names[0]


def _root_fs_size(container: ContainerSummary) -> Optional[int]:
    if container.size is None:
        return None
    return container.size.root_fs_size


SORT_KEY_FUNCS = MappingProxyType({
    "id": attrgetter("id"),
    "image": attrgetter("image"),
    "command": attrgetter("command_line"),
    "runningfor": attrgetter("started_at"),
    "status": attrgetter("state"),
    "size": _root_fs_size,
    "names": _primary_name,
    "created": attrgetter("created"),
    "pod": attrgetter("pod"),
})

SORT_KEYS = tuple(sorted(SORT_KEY_FUNCS))


def get_sort_key(key: str) -> SortKeyFunc:
    """Look up the key function registered under ``key``.

    Raises:
        InvalidSortKeyError: If ``key`` is not registered
    """
    try:
        return SORT_KEY_FUNCS[key]
    except KeyError:
        raise InvalidSortKeyError(key, SORT_KEYS) from None


def sort_by(key: str, items: List[ContainerSummary]) -> List[ContainerSummary]:
    """Order a listing snapshot in place by the named sort key.

    Args:
        key: One of ``SORT_KEYS``
        items: Listing snapshot, reordered in place

    Returns:
        The same list, ascending by the selected key

    Raises:
        InvalidSortKeyError: If ``key`` is not registered
        EmptyNamesError: If sorting by names and a container has none
    """
    key_func = get_sort_key(key)
    logger.debug(f"Sorting {len(items)} containers by {key}")

    # Keys are extracted up front so a failing key leaves the list untouched
    values = [key_func(item) for item in items]
    positions = [i for i, value in enumerate(values) if value is not None]
    if len(positions) < len(values):
        logger.debug(f"{len(values) - len(positions)} containers have no {key} value; keeping their positions")

    ordered = sorted(positions, key=values.__getitem__)
    reordered = [items[i] for i in ordered]
    for position, item in zip(positions, reordered):
        items[position] = item
    return items


def sort_by_create_time(records: Iterable[T], key: Callable[[T], Any] = attrgetter("created")) -> List[T]:
    """Return records ordered oldest first by creation time."""
    return sorted(records, key=key)
