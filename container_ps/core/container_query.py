"""Build listing snapshots from engine records."""

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..models.container import ContainerNamespaces, ContainerSize, ContainerSummary, PortMapping
from ..services.docker_service import DockerService
from ..services.exceptions import ContainerNotFoundError
from .constants import (
    CONTAINER_TYPE_LABEL,
    INFRA_CONTAINER_TYPE,
    NAMESPACE_FILES,
    POD_NAME_LABEL,
    POD_UID_LABEL,
    PROC_ROOT,
    ZERO_TIME,
)
from .sorting import sort_by_create_time

logger = logging.getLogger(__name__)

_NS_LINK_RE = re.compile(r"\[(\d+)\]")


class ListOptions(BaseModel):
    """Options for one listing request."""
    all: bool = False
    size: bool = False
    namespaces: bool = False

    latest: bool = False
    last: Optional[int] = Field(default=None, ge=1)
    filters: Dict[str, List[str]] = Field(default_factory=dict)

    @property
    def limit(self) -> Optional[int]:
        """Number of newest containers to keep, if restricted."""
        if self.last is not None:
            return self.last
        return 1 if self.latest else None


def parse_timestamp(value: Optional[str]) -> int:
    """Convert an engine RFC 3339 timestamp to unix seconds.

    The engine's zero time and missing values map to 0.
    """
    if not value or value == ZERO_TIME or value.startswith("0001-01-01"):
        return 0
    # Engine timestamps carry nanoseconds, only whole seconds are kept
    base, rest = value[:19], value[19:].lstrip(".0123456789")
    offset = "+00:00" if rest in ("", "Z") else rest
    try:
        return int(datetime.fromisoformat(base + offset).timestamp())
    except ValueError:
        logger.warning(f"Unparseable engine timestamp: {value}")
        return 0


def read_namespaces(pid: int, proc_root: Path = PROC_ROOT) -> ContainerNamespaces:
    """Read namespace identifiers of a running process from procfs."""
    values = {}
    for field_name, ns_file in NAMESPACE_FILES.items():
        try:
            link = os.readlink(proc_root / str(pid) / "ns" / ns_file)
        except OSError as e:
            logger.debug(f"Cannot read {ns_file} namespace of pid {pid}: {e}")
            continue
        match = _NS_LINK_RE.search(link)
        if match:
            values[field_name] = match.group(1)
    return ContainerNamespaces(**values)


def _command(inspected: Dict[str, Any]) -> List[str]:
    config = inspected.get("Config") or {}
    command = list(config.get("Entrypoint") or []) + list(config.get("Cmd") or [])
    if command:
        return command
    path = inspected.get("Path")
    return ([path] if path else []) + list(inspected.get("Args") or [])


def _ports(record: Dict[str, Any]) -> List[PortMapping]:
    ports = []
    for port in record.get("Ports") or []:
        ports.append(PortMapping(
            host_ip=port.get("IP") or "",
            host_port=port.get("PublicPort") or 0,
            container_port=port.get("PrivatePort") or 0,
            protocol=port.get("Type") or "tcp",
        ))
    return ports


def build_summary(
    record: Dict[str, Any],
    inspected: Dict[str, Any],
    size: bool = False,
    namespaces: bool = False,
) -> ContainerSummary:
    """Build a listing entry from an engine list record and its inspect document.

    Args:
        record: Container record from the engine's list call
        inspected: Inspect document of the same container
        size: Whether size detail was requested
        namespaces: Whether namespace detail was requested

    Returns:
        The container summary
    """
    state_info = inspected.get("State") or {}
    state = (state_info.get("Status") or record.get("State") or "created").lower()
    exited = state == "exited"
    pid = (state_info.get("Pid") or 0) if state in ("running", "paused") else 0
    labels = record.get("Labels") or {}

    container_size = None
    if size and record.get("SizeRootFs") is not None:
        container_size = ContainerSize(
            root_fs_size=record["SizeRootFs"],
            rw_size=record.get("SizeRw") or 0,
        )

    return ContainerSummary(
        id=record["Id"],
        names=[name.lstrip("/") for name in record.get("Names") or []],
        image=record.get("Image") or "",
        command=_command(inspected),
        created=record.get("Created") or 0,
        started_at=parse_timestamp(state_info.get("StartedAt")),
        state=state,
        exited=exited,
        exited_at=parse_timestamp(state_info.get("FinishedAt")) if exited else 0,
        exit_code=(state_info.get("ExitCode") or 0) if exited else 0,
        pid=pid,
        pod=labels.get(POD_UID_LABEL, ""),
        pod_name=labels.get(POD_NAME_LABEL, ""),
        ports=_ports(record),
        mounts=[mount.get("Destination", "") for mount in record.get("Mounts") or []],
        labels=labels,
        namespaces=read_namespaces(pid) if namespaces and pid else ContainerNamespaces(),
        is_infra=labels.get(CONTAINER_TYPE_LABEL) == INFRA_CONTAINER_TYPE,
        size=container_size,
    )


class ContainerQuery:
    """Produces listing snapshots from the engine."""

    def __init__(self, docker_service: DockerService):
        """Initialize with the engine service to query."""
        self.docker_service = docker_service

    def list(self, options: Optional[ListOptions] = None) -> List[ContainerSummary]:
        """Build a listing snapshot.

        Args:
            options: Listing options, defaults when omitted

        Returns:
            One summary per listed container

        Raises:
            DockerServiceError: If the engine query fails
        """
        options = options or ListOptions()
        limit = options.limit
        records = self.docker_service.list_containers(
            all=options.all or limit is not None,
            size=options.size,
            filters=options.filters,
        )

        if limit is not None:
            newest_first = sort_by_create_time(records, key=lambda r: r.get("Created") or 0)[::-1]
            records = newest_first[:limit]

        summaries = []
        for record in records:
            try:
                inspected = self.docker_service.inspect_container(record["Id"])
            except ContainerNotFoundError:
                logger.debug(f"Container {record['Id']} disappeared before inspection, skipping")
                continue
            summaries.append(build_summary(
                record,
                inspected,
                size=options.size,
                namespaces=options.namespaces,
            ))
        return summaries
