"""Shared rendering helpers for CLI commands."""

import json
import time
from typing import Optional

from tabulate import tabulate

from ...core.constants import COMMAND_TRUNC_LENGTH, ID_TRUNC_LENGTH
from ...models.container import ContainerSummary


def format_duration(seconds: float) -> str:
    """Format an elapsed time the way container engines print it."""
    if seconds < 1:
        return "Less than a second"
    if seconds < 2:
        return "1 second"
    if seconds < 60:
        return f"{int(seconds)} seconds"
    minutes = int(seconds / 60)
    if minutes == 1:
        return "About a minute"
    if minutes < 60:
        return f"{minutes} minutes"
    hours = int(round(seconds / 3600))
    if hours == 1:
        return "About an hour"
    if hours < 48:
        return f"{hours} hours"
    if hours < 24 * 7 * 2:
        return f"{hours // 24} days"
    if hours < 24 * 30 * 2:
        return f"{hours // (24 * 7)} weeks"
    if hours < 24 * 365 * 2:
        return f"{hours // (24 * 30)} months"
    return f"{hours // (24 * 365)} years"


def format_size(size: float) -> str:
    """Format a byte count with decimal units, e.g. ``1.09kB``."""
    units = ["B", "kB", "MB", "GB", "TB", "PB"]
    index = 0
    while size >= 1000 and index < len(units) - 1:
        size /= 1000.0
        index += 1
    return f"{size:.4g}{units[index]}"


def format_status(container: ContainerSummary, now: float) -> str:
    """Build the human status column for a container."""
    if container.state == "created":
        return "Created"
    if container.state in ("running", "paused"):
        status = f"Up {format_duration(now - container.started_at)}"
        if container.state == "paused":
            status += " (Paused)"
        return status
    if container.exited:
        return f"Exited ({container.exit_code}) {format_duration(now - container.exited_at)} ago"
    return container.state.capitalize()


def truncate(value: str, length: int, no_trunc: bool = False) -> str:
    """Shorten ``value`` to ``length`` characters unless truncation is off."""
    if no_trunc or len(value) <= length:
        return value
    if length > 3:
        return value[:length - 3] + "..."
    return value[:length]


def format_container_table(containers: list[ContainerSummary],
                           size: bool = False,
                           pod: bool = False,
                           namespaces: bool = False,
                           no_trunc: bool = False,
                           now: Optional[float] = None) -> str:
    """Format containers as a table with consistent styling.

    Args:
        containers: Sorted listing snapshot
        size: Add the SIZE column
        pod: Add the POD ID and PODNAME columns
        namespaces: Add the namespace columns
        no_trunc: Print full IDs and commands
        now: Reference time for relative columns (defaults to current time)

    Returns:
        Formatted table string
    """
    now = time.time() if now is None else now

    if namespaces:
        headers = ["CONTAINER ID", "NAMES", "PID", "CGROUPNS", "IPC", "MNT",
                   "NET", "PIDNS", "USERNS", "UTS"]
    else:
        headers = ["CONTAINER ID", "IMAGE", "COMMAND", "CREATED", "STATUS", "PORTS", "NAMES"]
        if size:
            headers.append("SIZE")
    if pod:
        headers.extend(["POD ID", "PODNAME"])

    table_data = []
    for container in containers:
        container_id = container.id if no_trunc else container.id[:ID_TRUNC_LENGTH]
        if namespaces:
            ns = container.namespaces
            row = [container_id, container.primary_name, container.pid or "",
                   ns.cgroup, ns.ipc, ns.mnt, ns.net, ns.pidns, ns.user, ns.uts]
        else:
            command = container.command_line
            row = [
                container_id,
                container.image,
                f'"{truncate(command, COMMAND_TRUNC_LENGTH, no_trunc)}"',
                f"{format_duration(now - container.created)} ago",
                format_status(container, now),
                ", ".join(str(port) for port in container.ports),
                ",".join(container.names),
            ]
            if size:
                if container.size is None:
                    row.append("")
                else:
                    row.append(f"{format_size(container.size.rw_size)} "
                               f"(virtual {format_size(container.size.root_fs_size)})")
        if pod:
            row.extend([container.pod if no_trunc else container.pod[:ID_TRUNC_LENGTH],
                        container.pod_name])
        table_data.append(row)

    # IDs such as "1234e5678901" must not be read as numbers
    return tabulate(table_data, headers=headers, tablefmt="simple", disable_numparse=True)


def format_container_json(containers: list[ContainerSummary]) -> str:
    """Serialize containers as an indented JSON array."""
    return json.dumps([container.to_dict() for container in containers], indent=2)


def format_container_ids(containers: list[ContainerSummary], no_trunc: bool = False) -> str:
    """One container ID per line."""
    if no_trunc:
        return "\n".join(container.id for container in containers)
    return "\n".join(container.id[:ID_TRUNC_LENGTH] for container in containers)
