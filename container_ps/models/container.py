"""Container listing models."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class PortMapping(BaseModel):
    """A published port of a container."""
    model_config = ConfigDict(frozen=True)

    host_ip: str = Field(default="", serialization_alias="HostIP")
    host_port: int = Field(default=0, serialization_alias="HostPort")
    container_port: int = Field(serialization_alias="ContainerPort")
    protocol: str = Field(default="tcp", serialization_alias="Protocol")

    def __str__(self) -> str:
        if not self.host_port:
            return f"{self.container_port}/{self.protocol}"
        host_ip = self.host_ip or "0.0.0.0"
        return f"{host_ip}:{self.host_port}->{self.container_port}/{self.protocol}"


class ContainerSize(BaseModel):
    """Disk usage of a container, reported only on request."""
    model_config = ConfigDict(frozen=True)

    root_fs_size: int = Field(serialization_alias="RootFsSize")
    rw_size: int = Field(serialization_alias="RwSize")


class ContainerNamespaces(BaseModel):
    """Identifiers of the container's Linux namespaces, reported only on request."""
    model_config = ConfigDict(frozen=True)

    mnt: str = Field(default="", serialization_alias="Mnt")
    cgroup: str = Field(default="", serialization_alias="Cgroup")
    ipc: str = Field(default="", serialization_alias="Ipc")
    net: str = Field(default="", serialization_alias="Net")
    pidns: str = Field(default="", serialization_alias="Pidns")
    uts: str = Field(default="", serialization_alias="Uts")
    user: str = Field(default="", serialization_alias="User")

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> Dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value}


class ContainerSummary(BaseModel):
    """One container in a listing snapshot.

    Built fresh for every listing from live engine state and never mutated
    afterwards. Fields that only mean something in a given state (exit data,
    pid, pod) hold their zero value outside of it. ``size`` is the one field
    where absent and zero differ: it is None unless size detail was requested.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, serialization_alias="Id")
    names: List[str] = Field(default_factory=list, serialization_alias="Names")
    image: str = Field(default="", serialization_alias="Image")
    command: List[str] = Field(default_factory=list, serialization_alias="Command")
    created: int = Field(default=0, serialization_alias="Created")
    started_at: int = Field(default=0, serialization_alias="StartedAt")
    state: str = Field(default="created", serialization_alias="State")
    exited: bool = Field(default=False, serialization_alias="Exited")
    exited_at: int = Field(default=0, serialization_alias="ExitedAt")
    exit_code: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, serialization_alias="ExitCode")
    pid: int = Field(default=0, serialization_alias="Pid")
    pod: str = Field(default="", serialization_alias="Pod")
    pod_name: str = Field(default="", serialization_alias="PodName")
    ports: List[PortMapping] = Field(default_factory=list, serialization_alias="Ports")
    mounts: List[str] = Field(default_factory=list, serialization_alias="Mounts")
    labels: Dict[str, str] = Field(default_factory=dict, serialization_alias="Labels")
    namespaces: ContainerNamespaces = Field(
        default_factory=ContainerNamespaces, serialization_alias="Namespaces"
    )
    is_infra: bool = Field(default=False, serialization_alias="IsInfra")
    size: Optional[ContainerSize] = Field(default=None, serialization_alias="Size")

    @model_validator(mode="after")
    def _check_exit_state(self) -> "ContainerSummary":
        if self.state == "running" and self.exited:
            raise ValueError("a running container cannot report exited=True")
        if not self.exited and (self.exited_at or self.exit_code):
            raise ValueError("exited_at and exit_code require exited=True")
        return self

    @property
    def primary_name(self) -> str:
        """First assigned name, or empty string for display purposes."""
        return self.names[0] if self.names else ""

    @property
    def command_line(self) -> str:
        """Command tokens joined with single spaces."""
        return " ".join(self.command)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary using the external field labels."""
        return self.model_dump(by_alias=True)
