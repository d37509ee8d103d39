"""Tests for container listing models."""

import pytest
from pydantic import ValidationError

from container_ps.models.container import (
    ContainerNamespaces,
    ContainerSize,
    ContainerSummary,
    PortMapping,
)


class TestContainerSummary:
    """Test suite for ContainerSummary."""

    def test_defaults(self):
        """Test a minimal summary has zero values and no size."""
        summary = ContainerSummary(id="abc")

        assert summary.names == []
        assert summary.exited is False
        assert summary.exit_code == 0
        assert summary.size is None
        assert summary.namespaces == ContainerNamespaces()

    def test_empty_id_rejected(self):
        """Test the identifier must be non-empty."""
        with pytest.raises(ValidationError):
            ContainerSummary(id="")

    def test_running_cannot_be_exited(self):
        """Test a running container reporting exited is rejected."""
        with pytest.raises(ValidationError, match="running"):
            ContainerSummary(id="abc", state="running", exited=True)

    def test_exit_data_requires_exited(self):
        """Test exit code without exited=True is rejected."""
        with pytest.raises(ValidationError, match="exited=True"):
            ContainerSummary(id="abc", state="created", exit_code=1)

    def test_exit_code_is_int32(self):
        """Test exit codes outside the signed 32-bit range are rejected."""
        ContainerSummary(id="abc", state="exited", exited=True, exit_code=-2**31)
        with pytest.raises(ValidationError):
            ContainerSummary(id="abc", state="exited", exited=True, exit_code=2**31)

    def test_frozen(self):
        """Test a snapshot entry cannot be modified."""
        summary = ContainerSummary(id="abc")

        with pytest.raises(ValidationError):
            summary.image = "other"

    def test_partial_size_rejected(self):
        """Test a size record needs both values."""
        with pytest.raises(ValidationError):
            ContainerSize(root_fs_size=100)

    def test_primary_name_and_command_line(self):
        """Test derived display values."""
        summary = ContainerSummary(id="abc", names=["web", "alias"], command=["ls", "-l"])

        assert summary.primary_name == "web"
        assert summary.command_line == "ls -l"
        assert ContainerSummary(id="abc").primary_name == ""

    def test_to_dict_uses_external_labels(self):
        """Test serialized records use the external field labels."""
        summary = ContainerSummary(
            id="abc",
            names=["web"],
            pod_name="frontend",
            ports=[PortMapping(host_port=8080, container_port=80)],
            size=ContainerSize(root_fs_size=200, rw_size=10),
        )

        result = summary.to_dict()

        assert result["Id"] == "abc"
        assert result["Names"] == ["web"]
        assert result["PodName"] == "frontend"
        assert result["Size"] == {"RootFsSize": 200, "RwSize": 10}
        assert result["Ports"] == [
            {"HostIP": "", "HostPort": 8080, "ContainerPort": 80, "Protocol": "tcp"}
        ]
        assert "id" not in result

    def test_to_dict_absent_size_is_null(self):
        """Test an absent size serializes as null, not zero."""
        assert ContainerSummary(id="abc").to_dict()["Size"] is None

    def test_to_dict_omits_empty_namespaces(self):
        """Test only reported namespaces are serialized."""
        summary = ContainerSummary(
            id="abc",
            namespaces=ContainerNamespaces(net="4026531992", pidns="4026531836"),
        )

        assert summary.to_dict()["Namespaces"] == {"Net": "4026531992", "Pidns": "4026531836"}
        assert ContainerSummary(id="abc").to_dict()["Namespaces"] == {}


class TestPortMapping:
    """Test suite for PortMapping."""

    def test_str_published(self):
        """Test a published port renders host and container side."""
        port = PortMapping(host_ip="127.0.0.1", host_port=8080, container_port=80)

        assert str(port) == "127.0.0.1:8080->80/tcp"

    def test_str_unpublished(self):
        """Test an exposed-only port renders the container side."""
        assert str(PortMapping(container_port=53, protocol="udp")) == "53/udp"
