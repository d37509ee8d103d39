import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from container_ps.models.container import ContainerSize, ContainerSummary


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.api.containers.return_value = []
    return mock_client


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep stored defaults out of the real user config for all tests."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CONTAINER_PS_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def make_container():
    """Factory for listing entries with sensible defaults."""
    def _make(id="c1", names=None, size=None, **kwargs):
        if isinstance(size, int):
            size = ContainerSize(root_fs_size=size, rw_size=0)
        return ContainerSummary(
            id=id,
            names=[f"name-{id}"] if names is None else names,
            size=size,
            **kwargs
        )
    return _make


@pytest.fixture
def engine_record():
    """A container record as returned by the engine's list call."""
    return {
        "Id": "3f2a9c1b7d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8",
        "Names": ["/web"],
        "Image": "nginx:latest",
        "Command": "nginx -g 'daemon off;'",
        "Created": 1700000000,
        "State": "running",
        "Status": "Up 2 hours",
        "Ports": [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"}],
        "Labels": {"maintainer": "ops"},
        "Mounts": [{"Type": "volume", "Destination": "/usr/share/nginx/html"}],
    }


@pytest.fixture
def engine_inspect():
    """The inspect document matching ``engine_record``."""
    return {
        "Id": "3f2a9c1b7d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8",
        "Path": "/docker-entrypoint.sh",
        "Args": ["nginx", "-g", "daemon off;"],
        "State": {
            "Status": "running",
            "Running": True,
            "Paused": False,
            "Pid": 4242,
            "ExitCode": 0,
            "StartedAt": "2023-11-14T22:13:30.123456789Z",
            "FinishedAt": "0001-01-01T00:00:00Z",
        },
        "Config": {
            "Entrypoint": ["/docker-entrypoint.sh"],
            "Cmd": ["nginx", "-g", "daemon off;"],
        },
    }
