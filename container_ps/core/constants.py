"""Constants used throughout the Container PS application."""

from pathlib import Path


# Configuration
APP_NAME = "container-ps"
CONFIG_DIR_ENV = "CONTAINER_PS_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path.home() / ".config" / APP_NAME
CONFIG_FILE_NAME = "config.json"

# Logging
LOG_LEVEL_ENV = "CONTAINER_PS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Output
OUTPUT_FORMATS = ["table", "json"]
DEFAULT_OUTPUT_FORMAT = "table"
ID_TRUNC_LENGTH = 12
COMMAND_TRUNC_LENGTH = 20

# Engine labels marking pod membership
POD_UID_LABEL = "io.kubernetes.pod.uid"
POD_NAME_LABEL = "io.kubernetes.pod.name"
CONTAINER_TYPE_LABEL = "io.kubernetes.docker.type"
INFRA_CONTAINER_TYPE = "podsandbox"

# Engine timestamp for "never happened"
ZERO_TIME = "0001-01-01T00:00:00Z"

# Namespace kinds as named under /proc/<pid>/ns, mapped to model fields
PROC_ROOT = Path("/proc")
NAMESPACE_FILES = {
    "mnt": "mnt",
    "cgroup": "cgroup",
    "ipc": "ipc",
    "net": "net",
    "pidns": "pid",
    "uts": "uts",
    "user": "user",
}
