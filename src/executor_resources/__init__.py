"""executor-resources: validated executor resource requests for cluster schedulers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("executor-resources")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from executor_resources.core.conf import parse_executor_conf
from executor_resources.core.config import ExecResConfig, get_config, load_config, reload_config
from executor_resources.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ExecutorResourcesError,
    InvalidResourceName,
    ValidationError,
)
from executor_resources.core.names import (
    ALLOWED_EXECUTOR_RESOURCES,
    CORES,
    MEMORY,
    OVERHEAD_MEM,
    PYSPARK_MEM,
    RESOURCE_DOT,
    RESOURCE_PREFIX,
    is_allowed_executor_resource,
)
from executor_resources.core.resources import ExecutorResourceRequest, ExecutorResourceRequests
from executor_resources.core.units import byte_string_as_mb

__all__ = [
    # Version
    "__version__",
    # Core
    "ExecutorResourceRequest",
    "ExecutorResourceRequests",
    "parse_executor_conf",
    "byte_string_as_mb",
    # Names
    "ALLOWED_EXECUTOR_RESOURCES",
    "CORES",
    "MEMORY",
    "OVERHEAD_MEM",
    "PYSPARK_MEM",
    "RESOURCE_DOT",
    "RESOURCE_PREFIX",
    "is_allowed_executor_resource",
    # Config
    "load_config",
    "get_config",
    "reload_config",
    "ExecResConfig",
    # Exceptions
    "ExecutorResourcesError",
    "ValidationError",
    "InvalidResourceName",
    "ConfigError",
    "ConfigNotFoundError",
]
