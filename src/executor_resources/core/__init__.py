"""Core models and abstractions for executor-resources."""

from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ExecutorResourcesError,
    InvalidResourceName,
    ValidationError,
)
from .names import ALLOWED_EXECUTOR_RESOURCES, RESOURCE_DOT, is_allowed_executor_resource
from .resources import ExecutorResourceRequest, ExecutorResourceRequests

__all__ = [
    # Exceptions
    "ConfigError",
    "ConfigNotFoundError",
    "ExecutorResourcesError",
    "InvalidResourceName",
    "ValidationError",
    # Names
    "ALLOWED_EXECUTOR_RESOURCES",
    "RESOURCE_DOT",
    "is_allowed_executor_resource",
    # Types
    "ExecutorResourceRequest",
    "ExecutorResourceRequests",
]
