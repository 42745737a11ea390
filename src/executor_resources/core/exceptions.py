"""Custom exceptions for executor-resources."""


class ExecutorResourcesError(Exception):
    """Base exception for executor-resources."""


class ValidationError(ExecutorResourcesError):
    """Validation error for resource request parameters."""


class InvalidResourceName(ValidationError, ValueError):
    """Resource name is neither a built-in executor resource nor a custom one.

    Custom resources must be namespaced under the ``resource.`` prefix
    (for example ``resource.gpu``).
    """

    def __init__(self, resource_name: object) -> None:
        self.resource_name = resource_name
        super().__init__(f"Executor resource not allowed: {resource_name}")


class ConfigError(ExecutorResourcesError):
    """Error in configuration."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""
