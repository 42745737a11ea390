"""Executor resource names and the rule deciding which ones may be requested."""

RESOURCE_PREFIX = "resource"
RESOURCE_DOT = f"{RESOURCE_PREFIX}."

CORES = "cores"
MEMORY = "memory"
OVERHEAD_MEM = "memoryOverhead"
PYSPARK_MEM = "pyspark.memory"

# Resources with built-in scheduling semantics. Custom resources such as
# GPUs and FPGAs go under RESOURCE_DOT instead.
ALLOWED_EXECUTOR_RESOURCES: frozenset[str] = frozenset(
    {MEMORY, OVERHEAD_MEM, PYSPARK_MEM, CORES}
)

MEMORY_RESOURCES: frozenset[str] = frozenset({MEMORY, OVERHEAD_MEM, PYSPARK_MEM})


def is_allowed_executor_resource(name: str, prefix: str = RESOURCE_DOT) -> bool:
    """Return True if *name* may be requested for an executor.

    A name is allowed when it is one of the built-in executor resources or
    starts with *prefix*. The check is case-sensitive and does no trimming.
    """
    if not isinstance(name, str):
        return False
    return name in ALLOWED_EXECUTOR_RESOURCES or name.startswith(prefix)


def is_custom_resource(name: str, prefix: str = RESOURCE_DOT) -> bool:
    """Return True if *name* lives in the custom resource namespace."""
    return isinstance(name, str) and name.startswith(prefix)
