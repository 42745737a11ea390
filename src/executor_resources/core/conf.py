"""Translate flat executor configuration keys into resource requests.

Keys follow the ``spark.executor.*`` layout::

    spark.executor.cores = 4
    spark.executor.memory = 8g
    spark.executor.memoryOverhead = 1g
    spark.executor.pyspark.memory = 2g
    spark.executor.resource.gpu.amount = 2
    spark.executor.resource.gpu.discoveryScript = /opt/getGpus.sh
    spark.executor.resource.gpu.vendor = nvidia.com
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from executor_resources.core.exceptions import ConfigError
from executor_resources.core.names import (
    CORES,
    MEMORY_RESOURCES,
    RESOURCE_DOT,
    RESOURCE_PREFIX,
)
from executor_resources.core.resources import (
    DEFAULT_CONF_PREFIX,
    ExecutorResourceRequest,
    ExecutorResourceRequests,
)
from executor_resources.core.units import byte_string_as_mb

logger = logging.getLogger(__name__)

AMOUNT = "amount"
DISCOVERY_SCRIPT = "discoveryScript"
VENDOR = "vendor"

_RESOURCE_FIELDS = (AMOUNT, DISCOVERY_SCRIPT, VENDOR)


def flatten_executor_table(table: Mapping[str, Any], parent: str = "") -> dict[str, Any]:
    """Flatten a nested TOML table into dotted keys.

    ``{"resource": {"gpu": {"amount": 1}}}`` becomes ``{"resource.gpu.amount": 1}``.
    """
    flat: dict[str, Any] = {}
    for key, value in table.items():
        full_key = f"{parent}.{key}" if parent else key
        if isinstance(value, Mapping):
            flat.update(flatten_executor_table(value, full_key))
        else:
            flat[full_key] = value
    return flat


def parse_executor_conf(
    conf: Mapping[str, Any],
    prefix: str = DEFAULT_CONF_PREFIX,
) -> ExecutorResourceRequests:
    """Build executor resource requests from configuration keys.

    Args:
        conf: Configuration keys and values. Keys not starting with *prefix*
            are ignored; pass ``prefix=""`` for keys that are already relative.
        prefix: Namespace of the executor keys

    Raises:
        ConfigError: If a value is malformed or a custom resource has no amount.
    """
    requests = ExecutorResourceRequests()
    custom: dict[str, dict[str, Any]] = {}

    for key in sorted(conf):
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        value = conf[key]

        if name == CORES:
            requests.cores(_to_int(key, value))
        elif name in MEMORY_RESOURCES:
            requests.require(ExecutorResourceRequest(name, _to_mb(key, value)))
        elif name.startswith(RESOURCE_DOT):
            resource, _, field_name = name.rpartition(".")
            if resource == RESOURCE_PREFIX or field_name not in _RESOURCE_FIELDS:
                logger.debug(f"Ignoring unsupported resource key {key}")
                continue
            custom.setdefault(resource, {})[field_name] = value
        else:
            logger.debug(f"Ignoring executor key {key}")

    for resource, fields in custom.items():
        if AMOUNT not in fields:
            raise ConfigError(f"You must specify an amount for {resource}")
        requests.resource(
            resource,
            _to_int(f"{prefix}{resource}.{AMOUNT}", fields[AMOUNT]),
            str(fields.get(DISCOVERY_SCRIPT, "")),
            str(fields.get(VENDOR, "")),
        )

    return requests


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid integer for {key}: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigError(f"Invalid integer for {key}: {value!r}") from e


def _to_mb(key: str, value: Any) -> int:
    try:
        return byte_string_as_mb(value)
    except ValueError as e:
        raise ConfigError(f"Invalid memory size for {key}: {e}") from e
