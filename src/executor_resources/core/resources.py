"""Executor resource requests."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from executor_resources.core.exceptions import InvalidResourceName
from executor_resources.core.names import (
    CORES,
    MEMORY,
    MEMORY_RESOURCES,
    OVERHEAD_MEM,
    PYSPARK_MEM,
    is_allowed_executor_resource,
    is_custom_resource,
)
from executor_resources.core.units import byte_string_as_mb

logger = logging.getLogger(__name__)

DEFAULT_CONF_PREFIX = "spark.executor."


@dataclass(frozen=True, slots=True)
class ExecutorResourceRequest:
    """A single resource requirement for an executor.

    Built-in resources are ``cores``, ``memory``, ``memoryOverhead`` and
    ``pyspark.memory``. Anything else must be a custom resource under the
    ``resource.`` namespace, e.g. ``resource.gpu``, matching the
    ``spark.executor.resource.{name}.*`` configuration keys.

    Examples:
        ExecutorResourceRequest("cores", 4)
        ExecutorResourceRequest("memoryOverhead", 1024)
        ExecutorResourceRequest("resource.gpu", 2, "/opt/getGpus.sh")

    Attributes:
        resource_name: Name of the resource
        amount: Amount requested per executor (MiB for memory resources)
        discovery_script: Script run on executor startup to discover the
            addresses of the allocated resources. Required on cluster managers
            that do not report them. Never executed here.
        vendor: Vendor tag, required by some cluster managers

    Raises:
        InvalidResourceName: If *resource_name* is not an allowed name.
    """

    resource_name: str
    amount: int
    discovery_script: str = ""
    vendor: str = ""

    def __post_init__(self) -> None:
        if not is_allowed_executor_resource(self.resource_name):
            raise InvalidResourceName(self.resource_name)

    @property
    def is_custom(self) -> bool:
        """True for resources in the ``resource.`` namespace."""
        return is_custom_resource(self.resource_name)

    def replace(self, **changes: Any) -> ExecutorResourceRequest:
        """Return a new request with *changes* applied (validated again)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "resourceName": self.resource_name,
            "amount": self.amount,
            "discoveryScript": self.discovery_script,
            "vendor": self.vendor,
        }

    def to_conf(self, prefix: str = DEFAULT_CONF_PREFIX) -> dict[str, str]:
        """Render this request as flat configuration keys.

        Memory resources are written in MiB with an ``m`` suffix. Custom
        resources only carry ``discoveryScript`` and ``vendor`` when set.
        """
        key = f"{prefix}{self.resource_name}"
        if self.resource_name in MEMORY_RESOURCES:
            return {key: f"{self.amount}m"}
        if not self.is_custom:
            return {key: str(self.amount)}

        conf = {f"{key}.amount": str(self.amount)}
        if self.discovery_script:
            conf[f"{key}.discoveryScript"] = self.discovery_script
        if self.vendor:
            conf[f"{key}.vendor"] = self.vendor
        return conf


class ExecutorResourceRequests:
    """A set of executor resource requests, keyed by resource name.

    Requesting the same resource twice keeps the last request. All methods
    that add a request return ``self`` so calls can be chained::

        reqs = ExecutorResourceRequests().cores(4).memory("8g").resource("resource.gpu", 1)
    """

    def __init__(self) -> None:
        self._requests: dict[str, ExecutorResourceRequest] = {}

    def require(self, request: ExecutorResourceRequest) -> ExecutorResourceRequests:
        """Add an already constructed request."""
        previous = self._requests.get(request.resource_name)
        if previous is not None and previous != request:
            logger.debug(f"Replacing executor request {previous} with {request}")
        self._requests[request.resource_name] = request
        return self

    def memory(self, amount: int | str) -> ExecutorResourceRequests:
        """Request executor heap memory (MiB, or a size string like ``"4g"``)."""
        return self.require(ExecutorResourceRequest(MEMORY, byte_string_as_mb(amount)))

    def memory_overhead(self, amount: int | str) -> ExecutorResourceRequests:
        """Request executor overhead memory (MiB, or a size string)."""
        return self.require(ExecutorResourceRequest(OVERHEAD_MEM, byte_string_as_mb(amount)))

    def pyspark_memory(self, amount: int | str) -> ExecutorResourceRequests:
        """Request memory for the Python worker (MiB, or a size string)."""
        return self.require(ExecutorResourceRequest(PYSPARK_MEM, byte_string_as_mb(amount)))

    def cores(self, amount: int) -> ExecutorResourceRequests:
        return self.require(ExecutorResourceRequest(CORES, amount))

    def resource(
        self,
        resource_name: str,
        amount: int,
        discovery_script: str = "",
        vendor: str = "",
    ) -> ExecutorResourceRequests:
        """Request a custom resource such as ``resource.gpu``."""
        return self.require(
            ExecutorResourceRequest(resource_name, amount, discovery_script, vendor)
        )

    @property
    def requests(self) -> dict[str, ExecutorResourceRequest]:
        """Copy of the requests keyed by resource name."""
        return dict(self._requests)

    def get(self, resource_name: str) -> ExecutorResourceRequest | None:
        return self._requests.get(resource_name)

    def custom_resources(self) -> dict[str, ExecutorResourceRequest]:
        """Requests in the custom resource namespace only."""
        return {name: r for name, r in self._requests.items() if r.is_custom}

    def to_conf(self, prefix: str = DEFAULT_CONF_PREFIX) -> dict[str, str]:
        conf: dict[str, str] = {}
        for request in self._requests.values():
            conf.update(request.to_conf(prefix))
        return conf

    def __contains__(self, resource_name: object) -> bool:
        return resource_name in self._requests

    def __iter__(self) -> Iterator[ExecutorResourceRequest]:
        return iter(self._requests.values())

    def __len__(self) -> int:
        return len(self._requests)

    def __bool__(self) -> bool:
        return bool(self._requests)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExecutorResourceRequests):
            return NotImplemented
        return self._requests == other._requests

    def __repr__(self) -> str:
        return f"ExecutorResourceRequests({list(self._requests.values())!r})"

