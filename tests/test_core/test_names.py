"""Tests for executor resource name rules."""

import pytest

from executor_resources.core.names import (
    ALLOWED_EXECUTOR_RESOURCES,
    CORES,
    MEMORY,
    OVERHEAD_MEM,
    PYSPARK_MEM,
    RESOURCE_DOT,
    is_allowed_executor_resource,
    is_custom_resource,
)


class TestAllowedNames:
    """Tests for the built-in name set."""

    def test_exactly_four_builtin_names(self):
        assert ALLOWED_EXECUTOR_RESOURCES == {"cores", "memory", "memoryOverhead", "pyspark.memory"}

    def test_builtin_set_is_immutable(self):
        assert isinstance(ALLOWED_EXECUTOR_RESOURCES, frozenset)

    def test_builtin_names_do_not_use_custom_prefix(self):
        assert not any(name.startswith(RESOURCE_DOT) for name in ALLOWED_EXECUTOR_RESOURCES)

    def test_constants(self):
        assert CORES == "cores"
        assert MEMORY == "memory"
        assert OVERHEAD_MEM == "memoryOverhead"
        assert PYSPARK_MEM == "pyspark.memory"
        assert RESOURCE_DOT == "resource."


class TestIsAllowedExecutorResource:
    """Tests for is_allowed_executor_resource."""

    @pytest.mark.parametrize("name", sorted(ALLOWED_EXECUTOR_RESOURCES))
    def test_builtin_names_allowed(self, name):
        assert is_allowed_executor_resource(name)

    @pytest.mark.parametrize("name", ["resource.gpu", "resource.fpga", "resource.anything"])
    def test_custom_names_allowed(self, name):
        assert is_allowed_executor_resource(name)

    @pytest.mark.parametrize(
        "name",
        ["bogus", "Cores", "MEMORY", "resourceX", "resource", " cores", "cores ", "", "gpu"],
    )
    def test_other_names_denied(self, name):
        assert not is_allowed_executor_resource(name)

    def test_prefix_itself_is_allowed(self):
        """The bare prefix is a prefix of itself."""
        assert is_allowed_executor_resource("resource.")

    def test_prefix_must_be_at_start(self):
        assert not is_allowed_executor_resource("my.resource.gpu")
        assert not is_allowed_executor_resource("xresource.gpu")

    def test_custom_prefix(self):
        assert is_allowed_executor_resource("device.gpu", prefix="device.")
        assert not is_allowed_executor_resource("resource.gpu", prefix="device.")
        # Built-in names do not depend on the prefix
        assert is_allowed_executor_resource("cores", prefix="device.")

    def test_non_string_denied(self):
        assert not is_allowed_executor_resource(None)
        assert not is_allowed_executor_resource(42)


class TestIsCustomResource:
    def test_custom(self):
        assert is_custom_resource("resource.gpu")

    def test_builtin_is_not_custom(self):
        assert not is_custom_resource("cores")
        assert not is_custom_resource("pyspark.memory")
