"""Shared test fixtures for hbase-admin.

Provides mock implementations of AdminConnector and AdminHandle so that
HandleRegistry and HBaseAdmin can be tested without a running cluster.

Note:
    No __init__.py files in test directories - pytest uses importlib mode
    which causes namespace collisions with __init__.py files.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

import pytest

from hbase_admin.admin import HBaseAdmin
from hbase_admin.connector import AdminConnector
from hbase_admin.models import ClusterConfig
from hbase_admin.registry import HandleRegistry
from hbase_admin.telemetry import reset_tracer

if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Mock AdminHandle
# =============================================================================


class MockAdminHandle:
    """In-memory admin handle that records every remote call.

    Attributes:
        config: ClusterConfig the handle was built from.
        calls: (method name, args) in call order.
        tables: Table descriptors keyed by name.
        disabled: Names of disabled tables.
        fail_with: If set, every remote call raises this exception.
    """

    def __init__(self, config: ClusterConfig) -> None:
        self.config = config
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.tables: dict[str, Any] = {}
        self.disabled: set[str] = set()
        self.fail_with: Exception | None = None
        self.master_up = True

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if self.fail_with is not None:
            raise self.fail_with

    # Table lifecycle
    def create_table(self, descriptor: Any) -> None:
        self._record("create_table", descriptor)
        self.tables[descriptor.name] = descriptor

    def create_table_async(self, descriptor: Any, split_keys: Any) -> None:
        self._record("create_table_async", descriptor, split_keys)
        self.tables[descriptor.name] = descriptor

    def delete_table(self, table_name: str) -> None:
        self._record("delete_table", table_name)
        if table_name not in self.disabled:
            msg = f"table {table_name} is not disabled"
            raise RuntimeError(msg)
        del self.tables[table_name]
        self.disabled.discard(table_name)

    def enable_table(self, table_name: str) -> None:
        self._record("enable_table", table_name)
        self.disabled.discard(table_name)

    def disable_table(self, table_name: str) -> None:
        self._record("disable_table", table_name)
        self.disabled.add(table_name)

    def modify_table(self, table_name: str, descriptor: Any) -> None:
        self._record("modify_table", table_name, descriptor)
        self.tables[table_name] = descriptor

    def table_exists(self, table_name: str) -> bool:
        self._record("table_exists", table_name)
        return table_name in self.tables

    def is_table_available(self, table_name: str) -> bool:
        self._record("is_table_available", table_name)
        return table_name in self.tables

    def is_table_disabled(self, table_name: str) -> bool:
        self._record("is_table_disabled", table_name)
        return table_name in self.disabled

    def is_table_enabled(self, table_name: str) -> bool:
        self._record("is_table_enabled", table_name)
        return table_name in self.tables and table_name not in self.disabled

    def list_tables(self) -> tuple[Any, ...]:
        self._record("list_tables")
        return tuple(self.tables.values())

    def get_table_descriptor(self, table_name: str) -> Any:
        self._record("get_table_descriptor", table_name)
        return self.tables[table_name]

    # Column family lifecycle
    def add_column(self, table_name: str, descriptor: Any) -> None:
        self._record("add_column", table_name, descriptor)
        self.tables[table_name].add_family(descriptor)

    def delete_column(self, table_name: str, family_name: str) -> None:
        self._record("delete_column", table_name, family_name)
        del self.tables[table_name].families[family_name]

    def modify_column(self, table_name: str, family_name: str, descriptor: Any) -> None:
        self._record("modify_column", table_name, family_name, descriptor)
        self.tables[table_name].families[family_name] = descriptor

    # Region maintenance
    def compact(self, name: str) -> None:
        self._record("compact", name)

    def major_compact(self, name: str) -> None:
        self._record("major_compact", name)

    def split(self, name: str) -> None:
        self._record("split", name)

    def flush(self, name: str) -> None:
        self._record("flush", name)

    # Cluster introspection
    def get_cluster_status(self) -> dict[str, Any]:
        self._record("get_cluster_status")
        return {"live_servers": 3, "dead_servers": 0}

    def get_connection(self) -> str:
        self._record("get_connection")
        return f"connection:{self.config.get('hbase.zookeeper.quorum')}"

    def get_master(self) -> str:
        self._record("get_master")
        return "master-1:16000"

    def is_master_running(self) -> bool:
        self._record("is_master_running")
        return self.master_up

    def shutdown(self) -> None:
        self._record("shutdown")
        self.master_up = False


# =============================================================================
# Mock AdminConnector
# =============================================================================


class MockAdminConnector(AdminConnector):
    """Connector that builds MockAdminHandle instances.

    Attributes:
        handles: Every handle built, in construction order.
        connect_error: If set, connect() raises this exception.
        available: Value returned by check_available().
        probe_error: If set, check_available() raises this exception.
        probed_configs: Configs passed to check_available().
    """

    def __init__(self) -> None:
        self.handles: list[MockAdminHandle] = []
        self.connect_error: Exception | None = None
        self.available = True
        self.probe_error: Exception | None = None
        self.probed_configs: list[ClusterConfig] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "mock"

    def connect(self, config: ClusterConfig) -> MockAdminHandle:
        if self.connect_error is not None:
            raise self.connect_error
        handle = MockAdminHandle(config)
        with self._lock:
            self.handles.append(handle)
        return handle

    def check_available(self, config: ClusterConfig) -> bool:
        self.probed_configs.append(config)
        if self.probe_error is not None:
            raise self.probe_error
        return self.available


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_otel_tracer() -> Generator[None, None, None]:
    """Clear cached tracers between tests."""
    reset_tracer()
    yield
    reset_tracer()


@pytest.fixture
def default_config() -> ClusterConfig:
    """Default cluster config used by the test registry."""
    return ClusterConfig.create({"hbase.zookeeper.quorum": "zk-default"})


@pytest.fixture
def mock_connector() -> MockAdminConnector:
    """Fresh MockAdminConnector."""
    return MockAdminConnector()


@pytest.fixture
def registry(mock_connector: MockAdminConnector, default_config: ClusterConfig) -> HandleRegistry:
    """Empty HandleRegistry backed by the mock connector."""
    return HandleRegistry(mock_connector, default_config=default_config)


@pytest.fixture
def admin(registry: HandleRegistry) -> HBaseAdmin:
    """HBaseAdmin using the test registry."""
    return HBaseAdmin(registry)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "requirement(id): Mark test as covering a specific requirement",
    )
