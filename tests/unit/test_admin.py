"""Unit tests for HBaseAdmin and the admin_operation calling convention.

Every operation is exercised through the mock handle; dispatch tests check
that the default-handle and explicit-handle forms issue identical remote
calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from hbase_admin.admin import HBaseAdmin
from hbase_admin.descriptors import column_descriptor, table_descriptor
from hbase_admin.errors import HandleUnavailableError, RemoteOperationError
from hbase_admin.models import ClusterConfig

if TYPE_CHECKING:
    from hbase_admin.registry import HandleRegistry
    from tests.conftest import MockAdminConnector


@pytest.fixture
def users_table() -> Any:
    """Table descriptor with a single 'info' family."""
    return table_descriptor("users", "family", column_descriptor("info", max_versions=1))


# =============================================================================
# Dispatch Tests
# =============================================================================


class TestDispatch:
    """Tests for default-handle and explicit-handle call forms."""

    @pytest.mark.requirement("FR-009")
    def test_default_and_explicit_forms_are_equivalent(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
    ) -> None:
        """op(R) and op(R, admin=default_handle()) issue identical calls."""
        admin.compact("users")
        admin.compact("users", admin=registry.default_handle())

        handle: Any = registry.default_handle()
        assert handle.calls == [("compact", ("users",)), ("compact", ("users",))]

    @pytest.mark.requirement("FR-009")
    def test_explicit_handle_skips_registry(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        mock_connector: MockAdminConnector,
    ) -> None:
        """Passing admin= never populates the shared slot."""
        own: Any = mock_connector.connect(ClusterConfig.create({"hbase.zookeeper.quorum": "zk-own"}))

        admin.flush("users", admin=own)

        assert own.calls == [("flush", ("users",))]
        assert registry.is_populated is False

    @pytest.mark.requirement("FR-009")
    def test_default_form_populates_registry_lazily(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
    ) -> None:
        assert registry.is_populated is False
        admin.master_running()
        assert registry.is_populated is True

    @pytest.mark.requirement("FR-009")
    def test_admins_sharing_registry_share_handle(self, registry: HandleRegistry) -> None:
        """Two admins on one registry issue calls on the same handle."""
        HBaseAdmin(registry).split("users")
        HBaseAdmin(registry).split("orders")

        handle: Any = registry.default_handle()
        assert handle.calls == [("split", ("users",)), ("split", ("orders",))]

    @pytest.mark.requirement("FR-008")
    def test_set_admin_config_switches_default_handle(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
    ) -> None:
        before: Any = registry.default_handle()
        admin.set_admin_config(ClusterConfig.create({"hbase.zookeeper.quorum": "zk-b"}))

        admin.flush("users")

        after: Any = registry.default_handle()
        assert before.calls == []
        assert after.calls == [("flush", ("users",))]
        assert after.config.get("hbase.zookeeper.quorum") == "zk-b"


# =============================================================================
# Error Propagation Tests
# =============================================================================


class TestErrorPropagation:
    """Tests for RemoteOperationError wrapping."""

    @pytest.mark.requirement("FR-010")
    def test_remote_failure_wrapped(self, admin: HBaseAdmin, registry: HandleRegistry) -> None:
        """Connector exceptions become RemoteOperationError with the cause chained."""
        handle: Any = registry.default_handle()
        handle.fail_with = TimeoutError("region server timed out")

        with pytest.raises(RemoteOperationError) as exc_info:
            admin.major_compact("users")

        assert exc_info.value.operation == "major_compact"
        assert isinstance(exc_info.value.__cause__, TimeoutError)

    @pytest.mark.requirement("FR-010")
    def test_cluster_reported_failure_wrapped(self, admin: HBaseAdmin, users_table: Any) -> None:
        """Deleting an enabled table fails remotely and is wrapped."""
        admin.create_table(users_table)

        with pytest.raises(RemoteOperationError, match="not disabled"):
            admin.delete_table("users")

        assert admin.table_exists("users") is True

    @pytest.mark.requirement("FR-011")
    def test_handle_unavailable_propagates_unwrapped(
        self,
        admin: HBaseAdmin,
        mock_connector: MockAdminConnector,
    ) -> None:
        """Handle construction failures are not re-wrapped as remote errors."""
        mock_connector.connect_error = ConnectionError("refused")

        with pytest.raises(HandleUnavailableError):
            admin.list_tables()

    @pytest.mark.requirement("FR-009")
    def test_missing_argument_raises_type_error_without_connecting(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        mock_connector: MockAdminConnector,
    ) -> None:
        """Caller arity errors surface as TypeError before any handle is built."""
        with pytest.raises(TypeError):
            admin.delete_table()

        assert registry.is_populated is False
        assert mock_connector.handles == []

    @pytest.mark.requirement("FR-009")
    @pytest.mark.parametrize(
        ("operation", "args", "kwargs"),
        [
            ("flush", ("users", "extra"), {}),
            ("list_tables", ("users",), {}),
            ("enable_table", (), {"table": "users"}),
        ],
    )
    def test_bad_arguments_are_not_remote_errors(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        operation: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        with pytest.raises(TypeError):
            getattr(admin, operation)(*args, **kwargs)

        assert registry.is_populated is False

    @pytest.mark.requirement("FR-009")
    def test_bad_arguments_with_explicit_handle(self, admin: HBaseAdmin, registry: HandleRegistry) -> None:
        handle: Any = registry.handle_for(registry.default_config)

        with pytest.raises(TypeError):
            admin.split(admin=handle)

        assert handle.calls == []


# =============================================================================
# Operation Passthrough Tests
# =============================================================================


class TestTableLifecycle:
    """Tests for table lifecycle operations."""

    @pytest.mark.requirement("FR-009")
    def test_create_disable_delete(self, admin: HBaseAdmin, users_table: Any) -> None:
        admin.create_table(users_table)
        assert admin.table_exists("users") is True
        assert admin.table_available("users") is True
        assert admin.table_enabled("users") is True

        admin.disable_table("users")
        assert admin.table_disabled("users") is True
        assert admin.table_enabled("users") is False

        admin.delete_table("users")
        assert admin.table_exists("users") is False

    @pytest.mark.requirement("FR-009")
    def test_enable_table(self, admin: HBaseAdmin, users_table: Any) -> None:
        admin.create_table(users_table)
        admin.disable_table("users")

        admin.enable_table("users")

        assert admin.table_enabled("users") is True

    @pytest.mark.requirement("FR-009")
    def test_create_table_async_passes_split_keys(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        users_table: Any,
    ) -> None:
        split_keys = [b"g", b"n", b"t"]

        admin.create_table_async(users_table, split_keys)

        handle: Any = registry.default_handle()
        assert handle.calls[-1] == ("create_table_async", (users_table, split_keys))

    @pytest.mark.requirement("FR-009")
    def test_list_tables_returns_list(self, admin: HBaseAdmin, users_table: Any) -> None:
        admin.create_table(users_table)

        tables = admin.list_tables()

        assert isinstance(tables, list)
        assert tables == [users_table]

    @pytest.mark.requirement("FR-009")
    def test_modify_and_get_descriptor(self, admin: HBaseAdmin, users_table: Any) -> None:
        admin.create_table(users_table)
        read_only = table_descriptor("users", "read-only", True)

        admin.modify_table("users", read_only)

        assert admin.get_table_descriptor("users").read_only is True


class TestColumnFamilyLifecycle:
    """Tests for column family operations."""

    @pytest.mark.requirement("FR-009")
    def test_add_modify_delete_family(self, admin: HBaseAdmin, users_table: Any) -> None:
        admin.create_table(users_table)

        admin.add_column_family("users", column_descriptor("history", time_to_live=3600))
        assert admin.get_table_descriptor("users").family_names == ["info", "history"]

        admin.modify_column_family("users", "history", column_descriptor("history", max_versions=5))
        assert admin.get_table_descriptor("users").get_family("history").max_versions == 5

        admin.delete_column_family("users", "history")
        assert admin.get_table_descriptor("users").family_names == ["info"]


class TestClusterOperations:
    """Tests for region maintenance and cluster introspection."""

    @pytest.mark.requirement("FR-009")
    @pytest.mark.parametrize("operation", ["compact", "major_compact", "split", "flush"])
    def test_region_maintenance(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        operation: str,
    ) -> None:
        getattr(admin, operation)("users,,1700000000000.abc")

        handle: Any = registry.default_handle()
        assert handle.calls == [(operation, ("users,,1700000000000.abc",))]

    @pytest.mark.requirement("FR-009")
    def test_introspection(self, admin: HBaseAdmin) -> None:
        assert admin.cluster_status() == {"live_servers": 3, "dead_servers": 0}
        assert admin.get_connection() == "connection:zk-default"
        assert admin.get_master() == "master-1:16000"
        assert admin.master_running() is True

    @pytest.mark.requirement("FR-009")
    def test_shutdown(self, admin: HBaseAdmin) -> None:
        admin.shutdown()
        assert admin.master_running() is False


# =============================================================================
# Availability Probe Tests
# =============================================================================


class TestHbaseAvailable:
    """Tests for HBaseAdmin.hbase_available()."""

    @pytest.mark.requirement("FR-016")
    def test_probe_needs_no_handle(
        self,
        admin: HBaseAdmin,
        registry: HandleRegistry,
        mock_connector: MockAdminConnector,
        default_config: ClusterConfig,
    ) -> None:
        assert admin.hbase_available() is True
        assert mock_connector.probed_configs == [default_config]
        assert registry.is_populated is False

    @pytest.mark.requirement("FR-016")
    def test_probe_with_explicit_config(
        self,
        admin: HBaseAdmin,
        mock_connector: MockAdminConnector,
    ) -> None:
        config = ClusterConfig.create({"hbase.zookeeper.quorum": "zk-probe"})
        mock_connector.available = False

        assert admin.hbase_available(config) is False
        assert mock_connector.probed_configs == [config]

    @pytest.mark.requirement("FR-016")
    def test_probe_failure(self, admin: HBaseAdmin, mock_connector: MockAdminConnector) -> None:
        mock_connector.probe_error = ConnectionError("master not running")

        with pytest.raises(HandleUnavailableError):
            admin.hbase_available()

    @pytest.mark.requirement("FR-016")
    def test_probe_with_invalid_settings(
        self,
        mock_connector: MockAdminConnector,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HBASE_ZOOKEEPER_CLIENT_PORT", "not-a-port")
        admin = HBaseAdmin.from_connector(mock_connector)

        with pytest.raises(HandleUnavailableError):
            admin.hbase_available()
        assert mock_connector.probed_configs == []

    @pytest.mark.requirement("FR-016")
    def test_from_connector(self, mock_connector: MockAdminConnector) -> None:
        config = ClusterConfig.create({"hbase.zookeeper.quorum": "zk-x"})

        admin = HBaseAdmin.from_connector(mock_connector, config)

        assert admin.registry.default_config == config
        assert admin.registry.connector is mock_connector
