"""HBaseAdmin - administrative operations against a sorted-map cluster.

HBaseAdmin is a thin facade: each operation is a single call on an admin
handle. The handle is either passed explicitly with ``admin=`` or resolved
from the injected HandleRegistry (see hbase_admin.dispatcher).

Example:
    >>> from hbase_admin import HBaseAdmin, HandleRegistry
    >>> from hbase_admin.descriptors import column_descriptor, table_descriptor
    >>>
    >>> registry = HandleRegistry(connector=thrift_connector)
    >>> admin = HBaseAdmin(registry)
    >>> admin.create_table(
    ...     table_descriptor("users", "family", column_descriptor("info", max_versions=1))
    ... )
    >>> admin.table_enabled("users")
    True
    >>> admin.major_compact("users", admin=maintenance_handle)

See Also:
    - HandleRegistry: Shared default handle
    - AdminConnector: Connector boundary for concrete cluster clients
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import structlog

from hbase_admin.dispatcher import admin_operation
from hbase_admin.errors import AdminError, HandleUnavailableError
from hbase_admin.registry import HandleRegistry
from hbase_admin.telemetry import operation_span

if TYPE_CHECKING:
    from hbase_admin.connector import AdminConnector, AdminHandle
    from hbase_admin.models import ClusterConfig, ColumnFamilyDescriptor, TableDescriptor


class HBaseAdmin:
    """Administrative operations on tables, column families and the cluster.

    Every operation accepts an optional keyword ``admin`` handle. Without
    it, the registry's shared default handle is used.

    Attributes:
        registry: Registry providing the default handle.
    """

    def __init__(self, registry: HandleRegistry) -> None:
        """Initialize HBaseAdmin with an injected handle registry.

        Args:
            registry: Registry providing the default handle. Share one
                registry between admins that should reuse a handle.
        """
        self._registry = registry
        self._log = structlog.get_logger(__name__).bind(
            connector=getattr(registry.connector, "name", "unknown"),
        )

    @classmethod
    def from_connector(
        cls,
        connector: AdminConnector,
        config: ClusterConfig | None = None,
    ) -> HBaseAdmin:
        """Create an HBaseAdmin with its own registry.

        Args:
            connector: Connector used to construct handles.
            config: Default cluster config. Defaults to AdminSettings.
        """
        return cls(HandleRegistry(connector, default_config=config))

    @property
    def registry(self) -> HandleRegistry:
        """Registry providing the default handle."""
        return self._registry

    # =========================================================================
    # Handle Management
    # =========================================================================

    def set_admin_config(self, config: ClusterConfig) -> AdminHandle:
        """Replace the shared default handle with one built from ``config``."""
        return self._registry.override(config)

    def hbase_available(self, config: ClusterConfig | None = None) -> bool:
        """Probe whether a cluster is reachable, without any admin handle.

        Args:
            config: Cluster to probe. Defaults to the registry's default config.

        Returns:
            True if the connector reports the cluster reachable.

        Raises:
            HandleUnavailableError: If the probe itself fails.
        """
        with operation_span("hbase_available"):
            probe_config = config if config is not None else self._registry.default_config
            try:
                available = bool(self._registry.connector.check_available(probe_config))
            except AdminError:
                raise
            except Exception as exc:
                msg = f"Cluster availability probe failed: {exc}"
                raise HandleUnavailableError(
                    msg,
                    connector=getattr(self._registry.connector, "name", None),
                ) from exc
        self._log.debug("hbase_available_checked", available=available)
        return available

    # =========================================================================
    # Table Lifecycle
    # =========================================================================

    @admin_operation
    def create_table(self, handle: AdminHandle, table_descriptor: TableDescriptor) -> Any:
        """Create a table from ``table_descriptor``."""
        return handle.create_table(table_descriptor)

    @admin_operation
    def create_table_async(
        self,
        handle: AdminHandle,
        table_descriptor: TableDescriptor,
        split_keys: Sequence[bytes],
    ) -> Any:
        """Start creating a pre-split table; returns before regions are online."""
        return handle.create_table_async(table_descriptor, split_keys)

    @admin_operation
    def delete_table(self, handle: AdminHandle, table_name: str) -> Any:
        return handle.delete_table(table_name)

    @admin_operation
    def enable_table(self, handle: AdminHandle, table_name: str) -> Any:
        return handle.enable_table(table_name)

    @admin_operation
    def disable_table(self, handle: AdminHandle, table_name: str) -> Any:
        return handle.disable_table(table_name)

    @admin_operation
    def modify_table(
        self,
        handle: AdminHandle,
        table_name: str,
        table_descriptor: TableDescriptor,
    ) -> Any:
        return handle.modify_table(table_name, table_descriptor)

    @admin_operation
    def table_exists(self, handle: AdminHandle, table_name: str) -> bool:
        return handle.table_exists(table_name)

    @admin_operation
    def table_available(self, handle: AdminHandle, table_name: str) -> bool:
        return handle.is_table_available(table_name)

    @admin_operation
    def table_disabled(self, handle: AdminHandle, table_name: str) -> bool:
        return handle.is_table_disabled(table_name)

    @admin_operation
    def table_enabled(self, handle: AdminHandle, table_name: str) -> bool:
        return handle.is_table_enabled(table_name)

    @admin_operation
    def list_tables(self, handle: AdminHandle) -> list[TableDescriptor]:
        """List descriptors of all user tables."""
        return list(handle.list_tables())

    @admin_operation
    def get_table_descriptor(self, handle: AdminHandle, table_name: str) -> TableDescriptor:
        return handle.get_table_descriptor(table_name)

    # =========================================================================
    # Column Family Lifecycle
    # =========================================================================

    @admin_operation
    def add_column_family(
        self,
        handle: AdminHandle,
        table_name: str,
        column_descriptor: ColumnFamilyDescriptor,
    ) -> Any:
        return handle.add_column(table_name, column_descriptor)

    @admin_operation
    def delete_column_family(self, handle: AdminHandle, table_name: str, family_name: str) -> Any:
        return handle.delete_column(table_name, family_name)

    @admin_operation
    def modify_column_family(
        self,
        handle: AdminHandle,
        table_name: str,
        family_name: str,
        column_descriptor: ColumnFamilyDescriptor,
    ) -> Any:
        return handle.modify_column(table_name, family_name, column_descriptor)

    # =========================================================================
    # Region Maintenance
    # =========================================================================

    @admin_operation
    def compact(self, handle: AdminHandle, table_or_region_name: str) -> Any:
        """Request a minor compaction. The cluster schedules it asynchronously."""
        return handle.compact(table_or_region_name)

    @admin_operation
    def major_compact(self, handle: AdminHandle, table_or_region_name: str) -> Any:
        """Request a major compaction. The cluster schedules it asynchronously."""
        return handle.major_compact(table_or_region_name)

    @admin_operation
    def split(self, handle: AdminHandle, table_or_region_name: str) -> Any:
        return handle.split(table_or_region_name)

    @admin_operation
    def flush(self, handle: AdminHandle, table_or_region_name: str) -> Any:
        return handle.flush(table_or_region_name)

    # =========================================================================
    # Cluster Introspection
    # =========================================================================

    @admin_operation
    def cluster_status(self, handle: AdminHandle) -> Any:
        return handle.get_cluster_status()

    @admin_operation
    def get_connection(self, handle: AdminHandle) -> Any:
        return handle.get_connection()

    @admin_operation
    def get_master(self, handle: AdminHandle) -> Any:
        return handle.get_master()

    @admin_operation
    def master_running(self, handle: AdminHandle) -> bool:
        return handle.is_master_running()

    @admin_operation
    def shutdown(self, handle: AdminHandle) -> Any:
        """Shut down the cluster. Irreversible from the client side."""
        self._log.warning("cluster_shutdown_requested")
        return handle.shutdown()


__all__ = ["HBaseAdmin"]
