"""Connector boundary between hbase-admin and a concrete cluster client.

hbase-admin does not speak any wire protocol. A connector turns a
ClusterConfig into a live AdminHandle and can probe a cluster without one.
Concrete connectors (Thrift gateway, REST gateway, ...) live outside this
package and are passed in by dependency injection.

Example:
    >>> from hbase_admin.connector import AdminConnector
    >>> class ThriftConnector(AdminConnector):
    ...     @property
    ...     def name(self) -> str:
    ...         return "thrift"
    ...
    ...     def connect(self, config: ClusterConfig) -> AdminHandle:
    ...         return ThriftAdmin(config.get("hbase.zookeeper.quorum"))
    ...
    ...     def check_available(self, config: ClusterConfig) -> bool:
    ...         return ThriftAdmin.ping(config.get("hbase.zookeeper.quorum"))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hbase_admin.models import ClusterConfig, ColumnFamilyDescriptor, TableDescriptor


@runtime_checkable
class AdminHandle(Protocol):
    """Protocol for a live administrative connection to the cluster.

    Handles are expected to be safe for concurrent use once obtained.
    Every method is a blocking remote call.
    """

    # Table lifecycle
    def create_table(self, descriptor: TableDescriptor) -> Any: ...

    def create_table_async(
        self, descriptor: TableDescriptor, split_keys: Sequence[bytes]
    ) -> Any: ...

    def delete_table(self, table_name: str) -> Any: ...

    def enable_table(self, table_name: str) -> Any: ...

    def disable_table(self, table_name: str) -> Any: ...

    def modify_table(self, table_name: str, descriptor: TableDescriptor) -> Any: ...

    def table_exists(self, table_name: str) -> bool: ...

    def is_table_available(self, table_name: str) -> bool: ...

    def is_table_disabled(self, table_name: str) -> bool: ...

    def is_table_enabled(self, table_name: str) -> bool: ...

    def list_tables(self) -> Sequence[TableDescriptor]: ...

    def get_table_descriptor(self, table_name: str) -> TableDescriptor: ...

    # Column family lifecycle
    def add_column(self, table_name: str, descriptor: ColumnFamilyDescriptor) -> Any: ...

    def delete_column(self, table_name: str, family_name: str) -> Any: ...

    def modify_column(
        self, table_name: str, family_name: str, descriptor: ColumnFamilyDescriptor
    ) -> Any: ...

    # Region maintenance
    def compact(self, table_or_region_name: str) -> Any: ...

    def major_compact(self, table_or_region_name: str) -> Any: ...

    def split(self, table_or_region_name: str) -> Any: ...

    def flush(self, table_or_region_name: str) -> Any: ...

    # Cluster introspection
    def get_cluster_status(self) -> Any: ...

    def get_connection(self) -> Any: ...

    def get_master(self) -> Any: ...

    def is_master_running(self) -> bool: ...

    def shutdown(self) -> Any: ...


class AdminConnector(ABC):
    """Abstract base class for cluster connectors.

    Concrete connectors must implement:
        - name: Connector identifier used in logs and errors
        - connect(): Create an AdminHandle from a ClusterConfig
        - check_available(): Probe a cluster without creating a handle

    Constructing a handle should have no side effects on the cluster;
    HandleRegistry may construct one and discard it under contention.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Connector identifier."""
        ...

    @abstractmethod
    def connect(self, config: ClusterConfig) -> AdminHandle:
        """Create a new admin handle for the cluster described by ``config``.

        Raises:
            Exception: Any connector-specific failure; the registry wraps it
                in HandleUnavailableError.
        """
        ...

    @abstractmethod
    def check_available(self, config: ClusterConfig) -> bool:
        """Return True if the cluster described by ``config`` is reachable."""
        ...


__all__ = ["AdminConnector", "AdminHandle"]
