"""hbase-admin: administrative control surface for a sorted-map cluster.

This package lets an operator build column family and table descriptors
from keyword-tagged option streams and run administrative operations
(create/alter/inspect tables and column families, compaction, split,
flush, enable/disable, shutdown) against the cluster.

The wire protocol is not part of this package. A concrete AdminConnector
produces admin handles, and HandleRegistry shares one of them as the
default handle for every operation.

Example:
    >>> from hbase_admin import HBaseAdmin, HandleRegistry
    >>> from hbase_admin.descriptors import column_descriptor, table_descriptor
    >>>
    >>> admin = HBaseAdmin(HandleRegistry(connector=thrift_connector))
    >>> info = column_descriptor("info", "max-versions", 1, "in-memory", True)
    >>> admin.create_table(table_descriptor("users", "family", info))
    >>> admin.compact("users")

Modules:
    admin: HBaseAdmin operations facade
    registry: HandleRegistry shared default handle
    dispatcher: admin_operation calling convention
    options: Option schemas and raw stream parser
    descriptors: Descriptor builders
    models: Pydantic descriptor and config models
    connector: AdminConnector ABC and AdminHandle protocol
    config: AdminSettings environment configuration
    errors: Custom exception types
    telemetry: OpenTelemetry instrumentation
"""

from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "HBaseAdmin",
    "HandleRegistry",
    "AdminConnector",
    "AdminSettings",
    "ClusterConfig",
    "column_descriptor",
    "table_descriptor",
]


# Lazy imports to keep startup light
def __getattr__(name: str) -> object:
    """Lazy import of package components."""
    if name == "HBaseAdmin":
        from hbase_admin.admin import HBaseAdmin

        return HBaseAdmin
    if name == "HandleRegistry":
        from hbase_admin.registry import HandleRegistry

        return HandleRegistry
    if name == "AdminConnector":
        from hbase_admin.connector import AdminConnector

        return AdminConnector
    if name == "AdminSettings":
        from hbase_admin.config import AdminSettings

        return AdminSettings
    if name == "ClusterConfig":
        from hbase_admin.models import ClusterConfig

        return ClusterConfig
    if name == "column_descriptor":
        from hbase_admin.descriptors import column_descriptor

        return column_descriptor
    if name == "table_descriptor":
        from hbase_admin.descriptors import table_descriptor

        return table_descriptor
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
