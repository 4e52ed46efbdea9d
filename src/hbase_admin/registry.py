"""HandleRegistry - shared, lazily created admin handle.

The registry owns a single slot holding the admin handle that operations
use when the caller does not pass one explicitly. There is no module-level
instance: create one registry and share it with every HBaseAdmin that
should reuse the same handle.

Slot lifecycle:
    empty -> populated on first default_handle() or override()
          -> replaced on each override()
    The registry never closes or tears down a handle.

Concurrency:
    default_handle() reads the slot without a lock once it is populated.
    When the slot is empty, the caller connects outside the lock and then
    installs under the lock only if the slot is still empty; a caller that
    loses the race discards its fresh handle and returns the winner's.
    override() replaces the slot unconditionally. Handles already handed
    out stay valid and in-flight operations finish against them.

Example:
    >>> registry = HandleRegistry(connector=thrift_connector)
    >>> handle = registry.default_handle()
    >>> registry.default_handle() is handle
    True
    >>> registry.override(ClusterConfig.create({"hbase.zookeeper.quorum": "zk2"}))
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from hbase_admin.config import default_cluster_config
from hbase_admin.errors import AdminError, HandleUnavailableError

if TYPE_CHECKING:
    from hbase_admin.connector import AdminConnector, AdminHandle
    from hbase_admin.models import ClusterConfig


class HandleRegistry:
    """Injectable provider of the shared default admin handle.

    Attributes:
        connector: Connector used to construct handles.
        default_config: Config used when the slot is populated implicitly.
    """

    def __init__(
        self,
        connector: AdminConnector,
        default_config: ClusterConfig | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            connector: Connector used to construct handles.
            default_config: Config for implicit handle creation. Defaults to
                AdminSettings().to_cluster_config(), read at first use.
        """
        self._connector = connector
        self._default_config = default_config
        self._handle: AdminHandle | None = None
        self._handle_config: ClusterConfig | None = None
        self._lock = threading.Lock()
        self._log = structlog.get_logger(__name__).bind(
            connector=getattr(connector, "name", "unknown"),
        )

    @property
    def connector(self) -> AdminConnector:
        """Connector used to construct handles."""
        return self._connector

    @property
    def default_config(self) -> ClusterConfig:
        """Config used when the slot is populated implicitly.

        Raises:
            HandleUnavailableError: If the HBASE_* environment does not
                describe a valid cluster config.
        """
        if self._default_config is None:
            try:
                self._default_config = default_cluster_config()
            except ValidationError as exc:
                self._log.error("default_config_invalid", error_count=exc.error_count())
                msg = f"Invalid default cluster config: {exc}"
                raise HandleUnavailableError(
                    msg,
                    connector=getattr(self._connector, "name", None),
                ) from exc
        return self._default_config

    @property
    def is_populated(self) -> bool:
        """True once a handle has been installed."""
        return self._handle is not None

    @property
    def current_config(self) -> ClusterConfig | None:
        """Config the installed handle was built from, or None."""
        return self._handle_config

    def default_handle(self) -> AdminHandle:
        """Return the shared handle, creating it on first use.

        Returns:
            The installed admin handle.

        Raises:
            HandleUnavailableError: If the connector fails to build a handle.
        """
        handle = self._handle
        if handle is not None:
            return handle

        config = self.default_config
        fresh = self._connect(config)
        with self._lock:
            if self._handle is None:
                self._handle = fresh
                self._handle_config = config
                self._log.info("default_handle_installed")
            else:
                self._log.debug("default_handle_discarded", reason="lost_install_race")
            return self._handle

    def override(self, config: ClusterConfig) -> AdminHandle:
        """Replace the shared handle with one built from ``config``.

        Previously returned handles are not closed or invalidated.

        Args:
            config: Cluster configuration for the new handle.

        Returns:
            The newly installed handle.

        Raises:
            HandleUnavailableError: If the connector fails to build a handle.
                The slot is left unchanged in that case.
        """
        fresh = self._connect(config)
        with self._lock:
            replaced = self._handle is not None
            self._handle = fresh
            self._handle_config = config
        self._log.info("default_handle_overridden", replaced=replaced)
        return fresh

    def handle_for(self, config: ClusterConfig) -> AdminHandle:
        """Build a handle for ``config`` without installing it.

        The caller owns the returned handle and its lifetime.

        Raises:
            HandleUnavailableError: If the connector fails to build a handle.
        """
        return self._connect(config)

    def _connect(self, config: ClusterConfig) -> AdminHandle:
        self._log.debug("connecting_admin_handle")
        try:
            return self._connector.connect(config)
        except AdminError:
            raise
        except Exception as exc:
            msg = f"Failed to connect admin handle: {exc}"
            raise HandleUnavailableError(
                msg,
                connector=getattr(self._connector, "name", None),
            ) from exc


__all__ = ["HandleRegistry"]
