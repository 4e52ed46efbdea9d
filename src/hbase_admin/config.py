"""Settings for the default cluster configuration.

AdminSettings reads HBASE_* environment variables and produces the
ClusterConfig that HandleRegistry uses when no configuration is given.

Environment Variables:
    HBASE_ZOOKEEPER_QUORUM: Comma-separated ZooKeeper hosts
    HBASE_ZOOKEEPER_CLIENT_PORT: ZooKeeper client port
    HBASE_ZOOKEEPER_ZNODE_PARENT: Root znode of the cluster
    HBASE_CLIENT_RETRIES_NUMBER: Client-side retries (1 keeps calls fail-fast)

Example:
    >>> settings = AdminSettings(zookeeper_quorum="zk1,zk2")
    >>> settings.to_cluster_config().get("hbase.zookeeper.quorum")
    'zk1,zk2'
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hbase_admin.models import ClusterConfig

ZOOKEEPER_QUORUM_KEY = "hbase.zookeeper.quorum"
ZOOKEEPER_CLIENT_PORT_KEY = "hbase.zookeeper.property.clientPort"
ZOOKEEPER_ZNODE_PARENT_KEY = "zookeeper.znode.parent"
CLIENT_RETRIES_NUMBER_KEY = "hbase.client.retries.number"


class AdminSettings(BaseSettings):
    """Default cluster connection settings.

    Environment variables take precedence over field defaults.
    ``extra_properties`` is layered over the standard keys, so it can
    override any of them.
    """

    model_config = SettingsConfigDict(
        env_prefix="HBASE_",
        extra="ignore",
    )

    zookeeper_quorum: str = Field(
        default="localhost",
        description="Comma-separated ZooKeeper hosts",
    )
    zookeeper_client_port: int = Field(
        default=2181,
        ge=1,
        le=65535,
        description="ZooKeeper client port",
    )
    zookeeper_znode_parent: str = Field(
        default="/hbase",
        description="Root znode of the cluster",
    )
    client_retries_number: int = Field(
        default=1,
        ge=1,
        description="Client-side retries; 1 keeps admin calls fail-fast",
    )
    extra_properties: dict[str, str] = Field(
        default_factory=dict,
        description="Additional cluster properties passed to the connector",
    )

    def to_cluster_config(self) -> ClusterConfig:
        """Build the ClusterConfig described by these settings."""
        base = ClusterConfig.create(
            {
                ZOOKEEPER_QUORUM_KEY: self.zookeeper_quorum,
                ZOOKEEPER_CLIENT_PORT_KEY: self.zookeeper_client_port,
                ZOOKEEPER_ZNODE_PARENT_KEY: self.zookeeper_znode_parent,
                CLIENT_RETRIES_NUMBER_KEY: self.client_retries_number,
            }
        )
        return base.merged_with(self.extra_properties)


def default_cluster_config() -> ClusterConfig:
    """Return the ClusterConfig built from the current environment."""
    return AdminSettings().to_cluster_config()


__all__ = [
    "AdminSettings",
    "default_cluster_config",
    "ZOOKEEPER_QUORUM_KEY",
    "ZOOKEEPER_CLIENT_PORT_KEY",
    "ZOOKEEPER_ZNODE_PARENT_KEY",
    "CLIENT_RETRIES_NUMBER_KEY",
]
