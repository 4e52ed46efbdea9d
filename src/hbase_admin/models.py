"""Pydantic models and enumerations for hbase-admin package.

This module defines the descriptor models that the builder mutates, the
option enumerations that key the option schemas, and the cluster
configuration handed to connectors. All models use Pydantic v2 syntax.

Descriptors are mutable (they are built by applying options one at a time)
but validate every assignment, so a descriptor never holds a value of the
wrong type. ClusterConfig is frozen.

Module Constants:
    HCONSTANT_FOREVER: Time-to-live value meaning "never expire".

Enumerations:
    CompressionType: Store file compression algorithms
    BloomFilterType: Store file bloom filter kinds
    ColumnFamilyOption: Options accepted by column family descriptors
    TableOption: Options accepted by table descriptors

Models:
    ColumnFamilyDescriptor: Column family configuration
    TableDescriptor: Table configuration with owned column families
    ClusterConfig: Key/value cluster configuration for connectors

Example:
    >>> from hbase_admin.models import ColumnFamilyDescriptor, CompressionType
    >>> cf = ColumnFamilyDescriptor(name="info")
    >>> cf.compression_type = "gz"
    >>> cf.compression_type
    <CompressionType.GZ: 'gz'>
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Module Constants
# =============================================================================

HCONSTANT_FOREVER = 2147483647
"""Time-to-live meaning cells never expire (Integer.MAX_VALUE on the server)."""

DEFAULT_BLOCK_SIZE = 65536
DEFAULT_MAX_VERSIONS = 3
DEFAULT_MAX_FILE_SIZE = 268435456  # 256MB
DEFAULT_MEM_STORE_FLUSH_SIZE = 67108864  # 64MB


# =============================================================================
# Store Enumerations
# =============================================================================


class CompressionType(str, Enum):
    """Compression algorithms for column family store files.

    Attributes:
        NONE: No compression
        GZ: Gzip
        LZO: LZO (requires native library on the region servers)
        SNAPPY: Snappy
        LZ4: LZ4
        ZSTD: Zstandard

    Example:
        >>> CompressionType("snappy")
        <CompressionType.SNAPPY: 'snappy'>
    """

    NONE = "none"
    GZ = "gz"
    LZO = "lzo"
    SNAPPY = "snappy"
    LZ4 = "lz4"
    ZSTD = "zstd"


class BloomFilterType(str, Enum):
    """Bloom filter kinds for column family store files.

    Attributes:
        NONE: No bloom filter
        ROW: Bloom filter keyed on row
        ROWCOL: Bloom filter keyed on row and column
    """

    NONE = "none"
    ROW = "row"
    ROWCOL = "rowcol"


# =============================================================================
# Option Enumerations
# =============================================================================


class ColumnFamilyOption(str, Enum):
    """Options accepted when building a ColumnFamilyDescriptor.

    Values are the option names as they appear in a raw option stream.

    Example:
        >>> ColumnFamilyOption("max-versions")
        <ColumnFamilyOption.MAX_VERSIONS: 'max-versions'>
    """

    BLOCK_CACHE_ENABLED = "block-cache-enabled"
    BLOCK_SIZE = "block-size"
    BLOOM_FILTER_TYPE = "bloom-filter-type"
    COMPRESSION_TYPE = "compression-type"
    IN_MEMORY = "in-memory"
    MAX_VERSIONS = "max-versions"
    TIME_TO_LIVE = "time-to-live"


class TableOption(str, Enum):
    """Options accepted when building a TableDescriptor.

    FAMILY takes a previously built ColumnFamilyDescriptor as its value.
    """

    MAX_FILE_SIZE = "max-file-size"
    MEM_STORE_FLUSH_SIZE = "mem-store-flush-size"
    READ_ONLY = "read-only"
    FAMILY = "family"


# =============================================================================
# Descriptor Models
# =============================================================================


class ColumnFamilyDescriptor(BaseModel):
    """Configuration of a single column family.

    Every field is independently settable. Assignments are validated, so
    ``cf.max_versions = "many"`` raises pydantic.ValidationError.

    Attributes:
        name: Column family name.
        block_cache_enabled: Whether reads populate the block cache.
        block_size: Store file block size in bytes.
        bloom_filter_type: Bloom filter kind.
        compression_type: Store file compression algorithm.
        in_memory: Whether the family gets priority in the block cache.
        max_versions: Maximum cell versions retained.
        time_to_live: Cell time-to-live in seconds.

    Example:
        >>> cf = ColumnFamilyDescriptor(name="info", max_versions=1)
        >>> cf.time_to_live == HCONSTANT_FOREVER
        True
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., min_length=1, description="Column family name")
    block_cache_enabled: bool = Field(
        default=True,
        description="Whether reads populate the block cache",
    )
    block_size: int = Field(
        default=DEFAULT_BLOCK_SIZE,
        ge=1,
        description="Store file block size in bytes",
    )
    bloom_filter_type: BloomFilterType = Field(
        default=BloomFilterType.NONE,
        description="Bloom filter kind",
    )
    compression_type: CompressionType = Field(
        default=CompressionType.NONE,
        description="Store file compression algorithm",
    )
    in_memory: bool = Field(
        default=False,
        description="Whether the family gets in-memory priority in the block cache",
    )
    max_versions: int = Field(
        default=DEFAULT_MAX_VERSIONS,
        ge=1,
        description="Maximum cell versions retained",
    )
    time_to_live: int = Field(
        default=HCONSTANT_FOREVER,
        ge=1,
        description="Cell time-to-live in seconds",
    )


class TableDescriptor(BaseModel):
    """Configuration of a table and the column families it owns.

    Families are kept in insertion order. Adding a family whose name is
    already present replaces the earlier descriptor.

    Attributes:
        name: Table name.
        max_file_size: Region split threshold in bytes.
        mem_store_flush_size: Memstore flush threshold in bytes.
        read_only: Whether the table rejects mutations.
        families: Column family descriptors keyed by family name.

    Example:
        >>> td = TableDescriptor(name="users")
        >>> td.add_family(ColumnFamilyDescriptor(name="info"))
        >>> td.family_names
        ['info']
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., min_length=1, description="Table name")
    max_file_size: int = Field(
        default=DEFAULT_MAX_FILE_SIZE,
        ge=1,
        description="Region split threshold in bytes",
    )
    mem_store_flush_size: int = Field(
        default=DEFAULT_MEM_STORE_FLUSH_SIZE,
        ge=1,
        description="Memstore flush threshold in bytes",
    )
    read_only: bool = Field(default=False, description="Whether the table rejects mutations")
    families: dict[str, ColumnFamilyDescriptor] = Field(
        default_factory=dict,
        description="Column family descriptors keyed by family name",
    )

    def add_family(self, family: ColumnFamilyDescriptor) -> None:
        """Add a column family, replacing any family with the same name."""
        self.families[family.name] = family

    def has_family(self, name: str) -> bool:
        """Return True if the table owns a family called ``name``."""
        return name in self.families

    def get_family(self, name: str) -> ColumnFamilyDescriptor | None:
        """Return the family called ``name``, or None."""
        return self.families.get(name)

    @property
    def family_names(self) -> list[str]:
        """Family names in insertion order."""
        return list(self.families)


# =============================================================================
# Cluster Configuration
# =============================================================================


class ClusterConfig(BaseModel):
    """Key/value configuration describing how to reach a cluster.

    The key schema belongs to the connector; this model only carries
    string keys and string values.

    Attributes:
        properties: Cluster configuration properties.

    Example:
        >>> config = ClusterConfig.create({"hbase.zookeeper.quorum": "127.0.0.1"})
        >>> config.get("hbase.zookeeper.quorum")
        '127.0.0.1'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Cluster configuration properties",
    )

    @classmethod
    def create(cls, mapping: Mapping[Any, Any] | None = None) -> ClusterConfig:
        """Build a ClusterConfig from an arbitrary mapping.

        Enum keys contribute their value. All other keys and values are
        converted to strings; booleans become ``"true"``/``"false"``.

        Args:
            mapping: Configuration entries. None yields an empty config.

        Returns:
            New ClusterConfig.
        """
        if mapping is None:
            return cls()
        return cls(properties={_to_key(k): _to_value(v) for k, v in mapping.items()})

    def merged_with(self, mapping: Mapping[Any, Any]) -> ClusterConfig:
        """Return a new config with ``mapping`` layered over these properties."""
        merged = dict(self.properties)
        merged.update(ClusterConfig.create(mapping).properties)
        return ClusterConfig(properties=merged)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return a single property value."""
        return self.properties.get(key, default)


def _to_key(key: Any) -> str:
    return str(getattr(key, "value", key))


def _to_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "HCONSTANT_FOREVER",
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_MAX_VERSIONS",
    "DEFAULT_MAX_FILE_SIZE",
    "DEFAULT_MEM_STORE_FLUSH_SIZE",
    "CompressionType",
    "BloomFilterType",
    "ColumnFamilyOption",
    "TableOption",
    "ColumnFamilyDescriptor",
    "TableDescriptor",
    "ClusterConfig",
]
