"""Option schemas and the raw option stream parser.

A raw option stream is a flat sequence alternating an option name and the
values it consumes, for example::

    ["max-versions", 3, "in-memory", True, "max-versions", 5]

parse_options() partitions such a stream, left to right, into ParsedSpec
tuples using a per-descriptor-kind OptionSchema. Repeats are kept and order
is preserved; the descriptor builder applies them last-write-wins.

ColumnFamilySpecs and TableSpecs build the same ParsedSpec sequences through
typed methods, for callers that do not want to assemble raw token lists.

Example:
    >>> from hbase_admin.options import COLUMN_FAMILY_SCHEMA, parse_options
    >>> parse_options(COLUMN_FAMILY_SCHEMA, ["max-versions", 3])
    [ParsedSpec(option=<ColumnFamilyOption.MAX_VERSIONS: 'max-versions'>, values=(3,), token='max-versions')]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from hbase_admin.errors import MalformedArgumentsError, UnknownOptionError
from hbase_admin.models import (
    BloomFilterType,
    ColumnFamilyDescriptor,
    ColumnFamilyOption,
    CompressionType,
    TableOption,
)

# =============================================================================
# Schema
# =============================================================================


@dataclass(frozen=True)
class OptionSchema:
    """Immutable mapping from option name to arity for one descriptor kind.

    Option tokens resolve to members of ``option_type``. A token may be the
    enum member itself, its hyphenated value (``"max-versions"``) or the
    underscore spelling (``"max_versions"``).

    Attributes:
        kind: Descriptor kind, used in error messages.
        option_type: Enum whose members name the options.
        arities: Number of values each option consumes.
    """

    kind: str
    option_type: type[Enum]
    arities: Mapping[Enum, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for option, arity in self.arities.items():
            if not isinstance(option, self.option_type):
                msg = f"{self.kind} schema key {option!r} is not a {self.option_type.__name__}"
                raise TypeError(msg)
            if isinstance(arity, bool) or not isinstance(arity, int) or arity < 1:
                msg = f"{self.kind} schema arity for {option.value!r} must be a positive int"
                raise ValueError(msg)
        object.__setattr__(self, "arities", MappingProxyType(dict(self.arities)))

    def resolve(self, token: Any) -> Enum | None:
        """Return the schema option named by ``token``, or None."""
        option: Enum | None = None
        if isinstance(token, self.option_type):
            option = token
        elif isinstance(token, str):
            try:
                option = self.option_type(token.replace("_", "-"))
            except ValueError:
                return None
        return option if option in self.arities else None

    def arity(self, option: Enum) -> int:
        """Return the number of values ``option`` consumes."""
        return self.arities[option]

    @property
    def option_names(self) -> list[str]:
        """Option names in schema order."""
        return [str(option.value) for option in self.arities]

    def __contains__(self, token: object) -> bool:
        return self.resolve(token) is not None

    def __len__(self) -> int:
        return len(self.arities)


COLUMN_FAMILY_SCHEMA = OptionSchema(
    kind="column family",
    option_type=ColumnFamilyOption,
    arities={
        ColumnFamilyOption.BLOCK_CACHE_ENABLED: 1,  # bool
        ColumnFamilyOption.BLOCK_SIZE: 1,  # int
        ColumnFamilyOption.BLOOM_FILTER_TYPE: 1,  # BloomFilterType
        ColumnFamilyOption.COMPRESSION_TYPE: 1,  # CompressionType
        ColumnFamilyOption.IN_MEMORY: 1,  # bool
        ColumnFamilyOption.MAX_VERSIONS: 1,  # int
        ColumnFamilyOption.TIME_TO_LIVE: 1,  # int seconds
    },
)
"""Schema for column family descriptor options."""

TABLE_SCHEMA = OptionSchema(
    kind="table",
    option_type=TableOption,
    arities={
        TableOption.MAX_FILE_SIZE: 1,  # int bytes
        TableOption.MEM_STORE_FLUSH_SIZE: 1,  # int bytes
        TableOption.READ_ONLY: 1,  # bool
        TableOption.FAMILY: 1,  # ColumnFamilyDescriptor
    },
)
"""Schema for table descriptor options."""


# =============================================================================
# Parsed Specs
# =============================================================================


@dataclass(frozen=True)
class ParsedSpec:
    """One validated option and the values it consumed.

    Attributes:
        option: The schema option.
        values: Values in stream order; length equals the option's arity.
        token: The option token exactly as it appeared in the raw stream,
            or None for specs built without one. Not part of equality.
    """

    option: Enum
    values: tuple[Any, ...]
    token: Any = field(default=None, compare=False)

    @property
    def value(self) -> Any:
        """The first value; the whole value of an arity-1 option."""
        return self.values[0]


def parse_options(schema: OptionSchema, tokens: Iterable[Any]) -> list[ParsedSpec]:
    """Partition a raw option stream into ParsedSpec tuples.

    The stream is consumed greedily from left to right. Each option token is
    followed by exactly ``schema.arity(option)`` values. No option is
    required; an empty stream yields an empty list.

    Args:
        schema: Schema for the descriptor kind being built.
        tokens: Raw option stream.

    Returns:
        Specs in the order their options appear in the stream.

    Raises:
        UnknownOptionError: If an option token is not in the schema.
        MalformedArgumentsError: If the stream ends before an option's
            values are all present.

    Example:
        >>> specs = parse_options(TABLE_SCHEMA, ["read-only", True])
        >>> specs[0].value
        True
    """
    stream = list(tokens)
    specs: list[ParsedSpec] = []
    cursor = 0
    while cursor < len(stream):
        token = stream[cursor]
        option = schema.resolve(token)
        if option is None:
            msg = f"Unknown {schema.kind} option: {token!r}"
            raise UnknownOptionError(msg, option=token, known_options=schema.option_names)

        arity = schema.arity(option)
        remaining = len(stream) - cursor - 1
        if remaining < arity:
            msg = f"{schema.kind.capitalize()} option {option.value!r} expects {arity} value(s)"
            raise MalformedArgumentsError(
                msg,
                option=option,
                expected=arity,
                received=remaining,
            )

        values = tuple(stream[cursor + 1 : cursor + 1 + arity])
        specs.append(ParsedSpec(option, values, token=token))
        cursor += 1 + arity
    return specs


def unparse_options(specs: Iterable[ParsedSpec]) -> list[Any]:
    """Flatten specs back into a raw option stream.

    Each option is written as the token it was parsed from; specs built
    without a token use the hyphenated option name.
    """
    tokens: list[Any] = []
    for spec in specs:
        tokens.append(spec.option.value if spec.token is None else spec.token)
        tokens.extend(spec.values)
    return tokens


def keyword_specs(schema: OptionSchema, options: Mapping[str, Any]) -> list[ParsedSpec]:
    """Convert keyword arguments into specs, in keyword order.

    Arity-1 options take the keyword value as is. Options with a larger
    arity take a sequence of exactly that many values.

    Raises:
        UnknownOptionError: If a keyword is not in the schema.
        MalformedArgumentsError: If a multi-value option gets the wrong count.
    """
    specs: list[ParsedSpec] = []
    for key, value in options.items():
        option = schema.resolve(key)
        if option is None:
            msg = f"Unknown {schema.kind} option: {key!r}"
            raise UnknownOptionError(msg, option=key, known_options=schema.option_names)
        arity = schema.arity(option)
        if arity == 1:
            specs.append(ParsedSpec(option, (value,), token=key))
            continue
        if isinstance(value, Sequence) and not isinstance(value, str):
            values = tuple(value)
        else:
            values = (value,)
        if len(values) != arity:
            msg = f"{schema.kind.capitalize()} option {option.value!r} expects {arity} value(s)"
            raise MalformedArgumentsError(msg, option=option, expected=arity, received=len(values))
        specs.append(ParsedSpec(option, values, token=key))
    return specs


# =============================================================================
# Typed Spec Builders
# =============================================================================


class _SpecsBuilder:
    """Accumulates ParsedSpec tuples in call order."""

    def __init__(self) -> None:
        self._specs: list[ParsedSpec] = []

    def _add(self, option: Enum, *values: Any) -> Any:
        self._specs.append(ParsedSpec(option, values))
        return self

    def build(self) -> list[ParsedSpec]:
        """Return the accumulated specs."""
        return list(self._specs)

    def __len__(self) -> int:
        return len(self._specs)


class ColumnFamilySpecs(_SpecsBuilder):
    """Typed builder for column family specs.

    Example:
        >>> specs = ColumnFamilySpecs().max_versions(1).in_memory(True).build()
        >>> build_column_descriptor("info", specs)
    """

    def block_cache_enabled(self, enabled: bool) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.BLOCK_CACHE_ENABLED, enabled)

    def block_size(self, size: int) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.BLOCK_SIZE, size)

    def bloom_filter_type(self, bloom: BloomFilterType | str) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.BLOOM_FILTER_TYPE, bloom)

    def compression_type(self, compression: CompressionType | str) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.COMPRESSION_TYPE, compression)

    def in_memory(self, in_memory: bool) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.IN_MEMORY, in_memory)

    def max_versions(self, versions: int) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.MAX_VERSIONS, versions)

    def time_to_live(self, seconds: int) -> ColumnFamilySpecs:
        return self._add(ColumnFamilyOption.TIME_TO_LIVE, seconds)


class TableSpecs(_SpecsBuilder):
    """Typed builder for table specs."""

    def max_file_size(self, size: int) -> TableSpecs:
        return self._add(TableOption.MAX_FILE_SIZE, size)

    def mem_store_flush_size(self, size: int) -> TableSpecs:
        return self._add(TableOption.MEM_STORE_FLUSH_SIZE, size)

    def read_only(self, read_only: bool) -> TableSpecs:
        return self._add(TableOption.READ_ONLY, read_only)

    def family(self, family: ColumnFamilyDescriptor) -> TableSpecs:
        return self._add(TableOption.FAMILY, family)


__all__ = [
    "OptionSchema",
    "COLUMN_FAMILY_SCHEMA",
    "TABLE_SCHEMA",
    "ParsedSpec",
    "parse_options",
    "unparse_options",
    "keyword_specs",
    "ColumnFamilySpecs",
    "TableSpecs",
]
