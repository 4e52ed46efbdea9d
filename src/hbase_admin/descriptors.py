"""Descriptor builder for column families and tables.

Applies an ordered sequence of ParsedSpec tuples to a fresh descriptor.
Later specs for the same option overwrite earlier ones (last-write-wins in
stream order). Dispatch on the option enum is an exhaustive match; an
option without a setter means the schema and the builder have drifted apart
and raises BuilderDispatchError.

Example:
    >>> from hbase_admin.descriptors import column_descriptor, table_descriptor
    >>> info = column_descriptor("info", "max-versions", 1, compression_type="snappy")
    >>> users = table_descriptor("users", "family", info, read_only=False)
    >>> users.family_names
    ['info']
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import ValidationError

from hbase_admin.errors import BuilderDispatchError, OptionValueError
from hbase_admin.models import (
    ColumnFamilyDescriptor,
    ColumnFamilyOption,
    TableDescriptor,
    TableOption,
)
from hbase_admin.options import (
    COLUMN_FAMILY_SCHEMA,
    TABLE_SCHEMA,
    ParsedSpec,
    keyword_specs,
    parse_options,
)

D = TypeVar("D", ColumnFamilyDescriptor, TableDescriptor)

# =============================================================================
# Column Family Descriptors
# =============================================================================


def build_column_descriptor(
    family_name: str,
    specs: Iterable[ParsedSpec],
) -> ColumnFamilyDescriptor:
    """Build a ColumnFamilyDescriptor by applying specs in order.

    Args:
        family_name: Column family name.
        specs: Parsed column family specs.

    Returns:
        New descriptor with defaults overridden by the specs.

    Raises:
        OptionValueError: If the name or a spec's value is rejected; a bad
            name is reported as option ``name``.
        BuilderDispatchError: If a spec names an option without a setter.
    """
    descriptor = _new_descriptor(ColumnFamilyDescriptor, family_name)
    for spec in specs:
        _apply_column_spec(descriptor, spec)
    return descriptor


def _apply_column_spec(descriptor: ColumnFamilyDescriptor, spec: ParsedSpec) -> None:
    match spec.option:
        case ColumnFamilyOption.BLOCK_CACHE_ENABLED:
            _set(descriptor, "block_cache_enabled", spec)
        case ColumnFamilyOption.BLOCK_SIZE:
            _set(descriptor, "block_size", spec)
        case ColumnFamilyOption.BLOOM_FILTER_TYPE:
            _set(descriptor, "bloom_filter_type", spec)
        case ColumnFamilyOption.COMPRESSION_TYPE:
            _set(descriptor, "compression_type", spec)
        case ColumnFamilyOption.IN_MEMORY:
            _set(descriptor, "in_memory", spec)
        case ColumnFamilyOption.MAX_VERSIONS:
            _set(descriptor, "max_versions", spec)
        case ColumnFamilyOption.TIME_TO_LIVE:
            _set(descriptor, "time_to_live", spec)
        case _:
            msg = f"No column family setter for option {spec.option!r}"
            raise BuilderDispatchError(msg, option=spec.option)


def column_descriptor(family_name: str, *tokens: Any, **options: Any) -> ColumnFamilyDescriptor:
    """Parse a raw option stream and build a ColumnFamilyDescriptor.

    Keyword options are applied after the raw tokens, in keyword order.

    Args:
        family_name: Column family name.
        *tokens: Raw option stream, e.g. ``"max-versions", 3``.
        **options: Options by underscore name, e.g. ``in_memory=True``.

    Returns:
        The built descriptor.

    Raises:
        UnknownOptionError: If an option is not in the column family schema.
        MalformedArgumentsError: If the stream ends inside an option.
        OptionValueError: If a descriptor field rejects a value.

    Example:
        >>> cf = column_descriptor("info", "max-versions", 3, "max-versions", 7)
        >>> cf.max_versions
        7
    """
    specs = parse_options(COLUMN_FAMILY_SCHEMA, tokens)
    specs.extend(keyword_specs(COLUMN_FAMILY_SCHEMA, options))
    return build_column_descriptor(family_name, specs)


# =============================================================================
# Table Descriptors
# =============================================================================


def build_table_descriptor(table_name: str, specs: Iterable[ParsedSpec]) -> TableDescriptor:
    """Build a TableDescriptor by applying specs in order.

    ``family`` specs add a previously built ColumnFamilyDescriptor to the
    table; a later family with the same name replaces the earlier one.

    Args:
        table_name: Table name.
        specs: Parsed table specs.

    Returns:
        New descriptor with defaults overridden by the specs.

    Raises:
        OptionValueError: If the name or a spec's value is rejected; a bad
            name is reported as option ``name``.
        BuilderDispatchError: If a spec names an option without a setter.
    """
    descriptor = _new_descriptor(TableDescriptor, table_name)
    for spec in specs:
        _apply_table_spec(descriptor, spec)
    return descriptor


def _apply_table_spec(descriptor: TableDescriptor, spec: ParsedSpec) -> None:
    match spec.option:
        case TableOption.MAX_FILE_SIZE:
            _set(descriptor, "max_file_size", spec)
        case TableOption.MEM_STORE_FLUSH_SIZE:
            _set(descriptor, "mem_store_flush_size", spec)
        case TableOption.READ_ONLY:
            _set(descriptor, "read_only", spec)
        case TableOption.FAMILY:
            if not isinstance(spec.value, ColumnFamilyDescriptor):
                msg = "Table option 'family' expects a ColumnFamilyDescriptor"
                raise OptionValueError(msg, option=spec.option, value=spec.value)
            descriptor.add_family(spec.value)
        case _:
            msg = f"No table setter for option {spec.option!r}"
            raise BuilderDispatchError(msg, option=spec.option)


def table_descriptor(table_name: str, *tokens: Any, **options: Any) -> TableDescriptor:
    """Parse a raw option stream and build a TableDescriptor.

    Keyword options are applied after the raw tokens, in keyword order.
    Since keywords cannot repeat, add several families through the raw
    stream: ``table_descriptor("t", "family", a, "family", b)``.

    Raises:
        UnknownOptionError: If an option is not in the table schema.
        MalformedArgumentsError: If the stream ends inside an option.
        OptionValueError: If a descriptor field rejects a value.
    """
    specs = parse_options(TABLE_SCHEMA, tokens)
    specs.extend(keyword_specs(TABLE_SCHEMA, options))
    return build_table_descriptor(table_name, specs)


# =============================================================================
# Helpers
# =============================================================================


def _new_descriptor(model: type[D], name: Any) -> D:
    try:
        return model(name=name)
    except ValidationError as exc:
        msg = f"Invalid {model.__name__} name"
        raise OptionValueError(msg, option="name", value=name) from exc


def _set(descriptor: ColumnFamilyDescriptor | TableDescriptor, field_name: str, spec: ParsedSpec) -> None:
    try:
        setattr(descriptor, field_name, spec.value)
    except ValidationError as exc:
        msg = f"Invalid value for option {spec.option.value!r}"
        raise OptionValueError(msg, option=spec.option, value=spec.value) from exc


__all__ = [
    "build_column_descriptor",
    "build_table_descriptor",
    "column_descriptor",
    "table_descriptor",
]
