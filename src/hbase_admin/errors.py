"""Exception types for hbase-admin package.

This module defines the exception hierarchy for descriptor building and
administrative operations. All exceptions inherit from AdminError to enable
catch-all error handling.

Exception Hierarchy:
    AdminError (base)
    ├── OptionError - Raw option stream problems (user input)
    │   ├── UnknownOptionError - Option name absent from the schema
    │   ├── MalformedArgumentsError - Stream ends before arity is satisfied
    │   └── OptionValueError - Descriptor field rejected the value
    ├── BuilderDispatchError - Schema/builder drift (invariant violation)
    ├── HandleUnavailableError - Admin handle could not be constructed
    └── RemoteOperationError - Remote administrative call failed

Example:
    >>> from hbase_admin.errors import AdminError, UnknownOptionError
    >>> try:
    ...     column_descriptor("cf", "not-a-real-option", 5)
    ... except UnknownOptionError as e:
    ...     print(f"Unknown option {e.option}")
    ... except AdminError as e:
    ...     print(f"Admin operation failed: {e}")
"""

from __future__ import annotations

from typing import Any


class AdminError(Exception):
    """Base exception for all hbase-admin errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.

    Example:
        >>> try:
        ...     admin.create_table(descriptor)
        ... except AdminError as e:
        ...     logger.error("admin operation failed", error=str(e), details=e.details)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize AdminError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


# =============================================================================
# Option Stream Errors
# =============================================================================


class OptionError(AdminError):
    """Base class for errors in a caller-supplied option stream.

    Attributes:
        option: The option name involved in the error.
    """

    def __init__(
        self,
        message: str,
        option: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize OptionError.

        Args:
            message: Human-readable error description.
            option: The option name involved in the error.
            details: Additional error context.
        """
        _details = dict(details or {})
        if option is not None:
            _details["option"] = _option_label(option)
        super().__init__(message, _details)
        self.option = option


class UnknownOptionError(OptionError):
    """Option name is not part of the applicable schema.

    Attributes:
        known_options: Option names the schema accepts.

    Example:
        >>> raise UnknownOptionError(
        ...     "Unknown column family option",
        ...     option="not-a-real-option",
        ...     known_options=["block-size", "max-versions"],
        ... )
    """

    def __init__(
        self,
        message: str,
        option: Any = None,
        known_options: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize UnknownOptionError.

        Args:
            message: Human-readable error description.
            option: The unrecognized option name.
            known_options: Option names the schema accepts.
            details: Additional error context.
        """
        super().__init__(message, option=option, details=details)
        self.known_options = list(known_options or [])


class MalformedArgumentsError(OptionError):
    """Option stream ended before an option's arity was satisfied.

    Attributes:
        expected: Number of values the option requires.
        received: Number of values left in the stream.

    Example:
        >>> raise MalformedArgumentsError(
        ...     "Option is missing values",
        ...     option="max-versions",
        ...     expected=1,
        ...     received=0,
        ... )
    """

    def __init__(
        self,
        message: str,
        option: Any = None,
        expected: int = 0,
        received: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize MalformedArgumentsError.

        Args:
            message: Human-readable error description.
            option: The option whose values are missing.
            expected: Number of values the option requires.
            received: Number of values left in the stream.
            details: Additional error context.
        """
        _details = dict(details or {})
        _details["expected"] = expected
        _details["received"] = received
        super().__init__(message, option=option, details=_details)
        self.expected = expected
        self.received = received


class OptionValueError(OptionError):
    """Descriptor field rejected the value supplied for an option.

    Attributes:
        value: The rejected value.

    Example:
        >>> raise OptionValueError(
        ...     "Invalid value for option",
        ...     option="max-versions",
        ...     value="many",
        ... )
    """

    def __init__(
        self,
        message: str,
        option: Any = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize OptionValueError.

        Args:
            message: Human-readable error description.
            option: The option the value was supplied for.
            value: The rejected value.
            details: Additional error context.
        """
        _details = dict(details or {})
        if value is not None:
            _details["value"] = repr(value)
        super().__init__(message, option=option, details=_details)
        self.value = value


# =============================================================================
# Builder Errors
# =============================================================================


class BuilderDispatchError(AdminError):
    """A parsed option has no setter in the descriptor builder.

    This is an invariant violation: the option schema and the builder are
    out of sync. It never indicates bad user input.

    Attributes:
        option: The option without a setter.
    """

    def __init__(
        self,
        message: str,
        option: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize BuilderDispatchError.

        Args:
            message: Human-readable error description.
            option: The option without a setter.
            details: Additional error context.
        """
        _details = dict(details or {})
        if option is not None:
            _details["option"] = _option_label(option)
        super().__init__(message, _details)
        self.option = option


# =============================================================================
# Handle and Remote Errors
# =============================================================================


class HandleUnavailableError(AdminError):
    """An admin handle could not be constructed.

    Raised when the connector fails to produce a handle, for example
    because the cluster configuration cannot be reached.

    Attributes:
        connector: Name of the connector that failed.

    Example:
        >>> raise HandleUnavailableError(
        ...     "Failed to connect admin handle",
        ...     connector="thrift",
        ... )
    """

    def __init__(
        self,
        message: str,
        connector: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize HandleUnavailableError.

        Args:
            message: Human-readable error description.
            connector: Name of the connector that failed.
            details: Additional error context.
        """
        _details = dict(details or {})
        if connector:
            _details["connector"] = connector
        super().__init__(message, _details)
        self.connector = connector


class RemoteOperationError(AdminError):
    """The remote administrative call failed.

    Wraps the connector's exception, which is available as ``__cause__``.
    The cluster may have partially applied the operation.

    Attributes:
        operation: Name of the administrative operation.

    Example:
        >>> raise RemoteOperationError(
        ...     "Remote operation failed: table is not disabled",
        ...     operation="delete_table",
        ... )
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize RemoteOperationError.

        Args:
            message: Human-readable error description.
            operation: Name of the administrative operation.
            details: Additional error context.
        """
        _details = dict(details or {})
        if operation:
            _details["operation"] = operation
        super().__init__(message, _details)
        self.operation = operation


def _option_label(option: Any) -> str:
    """Render an option name for error details."""
    return str(getattr(option, "value", option))


# Export all exception types
__all__ = [
    # Base
    "AdminError",
    # Option stream
    "OptionError",
    "UnknownOptionError",
    "MalformedArgumentsError",
    "OptionValueError",
    # Builder
    "BuilderDispatchError",
    # Handle and remote
    "HandleUnavailableError",
    "RemoteOperationError",
]
