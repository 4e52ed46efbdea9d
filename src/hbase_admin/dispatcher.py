"""Uniform calling convention for administrative operations.

Every operation on HBaseAdmin is written once, against an explicit handle::

    @admin_operation
    def delete_table(self, handle: AdminHandle, table_name: str) -> Any:
        return handle.delete_table(table_name)

and called in either of two forms::

    admin.delete_table("users")                   # shared default handle
    admin.delete_table("users", admin=my_handle)  # caller-owned handle

The explicit form performs no registry lookup. Both forms run inside an
OpenTelemetry span named ``hbase.admin.<operation>``, tagged with the table
or family named by the first argument.

Errors:
    Arguments that do not fit the operation raise TypeError before any
    handle is resolved.
    AdminError subclasses (e.g. HandleUnavailableError) propagate unchanged.
    Any other exception raised by the remote call is wrapped in
    RemoteOperationError, chained from the original.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, Concatenate, ParamSpec, Protocol, TypeVar, overload

import structlog

from hbase_admin.errors import AdminError, RemoteOperationError
from hbase_admin.telemetry import operation_span

if TYPE_CHECKING:
    from collections.abc import Callable

    from hbase_admin.connector import AdminHandle
    from hbase_admin.registry import HandleRegistry

P = ParamSpec("P")
R = TypeVar("R")

logger = structlog.get_logger(__name__)


class SupportsRegistry(Protocol):
    """Owner of dispatched operations: exposes the handle registry."""

    @property
    def registry(self) -> HandleRegistry: ...


S = TypeVar("S", bound=SupportsRegistry)


def resolve_handle(owner: SupportsRegistry, admin: AdminHandle | None) -> AdminHandle:
    """Return ``admin`` if given, otherwise the owner's default handle."""
    if admin is not None:
        return admin
    return owner.registry.default_handle()


def _resource_name(value: Any) -> str | None:
    """Name of the table or family an operation acts on, if it has one."""
    if isinstance(value, str):
        return value
    name = getattr(value, "name", None)
    return name if isinstance(name, str) else None


@overload
def admin_operation(
    func: Callable[Concatenate[S, AdminHandle, P], R],
    *,
    name: str | None = ...,
) -> Callable[..., R]: ...


@overload
def admin_operation(
    func: None = ...,
    *,
    name: str | None = ...,
) -> Callable[[Callable[Concatenate[S, AdminHandle, P], R]], Callable[..., R]]: ...


def admin_operation(
    func: Callable[..., Any] | None = None,
    *,
    name: str | None = None,
) -> Any:
    """Give an operation its default-handle and explicit-handle call forms.

    The decorated method receives the resolved handle as its first argument
    after ``self``; callers never pass it positionally. Instead they may pass
    ``admin=<handle>`` as a keyword.

    Args:
        func: Method to decorate (when used without parentheses).
        name: Operation name for spans, logs and errors. Defaults to the
            method name.
    """

    def decorator(fn: Callable[..., R]) -> Callable[..., R]:
        operation = name or fn.__name__
        signature = inspect.signature(fn)
        parameters = list(signature.parameters)
        resource_parameter = parameters[2] if len(parameters) > 2 else None

        @functools.wraps(fn)
        def wrapper(self: SupportsRegistry, *args: Any, admin: AdminHandle | None = None, **kwargs: Any) -> R:
            # Arity errors are the caller's; raise them before touching the registry.
            bound = signature.bind(self, None, *args, **kwargs)
            resource = _resource_name(bound.arguments.get(resource_parameter)) if resource_parameter else None
            explicit_handle = admin is not None

            with operation_span(operation, resource=resource, explicit_handle=explicit_handle):
                handle = resolve_handle(self, admin)
                logger.debug(
                    "admin_operation_dispatched",
                    operation=operation,
                    resource=resource,
                    explicit_handle=explicit_handle,
                )
                try:
                    return fn(self, handle, *args, **kwargs)
                except AdminError:
                    raise
                except Exception as exc:
                    logger.error(
                        "admin_operation_failed",
                        operation=operation,
                        resource=resource,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                    msg = f"Remote operation {operation} failed: {exc}"
                    raise RemoteOperationError(msg, operation=operation) from exc

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["SupportsRegistry", "admin_operation", "resolve_handle"]
