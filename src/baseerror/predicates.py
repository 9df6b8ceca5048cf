"""Capability checks that work on any exception value."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class StructuredError(Protocol):
    """Implemented only by this library's error values."""

    code: str
    msg: str
    system: bool

    def __structured_error__(self) -> bool: ...


def is_base_error(err: object) -> bool:
    return isinstance(err, StructuredError)


def is_system_error(err: object) -> bool:
    """Structured error classified as a system fault."""
    return isinstance(err, StructuredError) and bool(err.system)


def is_business_error(err: object) -> bool:
    """Structured error classified as a business fault. Plain errors are neither."""
    return isinstance(err, StructuredError) and not err.system


def iter_causes(err: BaseException | None) -> Iterator[BaseException]:
    """Yield each wrapped error, innermost last. Cycles are not detected."""
    cause = _next_cause(err) if err is not None else None
    while cause is not None:
        yield cause
        cause = _next_cause(cause)


def _next_cause(err: BaseException) -> BaseException | None:
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    return err.__cause__
