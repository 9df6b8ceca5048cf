"""Declarative options applied to an Error in a single merge step."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from baseerror.config.schema import cfg
from baseerror.core.stack import callers
from baseerror.formatting import sprintf

if TYPE_CHECKING:
    from baseerror.error import Error


@dataclass
class ErrorOptions:
    """Accumulator the options write into before the merge."""

    code: str = ""
    msg: str = ""
    system: bool = False
    chain: list[str] = field(default_factory=list)
    cause: BaseException | None = None
    depth: int = 0
    msg_args: tuple[Any, ...] = ()


Option = Callable[[ErrorOptions], None]


def with_code(code: str) -> Option:
    def apply(opts: ErrorOptions) -> None:
        opts.code = code

    return apply


def with_msg(msg: str) -> Option:
    def apply(opts: ErrorOptions) -> None:
        opts.msg = msg

    return apply


def with_msg_format(template: str, *args: Any) -> Option:
    """Set the message to ``template`` formatted against ``args``."""

    def apply(opts: ErrorOptions) -> None:
        opts.msg = sprintf(template, args)

    return apply


def with_msg_args(*args: Any) -> Option:
    """Format the final message template against ``args`` after all other options."""

    def apply(opts: ErrorOptions) -> None:
        opts.msg_args = args

    return apply


def with_system() -> Option:
    def apply(opts: ErrorOptions) -> None:
        opts.system = True

    return apply


def with_chain(*labels: str) -> Option:
    def apply(opts: ErrorOptions) -> None:
        opts.chain.extend(labels)

    return apply


def with_cause(cause: BaseException | None) -> Option:
    def apply(opts: ErrorOptions) -> None:
        opts.cause = cause

    return apply


def with_stack(depth: int | None = None) -> Option:
    """Capture a stack of ``depth`` frames (configured default when unset or <= 0)."""

    def apply(opts: ErrorOptions) -> None:
        opts.depth = depth if depth is not None and depth > 0 else cfg.default_stack_depth

    return apply


def apply_options(err: Error, *opts: Option | None) -> Error:
    """Merge ``opts`` into ``err`` in place and return it.

    Without options ``err`` is returned untouched. Message arguments are
    applied last, against the final message template.
    """
    if not opts:
        return err

    acc = ErrorOptions()
    for apply in opts:
        if apply is not None:
            apply(acc)

    if acc.code:
        err.code = acc.code
    if acc.msg:
        err.msg = acc.msg
    if acc.system:
        err.system = True
    if acc.chain:
        err.chain.extend(acc.chain)
    if acc.cause is not None:
        err.cause = acc.cause
    if acc.depth:
        err.stack = callers(1, acc.depth, cfg.max_scan_depth)
    if acc.msg_args:
        err.msg = sprintf(err.msg, acc.msg_args)
    return err
