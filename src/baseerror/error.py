"""Structured error value: code, message, cause, classification, chain, stack."""

from __future__ import annotations

import json
import traceback
from collections.abc import Iterable
from typing import Any

from baseerror.config.schema import cfg
from baseerror.core.constants import CAUSE_SEPARATOR
from baseerror.core.stack import Stack, callers
from baseerror.formatting import sprintf
from baseerror.options import Option, apply_options


class Error(Exception):
    """Error with a stable code and an optional cause, chain and stack.

    ``str(err)`` is the short form (``"[code] msg"``); ``format(err, "+v")``
    adds the captured stack and the full cause chain. Mutators update the
    error in place and return it, so they chain::

        err = Error("user %s not found").with_code("E404").with_msg_args("bob")
    """

    def __init__(
        self,
        msg: str = "",
        *,
        code: str = "",
        system: bool = False,
        chain: Iterable[str] | None = None,
        cause: BaseException | None = None,
        stack: Stack | None = None,
    ) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg
        self.system = system
        self.chain: list[str] = list(chain) if chain else []
        self.stack = stack
        self._cause: BaseException | None = None
        self.cause = cause

    def __structured_error__(self) -> bool:
        return True

    @property
    def cause(self) -> BaseException | None:
        """Directly wrapped error; mirrored into ``__cause__``."""
        return self._cause

    @cause.setter
    def cause(self, cause: BaseException | None) -> None:
        self._cause = cause
        self.__cause__ = cause if isinstance(cause, BaseException) else None

    def unwrap(self) -> BaseException | None:
        return self._cause

    @property
    def chain_text(self) -> str:
        """Chain labels joined with the configured separator."""
        return cfg.chain_separator.join(self.chain)

    # Mutators

    def with_code(self, code: str) -> Error:
        self.code = code
        return self

    def with_msg(self, msg: str) -> Error:
        self.msg = msg
        return self

    def with_msg_args(self, *args: Any) -> Error:
        """Format the current message as a template against ``args``."""
        self.msg = sprintf(self.msg, args)
        return self

    def with_msg_format(self, template: str, *args: Any) -> Error:
        self.msg = sprintf(template, args)
        return self

    def with_system(self) -> Error:
        self.system = True
        return self

    def with_chain(self, *labels: str) -> Error:
        self.chain.extend(labels)
        return self

    def with_cause(self, cause: BaseException | None) -> Error:
        self.cause = cause
        return self

    def with_stack(self, depth: int | None = None) -> Error:
        """Replace the stack with a fresh capture starting at the caller."""
        if depth is None or depth <= 0:
            depth = cfg.default_stack_depth
        self.stack = callers(1, depth, cfg.max_scan_depth)
        return self

    def clone(self, *opts: Option | None) -> Error:
        """Copy without the stack, then apply ``opts``."""
        copy = Error(self.msg, code=self.code, system=self.system, chain=self.chain, cause=self._cause)
        return apply_options(copy, *opts)

    # Rendering

    def short_form(self) -> str:
        if self.code:
            return f"[{self.code}] {self.msg}"
        if self.msg and cfg.bracket_empty_code:
            return f"[] {self.msg}"
        return self.msg

    def verbose_form(self) -> str:
        """Short form, captured stack, then each cause after a separator line."""
        text = self.short_form()
        if self.stack is not None:
            text += self.stack.format()
        if self._cause is not None:
            text += CAUSE_SEPARATOR + _verbose_cause(self._cause)
        return text

    def quoted_form(self) -> str:
        """Short form as a double-quoted, escaped string literal."""
        return json.dumps(self.short_form(), ensure_ascii=False)

    def __str__(self) -> str:
        return self.short_form()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, msg={self.msg!r}, system={self.system!r})"

    def __format__(self, spec: str) -> str:
        if spec == "+v":
            return self.verbose_form()
        if spec == "q":
            return self.quoted_form()
        if spec in ("", "s", "v"):
            return self.short_form()
        return format(self.short_form(), spec)

    # Serialization

    def to_dict(self) -> dict[str, str]:
        """Public fields only; system, chain, cause and stack stay internal."""
        return {"code": self.code, "msg": self.msg}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _verbose_cause(cause: BaseException) -> str:
    if isinstance(cause, Error):
        return cause.verbose_form()
    text = "".join(traceback.format_exception_only(type(cause), cause)).rstrip("\n")
    tb = getattr(cause, "__traceback__", None)
    if tb is not None:
        text += "\n" + "".join(traceback.format_tb(tb)).rstrip("\n")
    return text


class ConfigurationError(Error):
    """Settings failed validation. Always a system fault."""

    def __init__(self, code: str, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message, code=code, system=True)
        self.details = details or {}
