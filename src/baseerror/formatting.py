"""printf-style message formatting that never raises."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger


def _safe_text(value: Any, render: Any = repr) -> str:
    """Render ``value``; an object whose own rendering raises shows as its type name."""
    try:
        return render(value)
    except Exception as exc:  # noqa: BLE001
        return f"<{type(value).__name__} PANIC={type(exc).__name__}>"


def sprintf(template: str, args: tuple[Any, ...]) -> str:
    """Apply ``template % args``.

    A single mapping argument feeds ``%(name)s`` placeholders. When the
    template and arguments do not fit, or an argument fails to render, the
    template is returned with an inline ``%!(BADFORMAT ...)`` marker instead
    of raising.
    """
    if not args:
        return template
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return template % values
    except Exception as exc:  # noqa: BLE001
        reason = f"{type(exc).__name__}: {_safe_text(exc, str)}"
        shown = "(" + ", ".join(_safe_text(arg) for arg in args) + ("," if len(args) == 1 else "") + ")"
        logger.debug("Bad message format {} for args {}: {}", _safe_text(template), shown, reason)
        return f"{template}%!(BADFORMAT {reason}: {shown})"
