"""Named constructors. All of them funnel into ``apply_options``."""

from __future__ import annotations

from baseerror.error import Error
from baseerror.options import Option, apply_options


def new(msg: str, *opts: Option | None) -> Error:
    return apply_options(Error(msg), *opts)


def new_system(msg: str, *opts: Option | None) -> Error:
    return apply_options(Error(msg, system=True), *opts)


def new_code(code: str, msg: str, *opts: Option | None) -> Error:
    return apply_options(Error(msg, code=code), *opts)


def new_system_code(code: str, msg: str, *opts: Option | None) -> Error:
    return apply_options(Error(msg, code=code, system=True), *opts)


def new_wrap(err: BaseException | None, *opts: Option | None) -> Error | None:
    """Wrap ``err``, taking its text as the message. Wrapping ``None`` gives ``None``."""
    if err is None:
        return None
    return apply_options(Error(str(err), cause=err), *opts)


def new_system_wrap(err: BaseException | None, *opts: Option | None) -> Error | None:
    if err is None:
        return None
    return apply_options(Error(str(err), cause=err, system=True), *opts)


def new_code_wrap(code: str, err: BaseException | None, *opts: Option | None) -> Error | None:
    if err is None:
        return None
    return apply_options(Error(str(err), code=code, cause=err), *opts)


def new_system_code_wrap(code: str, err: BaseException | None, *opts: Option | None) -> Error | None:
    if err is None:
        return None
    return apply_options(Error(str(err), code=code, cause=err, system=True), *opts)


def clone(err: Error | None, *opts: Option | None) -> Error | None:
    """Copy code, msg, system, chain and cause (not the stack), then apply ``opts``."""
    if err is None:
        return None
    return err.clone(*opts)
