"""Structured errors with codes, causes, chain labels and caller-aware stack capture."""

from loguru import logger

from baseerror.constructors import (
    clone,
    new,
    new_code,
    new_code_wrap,
    new_system,
    new_system_code,
    new_system_code_wrap,
    new_system_wrap,
    new_wrap,
)
from baseerror.core import Frame, Stack
from baseerror.error import ConfigurationError, Error
from baseerror.options import (
    ErrorOptions,
    Option,
    apply_options,
    with_cause,
    with_chain,
    with_code,
    with_msg,
    with_msg_args,
    with_msg_format,
    with_stack,
    with_system,
)
from baseerror.predicates import StructuredError, is_base_error, is_business_error, is_system_error, iter_causes

__version__ = "0.1.0"

# Library diagnostics stay silent until the application enables them.
logger.disable("baseerror")

__all__ = [
    "ConfigurationError",
    "Error",
    "ErrorOptions",
    "Frame",
    "Option",
    "Stack",
    "StructuredError",
    "__version__",
    "apply_options",
    "clone",
    "is_base_error",
    "is_business_error",
    "is_system_error",
    "iter_causes",
    "new",
    "new_code",
    "new_code_wrap",
    "new_system",
    "new_system_code",
    "new_system_code_wrap",
    "new_system_wrap",
    "new_wrap",
    "with_cause",
    "with_chain",
    "with_code",
    "with_msg",
    "with_msg_args",
    "with_msg_format",
    "with_stack",
    "with_system",
]
