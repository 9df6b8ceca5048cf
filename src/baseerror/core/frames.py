"""Frame classifier: decide which stack frames belong to this library."""

from __future__ import annotations

import functools
import os
from pathlib import Path
from types import FrameType

from loguru import logger

from baseerror.core.constants import (
    MAX_SCAN_DEPTH,
    PACKAGE_HOST_MARKERS,
    TEST_FILE_PREFIX,
    TEST_FILE_SUFFIX,
    TEST_HARNESS_FILES,
)


def _to_slash(path: str | Path) -> str:
    return str(path).replace(os.sep, "/")


def source_root(file: str | Path) -> str:
    """Library root for a source file living one package below the top-level package.

    Uses the grandparent of the file's directory when that is a package host
    (``src/``), otherwise the top-level package directory itself.
    """
    here = Path(os.path.abspath(file)).parent
    package_dir = here.parent
    host = package_dir.parent
    root = host if host.name in PACKAGE_HOST_MARKERS else package_dir
    return _to_slash(root).rstrip("/") + "/"


@functools.cache
def library_root() -> str:
    """Canonical root of this library's sources. Computed once."""
    return source_root(__file__)


def is_test_file(path: str) -> bool:
    """True for pytest modules and harness files (always treated as callers)."""
    name = _to_slash(path).rsplit("/", 1)[-1]
    if name in TEST_HARNESS_FILES:
        return True
    return name.endswith(".py") and (name.startswith(TEST_FILE_PREFIX) or name.endswith(TEST_FILE_SUFFIX))


def is_library_frame(path: str, root: str | None = None) -> bool:
    """True if ``path`` is under the library root and is not a test file."""
    if root is None:
        root = library_root()
    normalized = _to_slash(os.path.abspath(path)) if path and not path.startswith("<") else path
    return normalized.startswith(root) and not is_test_file(normalized)


def find_boundary(frame: FrameType | None, limit: int = MAX_SCAN_DEPTH) -> tuple[FrameType | None, int]:
    """Scan outward from ``frame`` for the first caller frame.

    Returns the frame and its offset from ``frame``. When no caller frame shows
    up within ``limit`` frames, the last examined frame is returned instead.
    """
    last: FrameType | None = frame
    index = 0
    for index in range(max(limit, 1)):
        if frame is None:
            break
        if not is_library_frame(frame.f_code.co_filename):
            return frame, index
        last = frame
        frame = frame.f_back
    logger.debug("No caller frame within {} frames; using last examined position", limit)
    return last, index
