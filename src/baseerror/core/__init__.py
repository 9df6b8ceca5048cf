"""Stack capture internals: frame classification and snapshots."""

from baseerror.core.frames import find_boundary, is_library_frame, is_test_file, library_root
from baseerror.core.stack import Frame, Stack, callers

__all__ = ["Frame", "Stack", "callers", "find_boundary", "is_library_frame", "is_test_file", "library_root"]
