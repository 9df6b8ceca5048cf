"""Defaults and fixed markers."""

from __future__ import annotations

DEFAULT_STACK_DEPTH = 3
MAX_SCAN_DEPTH = 15
DEFAULT_CHAIN_SEPARATOR = " -> "
CAUSE_SEPARATOR = "\n---cause---\n"

# Directory names that host a whole tree of library code (src layout).
PACKAGE_HOST_MARKERS: tuple[str, ...] = ("src",)

TEST_FILE_PREFIX = "test_"
TEST_FILE_SUFFIX = "_test.py"
TEST_HARNESS_FILES: tuple[str, ...] = ("conftest.py",)
