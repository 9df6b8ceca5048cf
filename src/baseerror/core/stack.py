"""Stack snapshots captured at error construction time."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from baseerror.core.constants import DEFAULT_STACK_DEPTH, MAX_SCAN_DEPTH
from baseerror.core.frames import find_boundary


@dataclass(frozen=True)
class Frame:
    """One resolved stack frame."""

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.function}\n\t{self.file}:{self.line}"


class Stack(Sequence[Frame]):
    """Immutable, ordered snapshot of frames, innermost first."""

    __slots__ = ("_frames",)

    def __init__(self, frames: Sequence[Frame] = ()) -> None:
        self._frames: tuple[Frame, ...] = tuple(frames)

    def __getitem__(self, index: int | slice) -> Frame | Sequence[Frame]:
        return self._frames[index]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stack):
            return self._frames == other._frames
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._frames)

    def __repr__(self) -> str:
        return f"Stack({list(self._frames)!r})"

    def format(self) -> str:
        """Multi-line text for the verbose dump; one leading newline per frame."""
        return "".join(f"\n{frame}" for frame in self._frames)

    def stack_trace(self) -> list[tuple[str, str, int]]:
        """Frames as ``(function, file, line)`` tuples."""
        return [(f.function, f.file, f.line) for f in self._frames]


def callers(skip: int = 1, depth: int = DEFAULT_STACK_DEPTH, scan_limit: int = MAX_SCAN_DEPTH) -> Stack:
    """Capture ``depth`` frames starting at the first frame outside this library.

    ``skip`` counts frames above ``callers`` itself where the scan starts.
    ``depth <= 0`` captures a single frame.
    """
    if depth <= 0:
        depth = 1
    try:
        start = sys._getframe(max(skip, 0) + 1)
    except ValueError:
        return Stack()

    frame, _ = find_boundary(start, scan_limit)
    frames: list[Frame] = []
    while frame is not None and len(frames) < depth:
        code = frame.f_code
        frames.append(Frame(code.co_name, code.co_filename, frame.f_lineno))
        frame = frame.f_back
    return Stack(frames)
