"""
Sinks for trace lines emitted by a Context.
"""

from typing import Iterator, List


class TraceRecorder:
    """Observer that keeps every trace line it receives."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


def console_observer(message: str) -> None:
    """Print a trace line to stdout."""
    print(message)
