"""
Stdout Guard

Keeps the protocol stream clean: once installed, only lines that start with
"{" reach the real stdout. Anything else written through sys.stdout (a stray
print from a dependency, say) is dropped.

Protocol writers that go through sys.stdout.buffer are not affected, since
the buffer attribute belongs to the wrapped stream.

Usage:
    with guard_stdout():
        await mcp.run_stdio_async()
"""

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO


class JsonOnlyStdout:
    """Text stream wrapper that forwards complete JSON lines and discards the rest."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending = ""
        self.dropped_lines = 0

    def write(self, text: str) -> int:
        self._pending += text
        while "\n" in self._pending:
            line, self._pending = self._pending.split("\n", 1)
            self._emit(line + "\n")
        return len(text)

    def writelines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def _emit(self, line: str) -> None:
        if line.startswith("{"):
            self._stream.write(line)
        else:
            self.dropped_lines += 1

    def flush(self) -> None:
        # A partial JSON frame is held until its newline arrives
        if self._pending and not self._pending.startswith("{"):
            self.dropped_lines += 1
            self._pending = ""
        self._stream.flush()

    def __getattr__(self, name: str):
        return getattr(self._stream, name)


@contextmanager
def guard_stdout() -> Iterator[JsonOnlyStdout]:
    """Install JsonOnlyStdout on sys.stdout for the duration of the block."""
    original = sys.stdout
    guard = JsonOnlyStdout(original)
    sys.stdout = guard
    try:
        yield guard
    finally:
        sys.stdout = original
