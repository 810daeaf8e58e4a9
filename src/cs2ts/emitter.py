"""Line buffer with indentation tracking and brace-scoped blocks."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

INDENT = "    "


class Emitter:
    """Accumulates output lines for one translation run.

    The buffer is append-only. Depth only changes through ``scope()``, which
    always closes the brace it opened, even when the body raises.
    """

    def __init__(self):
        self._lines: list[str] = []
        self.indent_level = 0

    # ---- Output helpers ----

    def indentation(self) -> str:
        return INDENT * self.indent_level

    def emit(self, text: str):
        self._lines.append(self.indentation() + text)

    def emit_format(self, template: str, *args):
        self.emit(template.format(*args))

    @contextmanager
    def scope(self) -> Iterator[None]:
        """Emit ``{``, indent the body, then dedent and emit ``}``."""
        self.emit("{")
        self.indent_level += 1
        try:
            yield
        finally:
            self.indent_level -= 1
            self.emit("}")

    # ---- Results ----

    def finalize(self) -> list[str]:
        """Return a copy of the lines emitted so far. Does not reset state."""
        return list(self._lines)

    def output(self, newline: str = "\n") -> str:
        return newline.join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
