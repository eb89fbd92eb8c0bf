"""Terminal drawing helpers and keyboard input."""

from __future__ import annotations

import os
import shutil
import sys
import time
from enum import Enum, auto
from typing import Callable, TextIO, Union


class Key(Enum):
    """Special keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()


KeyPress = Union[Key, str]

_WINDOWS_ARROWS = {"H": Key.UP, "P": Key.DOWN, "K": Key.LEFT, "M": Key.RIGHT}
_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "D": Key.LEFT, "C": Key.RIGHT}


def _translate(char: str) -> KeyPress:
    if char in ("\r", "\n"):
        return Key.ENTER
    if char == "\x1b":
        return Key.ESCAPE
    return char


def read_terminal_key() -> KeyPress:
    """Block until one key is pressed and return it."""
    if os.name == "nt":
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
        return _translate(char)

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        data = os.read(fd, 1)
        if data == b"\x1b":
            ready, _, _ = select.select([fd], [], [], 0.05)
            if not ready:
                return Key.ESCAPE
            rest = os.read(fd, 2)
            if rest[:1] in (b"[", b"O") and len(rest) == 2:
                return _ANSI_ARROWS.get(rest[1:].decode(errors="replace"), "")
            return Key.ESCAPE
        if data and data[0] >= 0x80:
            # Complete a multi-byte UTF-8 character.
            expected = 2 if data[0] < 0xE0 else 3 if data[0] < 0xF0 else 4
            data += os.read(fd, expected - 1)
        return _translate(data.decode(errors="replace"))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def stat_bar(label: str, current: float, maximum: float, bar_length: int = 15) -> str:
    """Render a gauge such as ``HP [■■■   ]``."""
    current = max(current, 0)
    ratio = current / maximum if maximum > 0 else 0
    filled = int(ratio * bar_length)
    cells = "".join("■" if i < filled else " " for i in range(bar_length))
    return f"{label} [{cells}]"


class Console:
    """A text screen addressed by cursor position, plus a key source."""

    def __init__(
        self,
        stream: TextIO | None = None,
        keys: Callable[[], KeyPress] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._keys = keys if keys is not None else read_terminal_key
        self._sleep = sleep if sleep is not None else time.sleep

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def move_to(self, x: int, y: int) -> None:
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def write_highlighted(self, text: str) -> None:
        """Write text in bright red, then restore the normal colour."""
        self.write(f"\x1b[91m{text}\x1b[0m")

    def clear(self) -> None:
        self.write("\x1b[2J\x1b[H")

    def show_cursor(self, visible: bool) -> None:
        self.write("\x1b[?25h" if visible else "\x1b[?25l")

    def set_inverted(self, inverted: bool) -> None:
        """Switch the whole screen to reverse video or back."""
        self.write("\x1b[?5h" if inverted else "\x1b[?5l")

    def terminal_size(self) -> tuple[int, int]:
        """Return the visible (columns, rows)."""
        size = shutil.get_terminal_size()
        return size.columns, size.lines

    def draw_box(self, x: int, y: int, width: int, height: int) -> None:
        inner = "─" * (width - 2)
        self.move_to(x, y)
        self.write(f"┌{inner}┐")
        for row in range(1, height - 1):
            self.move_to(x, y + row)
            self.write("│")
            self.move_to(x + width - 1, y + row)
            self.write("│")
        self.move_to(x, y + height - 1)
        self.write(f"└{inner}┘")

    def draw_dialogue_box(self, message: str) -> None:
        """Show a message near the bottom of the field and wait for a key."""
        width, height, start_x, start_y = 40, 5, 2, 15
        self.draw_box(start_x, start_y, width, height)
        self.move_to(start_x + 1, start_y + 2)
        self.write(" " * (width * 2 - 4))
        self.move_to(start_x + 2, start_y + 2)
        self.write(message)
        self.read_key()

    def read_key(self) -> KeyPress:
        return self._keys()

    def pause(self, milliseconds: int) -> None:
        self._sleep(milliseconds / 1000)