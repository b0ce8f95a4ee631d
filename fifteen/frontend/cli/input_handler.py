"""Non-blocking keypress polling for the terminal frontend.

Handles arrow keys, WASD, and action keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from fifteen.backend.drivers import Button

# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    " ": "primary",
    "z": "primary",
    "Z": "primary",
    "x": "alternate",
    "X": "alternate",
    "\r": "start",
    "\n": "start",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_WINDOWS_ARROWS: dict[str, str] = {"H": "up", "P": "down", "K": "left", "M": "right"}

_BUTTONS: dict[str, Button] = {
    "up": Button.UP,
    "down": Button.DOWN,
    "left": Button.LEFT,
    "right": Button.RIGHT,
    "primary": Button.PRIMARY,
    "alternate": Button.ALTERNATE,
    "start": Button.START,
}


def parse_keys(text: str) -> list[str]:
    """Split raw terminal input into normalised action strings.

    Arrow keys arrive as ``ESC [ A/B/C/D``; any other escape is a quit.
    Unmapped characters are dropped.
    """
    actions: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\x1b":
            if text[i + 1 : i + 2] == "[" and i + 2 < len(text):
                action = _ARROW_MAP.get(text[i + 2], "")
                i += 3
            else:
                action = "quit"
                i += 1
        else:
            action = _KEY_MAP.get(ch, "")
            i += 1
        if action:
            actions.append(action)
    return actions


# -- low-level readers ---------------------------------------------------------


def _read_pending_unix(fd: int) -> str:
    """Drain every byte already waiting on *fd* without blocking."""
    import select

    chunks: list[bytes] = []
    while select.select([fd], [], [], 0)[0]:
        data = os.read(fd, 1024)
        if not data:
            break
        chunks.append(data)
    return b"".join(chunks).decode("utf-8", errors="ignore")


def _read_pending_windows() -> list[str]:
    import msvcrt  # type: ignore[import-not-found]

    actions: list[str] = []
    while msvcrt.kbhit():
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            action = _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
        elif ch == "\x1b":
            action = "quit"
        else:
            action = _KEY_MAP.get(ch, "")
        if action:
            actions.append(action)
    return actions


# -- public API ----------------------------------------------------------------


class TerminalInput:
    """Button snapshot built from whatever keys arrived since the last poll.

    Use as a context manager: the terminal stays in cbreak mode without
    echo or signal keys for the whole session and is restored on exit.
    A terminal only reports presses (plus auto-repeat), so a key counts
    as held for the tick in which it arrives.
    """

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._saved: list | None = None
        self._closed = False

    def __enter__(self) -> TerminalInput:
        if os.name != "nt":
            import termios
            import tty

            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd, termios.TCSANOW)
            attrs = termios.tcgetattr(self._fd)
            # Ctrl-C arrives as a byte and quits like Q.
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(self._fd, termios.TCSANOW, attrs)
        return self

    def __exit__(self, *exc: object) -> None:
        if self._saved is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    @property
    def closed(self) -> bool:
        return self._closed

    def poll(self) -> Button:
        if os.name == "nt":
            actions = _read_pending_windows()
        else:
            actions = parse_keys(_read_pending_unix(self._fd))

        buttons = Button.NONE
        for action in actions:
            if action == "quit":
                self._closed = True
            buttons |= _BUTTONS.get(action, Button.NONE)
        return buttons
