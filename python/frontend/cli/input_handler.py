"""Single-keypress input for the terminal frontends.

Raw keys are translated to action names (``"up"``, ``"hint"``,
``"astar"`` ...) so the game loops never see escape sequences.  POSIX
terminals use termios raw mode; Windows uses msvcrt.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

# Key -> action.  Letters are matched case-insensitively.
_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "r": "shuffle",
    "n": "hint",
    "v": "solve",
    "c": "coach",
    "\t": "algorithm",
    "1": "astar",
    "2": "bfs",
    "3": "dfs",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

# Final byte of ``ESC [ x`` arrow sequences.
_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}

_ESC = "\x1b"


def resolve_key(ch: str) -> str:
    """Map one raw character to its action name.

    Unmapped printable characters come back unchanged; anything else
    becomes ``""``.
    """
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def _resolve_escape(read_next: Callable[[], str | None]) -> str:
    """Finish an escape sequence whose ``ESC`` was already read.

    *read_next* returns the next character, or ``None`` if nothing
    follows in time; a lone ``ESC`` quits.
    """
    if read_next() != "[":
        return "quit"
    return _ARROWS.get(read_next() or "", "")


# -- POSIX --------------------------------------------------------------------


def _posix_key(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read(wait: float) -> str | None:
        # os.read keeps select() in step with the bytes still pending.
        if not select.select([fd], [], [], wait)[0]:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = read(timeout)
        if ch is None:
            return None
        if ch == _ESC:
            return _resolve_escape(lambda: read(0.1))
        return resolve_key(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- Windows ------------------------------------------------------------------


def _windows_key(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = time.monotonic() + timeout
    while not msvcrt.kbhit():
        if time.monotonic() >= end:
            return None
        time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        # Arrow keys arrive as a prefix plus a scan code.
        return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(msvcrt.getwch(), "")
    if ch == _ESC:
        return "quit"
    return resolve_key(ch)


_read_key = _windows_key if os.name == "nt" else _posix_key


# -- public API ---------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a key and return its action name.

    Actions: ``up``/``down``/``left``/``right`` (arrows or WASD),
    ``shuffle`` (R), ``hint`` (N), ``solve`` (V), ``coach`` (C),
    ``algorithm`` (Tab), ``astar``/``bfs``/``dfs`` (1/2/3), ``enter``,
    ``quit`` (Q, Esc, Ctrl-C).  Returns ``None`` if no key arrived.
    """
    return _read_key(timeout)
