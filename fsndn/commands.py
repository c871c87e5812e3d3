"""Parsing of the text commands sent by the command-line front end."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Command", "get_command", "get_components", "MAX_TEXT"]

MAX_TEXT = 256


class Command(IntEnum):
    """The commands understood by the client server."""

    QUIT = 0
    SEND = 1
    DEFAULT = 2
    GETATTR = 3
    OPEN = 4
    READ = 5
    WRITE = 6
    RELEASE = 7
    MKNOD = 8
    RM = 9
    MKDIR = 10
    RMDIR = 11
    READDIR = 12
    STOP = 13


_KEYWORDS: dict[str, Command] = {
    "quit": Command.QUIT,
    "send": Command.SEND,
    "getattr": Command.GETATTR,
    "open": Command.OPEN,
    "read": Command.READ,
    "write": Command.WRITE,
    "release": Command.RELEASE,
    "mknod": Command.MKNOD,
    "rm": Command.RM,
    "mkdir": Command.MKDIR,
    "readdir": Command.READDIR,
    "rmdir": Command.RMDIR,
    "stop": Command.STOP,
}


def get_command(text: str) -> Command:
    """Map a command word to its ``Command``; unknown words give ``DEFAULT``."""
    return _KEYWORDS.get(text, Command.DEFAULT)


def get_components(buffer: str) -> list[str]:
    """Return the space-terminated words of ``buffer``.

    Every word must be followed by a space to count: the text after the
    last space is ignored, and runs of spaces yield no empty words. The
    buffer ends at its first NUL character, as a C string would.
    """
    text = buffer.split("\0", 1)[0]
    *terminated, _unterminated = text.split(" ")
    return [word for word in terminated if word]