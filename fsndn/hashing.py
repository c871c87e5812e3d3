"""String hashing used for name lookup tables."""

from __future__ import annotations

__all__ = ["bkdr_hash"]

_SEED = 131
_MASK32 = 0xFFFFFFFF


def bkdr_hash(text: str | bytes) -> int:
    """Return the 31-bit BKDR hash of ``text``.

    Strings are hashed as UTF-8. Bytes above 127 count as signed chars,
    and hashing stops at the first NUL byte.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = 0
    for byte in data:
        if byte == 0:
            break
        char = byte - 256 if byte > 127 else byte
        value = (value * _SEED + char) & _MASK32
    return value & 0x7FFFFFFF