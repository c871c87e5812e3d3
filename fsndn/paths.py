"""Helpers for splitting and flattening slash-separated file names."""

from __future__ import annotations

__all__ = ["split_last_component", "split_all_component", "name_to_path"]


def split_last_component(path: str) -> tuple[str, str]:
    """Split ``path`` into its parent prefix and its last component.

    The prefix of a top-level entry is ``"/"``. Raises ``ValueError`` when the
    path holds no slash at all.
    """
    prefix, sep, name = path.rpartition("/")
    if not sep:
        raise ValueError(f"path {path!r} has no '/' separator")
    return prefix or "/", name


def split_all_component(path: str) -> list[str]:
    """Return ``"/"`` followed by every component of ``path``.

    Empty components between slashes are dropped, but the part after the
    final slash is always kept, even when it is empty.
    """
    *inner, last = path.split("/")
    return ["/", *(part for part in inner if part), last]


def name_to_path(name: str) -> str:
    """Flatten a slash-separated name into a single file name."""
    return name.replace("/", "_")