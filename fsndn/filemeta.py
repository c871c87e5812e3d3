"""Metadata kept by the name node for each stored file."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["SegWithSize", "SegIndex", "FileMeta"]


def _to_uri(name: str) -> str:
    components = [part for part in name.split("/") if part]
    return "/" + "/".join(components)


@dataclass
class SegWithSize:
    """One segment of a file and its size in bytes."""

    seg: int
    size: int


@dataclass
class SegIndex:
    """The segments of a file stored on one data node."""

    node: int
    segs: list[SegWithSize] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.node == other
        if isinstance(other, SegIndex):
            return self.node == other.node and self.segs == other.segs
        return NotImplemented


@dataclass
class FileMeta:
    """Name, size, segment layout and access counters of one file."""

    name: str
    segs: int = 0
    size: int = 0
    mtime: int = 0
    atime: int = 0
    ctime: int = 0
    read_times: int = 0
    use_nodes: list[SegIndex] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _to_uri(self.name)

    def add_read_times(self) -> None:
        """Count one more read of the file."""
        self.read_times += 1

    def minus_read_times(self) -> None:
        """Count one read fewer."""
        self.read_times -= 1

    def add_use_nodes(self, node: int, seg: int, size: int) -> None:
        """Record that segment ``seg`` of ``size`` bytes lives on ``node``."""
        entry = SegWithSize(seg, size)
        for index in self.use_nodes:
            if index.node == node:
                index.segs.append(entry)
                return
        self.use_nodes.append(SegIndex(node, [entry]))

    def minus_use_nodes(self, node: int) -> None:
        """Forget every segment stored on ``node``.

        Raises ``KeyError`` when the file has no segment on that node.
        """
        for position, index in enumerate(self.use_nodes):
            if index.node == node:
                del self.use_nodes[position]
                return
        raise KeyError(f"{self.name} has no segment in node {node}")

    def matches(self, other_name: str) -> bool:
        """Tell whether this file is named ``other_name``."""
        return self.name == other_name