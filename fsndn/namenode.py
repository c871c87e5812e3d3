"""Name node: tracks data nodes and decides where file segments are stored."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .filemeta import FileMeta, SegIndex

__all__ = [
    "DataNodeInfo",
    "Prefix",
    "NameNodeError",
    "FileAlreadyExistsError",
    "StorageFullError",
    "NameNode",
    "format_seg_index",
    "DEFAULT_SEG_SIZE",
]

DEFAULT_SEG_SIZE = 1048576


def _normalize(name: str) -> str:
    return "/" + "/".join(part for part in name.split("/") if part)


class NameNodeError(Exception):
    """Base class for errors reported by the name node."""


class FileAlreadyExistsError(NameNodeError):
    """A file with the requested name is already registered."""


class StorageFullError(NameNodeError):
    """The data nodes cannot hold a file of the requested size."""


@dataclass
class DataNodeInfo:
    """A data node known to the name node, with its free space in bytes."""

    node_id: int
    space_size: int


@dataclass(frozen=True)
class Prefix:
    """A name prefix and whether it is a leaf of the name tree."""

    prefix: str
    leaf: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", _normalize(self.prefix))


def format_seg_index(seg_index: Iterable[SegIndex]) -> str:
    """Render a segment index as one ``Node=.. seg=.. size=..`` line per segment."""
    return "\n".join(
        f"Node={index.node}  seg={entry.seg} size={entry.size}"
        for index in seg_index
        for entry in index.segs
    )


@dataclass
class NameNode:
    """Keeps file metadata and assigns file segments to data nodes."""

    seg_size: int = DEFAULT_SEG_SIZE
    data_nodes: list[DataNodeInfo] = field(default_factory=list)
    _name_index: dict[str, FileMeta] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.seg_size <= 0:
            raise ValueError("segment size must be positive")
        self._update_nodes()

    def __len__(self) -> int:
        return len(self._name_index)

    def __contains__(self, name: object) -> bool:
        return name in self._name_index

    def __iter__(self) -> Iterator[str]:
        return iter(self._name_index)

    def _update_nodes(self) -> None:
        self.data_nodes.sort(key=lambda node: node.space_size)

    def add_data_node(self, node_id: int, space_size: int) -> None:
        """Register a data node with ``space_size`` bytes of free space."""
        self.data_nodes.append(DataNodeInfo(node_id, space_size))
        self._update_nodes()

    def remove_data_node(self, node_id: int) -> None:
        """Forget a data node; raises ``KeyError`` if it is unknown."""
        for position, node in enumerate(self.data_nodes):
            if node.node_id == node_id:
                del self.data_nodes[position]
                return
        raise KeyError(f"no data node named {node_id} exists")

    def space_enough(self, size: int) -> bool:
        """Tell whether all data nodes together have more than ``size`` bytes free."""
        return sum(node.space_size for node in self.data_nodes) > size

    def find_file(self, name: str) -> Optional[FileMeta]:
        """Return the metadata of ``name``, or ``None`` if it is not registered."""
        return self._name_index.get(name)

    def add_new_file(
        self, name: str, size: int, mtime: int, atime: int, ctime: int
    ) -> list[SegIndex]:
        """Register a new file and return where each of its segments goes."""
        if name in self._name_index:
            raise FileAlreadyExistsError(f"{name} is already exists")
        if not self.space_enough(size):
            raise StorageFullError("storage is full")

        seg_size = self.seg_size
        if size < seg_size:
            largest = self.data_nodes[-1]
            if largest.space_size < size:
                raise StorageFullError(f"no node can contain {size} bytes")
            meta = FileMeta(name, 1, size, mtime, atime, ctime)
            meta.add_use_nodes(largest.node_id, 0, size)
            self._name_index[name] = meta
            self._update_nodes()
            return copy.deepcopy(meta.use_nodes)

        meta = FileMeta(name, 0, size, mtime, atime, ctime)
        node_count = len(self.data_nodes)
        per_node_span = seg_size * node_count
        seg_per_node = -(-size // per_node_span)
        seg = 0
        for node in self.data_nodes:
            for _ in range(seg_per_node):
                item_size = min(seg_size, size - seg * seg_size)
                if item_size < 0:
                    break
                meta.add_use_nodes(node.node_id, seg, item_size)
                seg += 1
        meta.segs = seg - 1
        self._update_nodes()
        self._name_index[name] = meta
        return copy.deepcopy(meta.use_nodes)

    def read_file(self, name: str) -> list[SegIndex]:
        """Return the segment layout of ``name``; raises ``FileNotFoundError``."""
        meta = self._name_index.get(name)
        if meta is None:
            raise FileNotFoundError(f"{name} is not exists")
        return copy.deepcopy(meta.use_nodes)

    def del_file(self, name: str) -> None:
        """Drop the metadata of ``name`` if it is registered."""
        self._name_index.pop(name, None)

    def del_dir(self, name: str) -> None:
        """Drop the metadata of every file at or below the prefix ``name``."""
        prefix = _normalize(name)
        below = prefix.rstrip("/") + "/"
        doomed = [
            key
            for key in self._name_index
            if _normalize(key) == prefix or _normalize(key).startswith(below)
        ]
        for key in doomed:
            del self._name_index[key]

    def get_file_size(self, name: str) -> int:
        """Return the size of ``name``; raises ``FileNotFoundError``."""
        meta = self._name_index.get(name)
        if meta is None:
            raise FileNotFoundError(f"{name} is not exists")
        return meta.size