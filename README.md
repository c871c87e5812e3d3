# fsndn

Metadata handling for a distributed file system whose files have
hierarchical, slash-separated names. The package records which data node
holds which segment of each file. It decides how a new file is cut into
segments and spread over the data nodes. It also parses the short text
commands that a client front end sends.

## Installing

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `fsndn.paths`
  - `split_last_component(path)` returns `(prefix, name)`. The prefix of a
    top-level entry is `"/"`. It raises `ValueError` when the path has no `/`.
  - `split_all_component(path)` returns `"/"` followed by every component.
  - `name_to_path(name)` replaces each `/` with `_`.
- `fsndn.logger`
  - `LogLevel` has the levels `NONE`, `ERROR`, `DEBUG` and `DEBUG2`.
  - `level_name(level)` gives the printed label, which is `ERROR` or `DEBUG`.
  - `FileLog(stream, reporting_level)` writes records of the form
    `- <timestamp> <LABEL>: <message>` to `stream`, which is stderr by
    default. It writes only records whose level is at or below
    `reporting_level`. `log()` returns the text it wrote, or `None` when the
    record was filtered out. `format_record()` builds a record without
    writing it.
- `fsndn.hashing`
  - `bkdr_hash(text)` is the BKDR string hash: seed 131, 31-bit result. It
    takes `str` (hashed as UTF-8) or `bytes`, and stops at the first NUL byte.
- `fsndn.filemeta`
  - `FileMeta` holds a file's name, segment count, size, times and read
    counter, and the segments each node stores (`use_nodes`, a list of
    `SegIndex`, each holding `SegWithSize` entries).
  - `add_use_nodes` and `minus_use_nodes` maintain that list.
    `minus_use_nodes` raises `KeyError` for a node that holds no segment.
  - `add_read_times` and `minus_read_times` adjust the counter.
  - `matches` compares the file's name with another name.
- `fsndn.namenode`
  - `NameNode(seg_size=1048576)` keeps its data nodes (`DataNodeInfo`)
    sorted by free space.
  - Data nodes are managed with `add_data_node` and `remove_data_node`.
    `remove_data_node` raises `KeyError` for an unknown node.
  - `space_enough` tells whether the nodes have room for a given size.
  - Files are managed with `add_new_file`, `read_file`, `find_file`,
    `get_file_size`, `del_file` and `del_dir`.
  - `add_new_file` raises `FileAlreadyExistsError` or `StorageFullError`
    (both subclasses of `NameNodeError`).
  - `read_file` and `get_file_size` raise `FileNotFoundError`.
  - `Prefix` is a normalised name prefix with a leaf flag.
  - `format_seg_index` renders a placement as one
    `Node=.. seg=.. size=..` line per segment.
- `fsndn.commands`
  - `Command` lists the command codes.
  - `get_command(word)` maps a command word to its `Command`. Unknown words
    give `Command.DEFAULT`.
  - `get_components(buffer)` returns the words of a command buffer that are
    each followed by a space. Text after the last space is ignored.

## Example

```python
from fsndn.namenode import NameNode, format_seg_index

namenode = NameNode()
namenode.add_data_node(1001, 10 * 1024 ** 3)
namenode.add_data_node(1002, 10 * 1024 ** 3)

placement = namenode.add_new_file("/a/b/c/file.bin", 3 * 1048576, 0, 0, 0)
print(format_seg_index(placement))
print(namenode.get_file_size("/a/b/c/file.bin"))
```

A file smaller than one segment goes whole to the data node with the most
free space. A larger file is cut into segments of `seg_size` bytes. The
segments are shared out evenly across the nodes, and consecutive segments
stay together on the same node.

## What it does not do

Everything here works in memory, within one process:

- No network service: there is no name-node or data-node server and no client.
- No file contents are stored or transferred. Only metadata and placement
  decisions are kept.
- `fsndn.commands` parses command words but does not run them. The package
  installs no command-line program.