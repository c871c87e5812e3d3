"""Name-node metadata, segment placement, path helpers, logging and command parsing for a named-data distributed file system."""

__version__ = "0.1.0"