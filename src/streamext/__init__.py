"""Lazy partitioning, sliding windows and small null-safety helpers."""

from importlib import metadata

from .buffering import WindowBuffer
from .config import PartitionSettings, load_partition_config, validate_config_file
from .features import summarize_group, summarize_groups
from .instants import format_instant
from .lists import DuplicateKeyError, append, concat, filter_list, find, map_list, pad, to_map
from .maps import Tuple, union
from .objects import also, let, or_, or_get, with_
from .partition import InvalidArgument, PartitionEngine, partition, sliding_window
from .sequences import int_range

try:
    __version__ = metadata.version("stream-extensions")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "PartitionEngine",
    "InvalidArgument",
    "partition",
    "sliding_window",
    "int_range",
    "WindowBuffer",
    "summarize_group",
    "summarize_groups",
    "PartitionSettings",
    "load_partition_config",
    "validate_config_file",
    "let",
    "with_",
    "or_",
    "or_get",
    "also",
    "concat",
    "find",
    "pad",
    "append",
    "map_list",
    "filter_list",
    "to_map",
    "DuplicateKeyError",
    "union",
    "Tuple",
    "format_instant",
    "__version__",
]
