"""json-flat - flatten nested JSON into delimited paths and back."""

from __future__ import annotations

from json_flat.algorithm.config import (
    UNBOUNDED,
    ConflictPolicy,
    FlattenConfig,
    IndexStyle,
)
from json_flat.algorithm.flattener import Flattener
from json_flat.algorithm.unflattener import Unflattener
from json_flat.api import flatten, flatten_text, unflatten
from json_flat.errors import (
    FlattenError,
    InvalidTreeError,
    NestingDepthError,
    ParseError,
    PathConflictError,
)
from json_flat.path.codec import PathCodec
from json_flat.tree.nodes import NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "UNBOUNDED",
    "ConflictPolicy",
    "FlattenConfig",
    "FlattenError",
    "Flattener",
    "IndexStyle",
    "InvalidTreeError",
    "NestingDepthError",
    "NodeKind",
    "ParseError",
    "PathCodec",
    "PathConflictError",
    "Unflattener",
    "flatten",
    "flatten_text",
    "unflatten",
]
