"""algorithm subpackage: public API for flattening and unflattening.

Provides the two traversal directions and their shared configuration.
Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_flat.algorithm import FlattenConfig, Flattener, Unflattener

    config = FlattenConfig(delimiter="/")
    flat = Flattener(config).flatten({"a": {"b": 1}})   # {"a/b": 1}
    Unflattener(config).unflatten(flat)                  # {"a": {"b": 1}}
"""

from __future__ import annotations

# config first: json_flat.path imports it while this package is initialising
from json_flat.algorithm.config import (
    UNBOUNDED,
    ConflictPolicy,
    FlattenConfig,
    IndexStyle,
)
from json_flat.algorithm.flattener import FlatMapping, Flattener
from json_flat.algorithm.unflattener import Unflattener

__all__ = [
    "UNBOUNDED",
    "ConflictPolicy",
    "FlatMapping",
    "FlattenConfig",
    "Flattener",
    "IndexStyle",
    "Unflattener",
]
