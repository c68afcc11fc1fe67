"""Public API functions for json-flat.

This module provides the three user-facing functions: flatten, flatten_text
and unflatten.  Each call creates a fresh Flattener (or Unflattener) to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_flat.algorithm.config import FlattenConfig
from json_flat.algorithm.flattener import FlatMapping, Flattener
from json_flat.algorithm.unflattener import Unflattener

__all__ = ["flatten", "flatten_text", "unflatten"]


def flatten(
    tree: Mapping[str, Any],
    config: FlattenConfig | None = None,
) -> FlatMapping:
    """Flatten a nested JSON object into a single-level mapping.

    Args:
        tree:   Object-rooted JSON value (dict of str to JSON values).
        config: Flattening parameters.  Defaults to ``FlattenConfig()`` when
                None (delimiter ".", unbounded depth).

    Returns:
        A new dict mapping delimited paths to scalar values (or to sub-trees
        frozen by ``config.max_depth``).

    Example::

        flatten({"name": "John", "address": {"city": "New York"}})
        # {"name": "John", "address.city": "New York"}
    """
    return Flattener(config=config).flatten(tree)


def flatten_text(
    data: bytes | str,
    config: FlattenConfig | None = None,
) -> FlatMapping:
    """Parse a JSON document and flatten it.

    Args:
        data:   UTF-8 encoded JSON bytes (or a str) whose root is an object.
        config: Flattening parameters.  Defaults to ``FlattenConfig()``.

    Returns:
        The flat mapping of the parsed document.

    Raises:
        ParseError: If ``data`` is not valid JSON.
    """
    return Flattener(config=config).flatten_text(data)


def unflatten(
    flat: Mapping[str, Any],
    config: FlattenConfig | None = None,
) -> dict[str, Any]:
    """Rebuild a nested JSON object from a flat mapping.

    Keys are processed in lexicographic order, so the result does not depend
    on the iteration order of ``flat``.

    Args:
        flat:   Mapping of delimited paths to values.
        config: Unflattening parameters.  Defaults to ``FlattenConfig()``
                (index-keyed objects kept as objects, conflicts resolved
                by overwriting).  Pass ``promote_arrays=True`` to rebuild
                lists.

    Returns:
        A new Object-rooted tree.
    """
    return Unflattener(config=config).unflatten(flat)
