"""NodeKind StrEnum and classification of JSON tree values.

Every traversal site dispatches on ``classify(value)`` instead of ad-hoc
isinstance chains, so an unexpected shape fails loudly with
``InvalidTreeError`` rather than falling through as a scalar.

numpy values are accepted because trees coming out of numeric pipelines
routinely carry them: ``numpy.generic`` scalars classify as SCALAR and
``numpy.ndarray`` as ARRAY.  ``to_native`` converts both to plain Python.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

import numpy as np

from json_flat.errors import InvalidTreeError

__all__ = ["JsonValue", "NodeKind", "classify", "to_native"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class NodeKind(StrEnum):
    """The three shapes a JSON tree value can take.

    - OBJECT -> "object" : mapping of string keys to values
    - ARRAY  -> "array"  : ordered sequence of values
    - SCALAR -> "scalar" : string, number, bool or null
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a JSON tree value.

    Args:
        value: A dict/Mapping, list, tuple, numpy array, str, int, float,
            bool, None, or numpy scalar.

    Returns:
        The NodeKind of ``value``.

    Raises:
        InvalidTreeError: If ``value`` is none of the above.
    """
    # bool subclasses int, str is a Sequence: both are checked first.
    if value is None or isinstance(value, (bool, str, int, float)):
        return NodeKind.SCALAR

    if isinstance(value, Mapping):
        return NodeKind.OBJECT

    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY

    # A 0-d ndarray holds a single value
    if isinstance(value, np.ndarray):
        return NodeKind.ARRAY if value.ndim > 0 else NodeKind.SCALAR

    if isinstance(value, np.generic):
        return NodeKind.SCALAR

    raise InvalidTreeError(f"Unsupported JSON value type: {type(value)!r}")


def to_native(value: Any) -> Any:
    """Convert numpy scalars and arrays to their plain Python equivalents.

    Other values are returned unchanged.
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value
