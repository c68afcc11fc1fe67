"""Unflattener: rebuilds a nested JSON tree from a flat mapping.

Architecture:
- Keys are processed in lexicographic order so the result never depends on
  the iteration order of the input mapping.  A key is always sorted before
  every key it is a proper prefix of (``a.b`` before ``a.b.c``).
- Each key is split by the PathCodec.  Intermediate segments walk (or create)
  ``_Branch`` nodes; the last segment receives the value.
- Values are opaque: a dict placed as a value is never descended into or
  mutated, so conflicting keys are detected instead of merged.
- A final pass converts every ``_Branch`` to a plain dict, or to a list when
  ``promote_arrays`` is set and its keys are exactly the indices ``0..n-1``.
"""

from __future__ import annotations

import logging as _logging
from collections.abc import Mapping
from typing import Any

from json_flat.algorithm.config import ConflictPolicy, FlattenConfig
from json_flat.errors import InvalidTreeError, NestingDepthError, PathConflictError
from json_flat.path.codec import PathCodec

__all__ = ["Unflattener"]

_logger = _logging.getLogger(__name__)


class _Branch(dict[str, Any]):
    """An object node created during placement (as opposed to a placed value)."""


class Unflattener:
    """Reconstructs nested trees from single-level mappings.

    Example::

        unflattener = Unflattener()
        unflattener.unflatten({"address.city": "New York", "tags.0": "a"})
        # {"address": {"city": "New York"}, "tags": {"0": "a"}}

        Unflattener(FlattenConfig(promote_arrays=True)).unflatten({"tags.0": "a"})
        # {"tags": ["a"]}
    """

    def __init__(
        self,
        config: FlattenConfig | None = None,
        codec: PathCodec | None = None,
    ) -> None:
        """Initialise the unflattener.

        Args:
            config: Unflattening parameters.  Defaults to ``FlattenConfig()``.
            codec:  Path codec.  Defaults to one built from ``config``.  A
                codec shared across calls keeps its split cache warm.
        """
        self._config = config if config is not None else FlattenConfig()
        self._codec = (
            codec
            if codec is not None
            else PathCodec(self._config.delimiter, self._config.index_style)
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def unflatten(self, flat: Mapping[str, Any]) -> dict[str, Any]:
        """Rebuild the nested tree described by ``flat``.

        Args:
            flat: Mapping of delimited path strings to values.

        Returns:
            A new Object-rooted tree.  An empty mapping yields ``{}``.

        Raises:
            InvalidTreeError: If ``flat`` is not a mapping or has non-string
                keys.
            PathConflictError: With ``ConflictPolicy.RAISE``, when two keys
                disagree about the shape of a shared prefix.
            NestingDepthError: If a key has more than ``max_nesting`` segments.
        """
        if not isinstance(flat, Mapping):
            raise InvalidTreeError(
                f"unflatten expects a mapping, got {type(flat).__name__}"
            )
        for key in flat:
            if not isinstance(key, str):
                raise InvalidTreeError(
                    f"flat keys must be strings, got {type(key).__name__} {key!r}"
                )

        root = _Branch()
        for key in sorted(flat):
            self._place(root, key, flat[key])

        result: dict[str, Any] = self._finalize(root, is_root=True)
        return result

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _place(self, root: _Branch, key: str, value: Any) -> None:
        """Walk (or create) the branches for ``key`` and set its value."""
        segments = self._codec.split(key)
        if len(segments) > self._config.max_nesting:
            raise NestingDepthError(
                f"key {key!r} has {len(segments)} segments, "
                f"exceeding max_nesting={self._config.max_nesting}"
            )

        node = root
        for depth, segment in enumerate(segments[:-1]):
            child = node.get(segment)
            if isinstance(child, _Branch):
                node = child
                continue
            if segment in node:
                self._resolve_conflict(
                    key, segments[: depth + 1], "a value is already stored"
                )
            child = _Branch()
            node[segment] = child
            node = child

        # Sorted order places a key before every key it is a segment prefix of,
        # so the last segment never lands on an existing branch.
        node[segments[-1]] = value

    def _resolve_conflict(
        self, key: str, segments: tuple[str, ...], reason: str
    ) -> None:
        prefix = self._codec.delimiter.join(segments)
        if self._config.on_conflict == ConflictPolicy.RAISE:
            raise PathConflictError(key, prefix, reason)
        _logger.debug("overwriting %r while placing %r: %s", prefix, key, reason)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def _finalize(self, branch: _Branch, is_root: bool = False) -> Any:
        """Convert branches to plain dicts, promoting index-keyed ones to lists."""
        built = {
            key: self._finalize(child) if isinstance(child, _Branch) else child
            for key, child in branch.items()
        }
        if is_root or not self._config.promote_arrays:
            return built

        order = self._array_order(built)
        if order is None:
            return built
        _logger.debug("promoting %d index-keyed entries to a list", len(order))
        return [built[key] for key in order]

    def _array_order(self, obj: dict[str, Any]) -> list[str] | None:
        """Return ``obj``'s keys in index order if they are exactly ``0..n-1``."""
        if not obj:
            return None
        by_index: dict[int, str] = {}
        for key in obj:
            index = self._codec.index_of(key)
            if index is None or index >= len(obj):
                return None
            by_index[index] = key
        # Canonical tokens are unique per index, so n distinct keys below n
        # cover 0..n-1 exactly.
        return [by_index[i] for i in range(len(obj))]
