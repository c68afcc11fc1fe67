"""Flattener: depth-first conversion of a JSON tree into a flat mapping.

Each recursive call carries a ``prefix`` (the encoded path so far, ending in
the delimiter) and a ``remaining_depth`` counter:

- remaining_depth == 0: the current value is stored verbatim (even an object
  or array) under the prefix with its trailing delimiter stripped.
- OBJECT: recurse into every pair with ``prefix + key + delimiter``.
- ARRAY:  recurse into every element with ``prefix + index_token + delimiter``.
- SCALAR: store under the stripped prefix.

``UNBOUNDED`` (-1) is never decremented, so it never reaches 0.  The empty
prefix is never used as a key: a cap of 0 at the root emits the root's own
entries unchanged.
"""

from __future__ import annotations

import json
import logging as _logging
from collections.abc import Mapping
from typing import Any

from json_flat.algorithm.config import UNBOUNDED, FlattenConfig
from json_flat.errors import InvalidTreeError, NestingDepthError, ParseError
from json_flat.path.codec import PathCodec
from json_flat.tree.nodes import NodeKind, classify, to_native

__all__ = ["FlatMapping", "Flattener"]

_logger = _logging.getLogger(__name__)

FlatMapping = dict[str, Any]


class Flattener:
    """Converts Object-rooted JSON trees into single-level mappings.

    Example::

        flattener = Flattener()
        flattener.flatten({"address": {"city": "New York"}, "tags": ["a", "b"]})
        # {"address.city": "New York", "tags.0": "a", "tags.1": "b"}
    """

    def __init__(
        self,
        config: FlattenConfig | None = None,
        codec: PathCodec | None = None,
    ) -> None:
        """Initialise the flattener.

        Args:
            config: Flattening parameters.  Defaults to ``FlattenConfig()``.
            codec:  Path codec.  Defaults to one built from ``config``.
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

    def flatten(self, tree: Any) -> FlatMapping:
        """Flatten an Object-rooted tree.

        Args:
            tree: A mapping of string keys to JSON values.

        Returns:
            A new flat mapping; ``tree`` is not mutated and frozen sub-trees
            are copies.

        Raises:
            InvalidTreeError: If ``tree`` is not an object or contains a value
                outside the JSON tagged union.
            NestingDepthError: If ``tree`` nests deeper than
                ``config.max_nesting``.
        """
        if classify(tree) != NodeKind.OBJECT:
            raise InvalidTreeError(
                f"flatten expects an object at the root, got {type(tree).__name__}"
            )

        flattened: FlatMapping = {}
        if self._config.max_depth == 0:
            # Freezing the root under "" would make the empty path a key.
            _logger.debug("max_depth=0: emitting %d root entries verbatim", len(tree))
            for key, value in self._object_items(tree):
                flattened[key] = self._freeze(value, 1)
            return flattened

        self._flatten("", tree, flattened, self._config.max_depth, 0)
        return flattened

    def flatten_text(self, data: bytes | str) -> FlatMapping:
        """Parse JSON text and flatten the resulting object.

        Args:
            data: UTF-8 encoded bytes, or an already-decoded string.

        Returns:
            The flat mapping of the parsed document.

        Raises:
            ParseError: If ``data`` is not valid JSON.  No partial result is
                produced.
            NestingDepthError: If the document nests deeper than the parser
                can handle.
            InvalidTreeError: If the document root is not an object.
        """
        try:
            tree = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ParseError(
                str(exc), pos=exc.pos, lineno=exc.lineno, colno=exc.colno
            ) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(str(exc), pos=exc.start) from exc
        except RecursionError as exc:
            raise NestingDepthError("document nesting exceeds parser limits") from exc
        return self.flatten(tree)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _flatten(
        self,
        prefix: str,
        value: Any,
        flattened: FlatMapping,
        remaining_depth: int,
        level: int,
    ) -> None:
        """Recursively flatten ``value`` into ``flattened`` (mutated in place).

        Args:
            prefix: Encoded path of ``value``, ending with the delimiter
                (empty at the root).
            value: The current tree value.
            flattened: Accumulator mapping.
            remaining_depth: Levels left before values are stored verbatim.
            level: Current nesting level, checked against ``max_nesting``.
        """
        if level > self._config.max_nesting:
            raise NestingDepthError(
                f"nesting exceeds max_nesting={self._config.max_nesting} "
                f"at {self._leaf_key(prefix)!r}"
            )

        if remaining_depth == 0:
            _logger.debug("depth cap reached, freezing %r", self._leaf_key(prefix))
            flattened[self._leaf_key(prefix)] = self._freeze(value, level)
            return

        child_depth = (
            remaining_depth if remaining_depth == UNBOUNDED else remaining_depth - 1
        )
        kind = classify(value)

        if kind == NodeKind.OBJECT:
            items = self._object_items(value)
            if not items:
                self._store_empty(prefix, {}, flattened)
            for key, child in items:
                self._flatten(
                    prefix + key + self._codec.delimiter,
                    child,
                    flattened,
                    child_depth,
                    level + 1,
                )
            return

        if kind == NodeKind.ARRAY:
            elements = self._array_elements(value)
            if not elements:
                self._store_empty(prefix, [], flattened)
            for idx, child in enumerate(elements):
                self._flatten(
                    prefix + self._codec.index_token(idx) + self._codec.delimiter,
                    child,
                    flattened,
                    child_depth,
                    level + 1,
                )
            return

        # SCALAR: the final NodeKind variant
        flattened[self._leaf_key(prefix)] = to_native(value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _leaf_key(self, prefix: str) -> str:
        return prefix.removesuffix(self._codec.delimiter)

    def _store_empty(self, prefix: str, empty: Any, flattened: FlatMapping) -> None:
        # The root is never stored: an empty root flattens to {}.
        if self._config.preserve_empty and prefix:
            flattened[self._leaf_key(prefix)] = empty

    @staticmethod
    def _object_items(obj: Mapping[Any, Any]) -> list[tuple[str, Any]]:
        items = list(obj.items())
        for key, _ in items:
            if not isinstance(key, str):
                raise InvalidTreeError(
                    f"object keys must be strings, got {type(key).__name__} {key!r}"
                )
        return items

    @staticmethod
    def _array_elements(value: Any) -> list[Any] | tuple[Any, ...]:
        if isinstance(value, (list, tuple)):
            return value
        return to_native(value)

    def _freeze(self, value: Any, level: int) -> Any:
        """Copy a sub-tree stored verbatim so the result never aliases input.

        Tuples and numpy arrays become lists, numpy scalars become Python
        scalars, mappings become dicts.
        """
        if level > self._config.max_nesting:
            raise NestingDepthError(
                f"nesting exceeds max_nesting={self._config.max_nesting}"
            )
        kind = classify(value)
        if kind == NodeKind.OBJECT:
            return {
                key: self._freeze(child, level + 1)
                for key, child in self._object_items(value)
            }
        if kind == NodeKind.ARRAY:
            return [
                self._freeze(child, level + 1) for child in self._array_elements(value)
            ]
        return to_native(value)
