"""PathCodec: joins path segments into flat keys and splits them back.

A path is a sequence of segments, each an object key (``str``) or an array
index (``int``).  Segments are joined with the delimiter; indices are rendered
according to the IndexStyle:

- BARE:    ``["hobbies", 0]`` <-> ``"hobbies.0"``
- BRACKET: ``["hobbies", 0]`` <-> ``"hobbies.[0]"``

Splitting is plain ``str.split`` on the delimiter, so an object key that
contains the delimiter is indistinguishable from two segments.  This is a known
limitation of delimited paths; pick a delimiter that does not occur in keys.

Split results are memoised in a per-instance ``LRUCache``: flat records coming
from tabular sources tend to share one key set, so the same keys are split over
and over.  The cache only pays off when one codec (or one Unflattener holding
it) handles many records.  The module-level ``json_flat.unflatten`` builds a
fresh codec per call, so every split there is a miss.

Example::

    codec = PathCodec(delimiter="/")
    codec.join(["a", 0, "b"])     # "a/0/b"
    codec.decode("a/0/b")         # ("a", 0, "b")
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from cachetools import LRUCache

from json_flat.algorithm.config import IndexStyle

__all__ = ["PathCodec", "Segment"]

Segment = str | int

# Canonical non-negative integers: "0", "7", "42" but not "007" or "-1"
_BARE_INDEX = re.compile(r"0|[1-9][0-9]*")
_BRACKET_INDEX = re.compile(r"\[(0|[1-9][0-9]*)\]")


class PathCodec:
    """Encode and decode delimited flat keys.

    Args:
        delimiter: Non-empty string separating segments.
        index_style: How integer segments are rendered.
        max_cache_size: Maximum number of split keys held in the LRU cache.
    """

    def __init__(
        self,
        delimiter: str = ".",
        index_style: IndexStyle = IndexStyle.BARE,
        max_cache_size: int = 1024,
    ) -> None:
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self._delimiter = delimiter
        self._index_style = index_style
        self._index_pattern = (
            _BRACKET_INDEX if index_style == IndexStyle.BRACKET else _BARE_INDEX
        )
        self._cache: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=max_cache_size)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def index_style(self) -> IndexStyle:
        return self._index_style

    @property
    def cache_size(self) -> int:
        """The current number of keys held in the split cache."""
        return int(self._cache.currsize)

    def index_token(self, index: int) -> str:
        """Render an array index as a path segment."""
        if self._index_style == IndexStyle.BRACKET:
            return f"[{index}]"
        return str(index)

    def join(self, segments: Sequence[Segment]) -> str:
        """Join segments into a flat key; ``int`` segments become index tokens."""
        return self._delimiter.join(
            self.index_token(s) if isinstance(s, int) else s for s in segments
        )

    def split(self, key: str) -> tuple[str, ...]:
        """Split a flat key into its raw string segments.

        Always returns at least one segment (``""`` splits to ``("",)``).
        """
        segments = self._cache.get(key)
        if segments is None:
            segments = tuple(key.split(self._delimiter))
            self._cache[key] = segments
        return segments

    def index_of(self, segment: str) -> int | None:
        """Return the array index a segment encodes, or None for object keys."""
        match = self._index_pattern.fullmatch(segment)
        if match is None:
            return None
        return int(match.group(match.lastindex or 0))

    def decode(self, key: str) -> tuple[Segment, ...]:
        """Split a flat key, converting index segments to ``int``."""
        decoded: list[Segment] = []
        for segment in self.split(key):
            index = self.index_of(segment)
            decoded.append(segment if index is None else index)
        return tuple(decoded)
