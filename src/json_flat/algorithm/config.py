"""FlattenConfig and its option enums.

FlattenConfig is a frozen (immutable) dataclass holding the parameters shared
by both directions.  IndexStyle selects how array indices are rendered in flat
keys; ConflictPolicy selects what unflatten does when two keys disagree about
the shape of a shared prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["UNBOUNDED", "ConflictPolicy", "FlattenConfig", "IndexStyle"]

# max_depth sentinel: recurse until every leaf is a scalar
UNBOUNDED = -1


class IndexStyle(StrEnum):
    """How array indices are rendered as path segments.

    - BARE:    ``hobbies.0``
    - BRACKET: ``hobbies.[0]``
    """

    BARE = auto()
    BRACKET = auto()


class ConflictPolicy(StrEnum):
    """What unflatten does when keys such as ``a.b`` and ``a.b.c`` collide.

    - OVERWRITE: the later key (in lexicographic order) replaces the former.
    - RAISE:     raise PathConflictError.
    """

    OVERWRITE = auto()
    RAISE = auto()


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable configuration for flatten and unflatten.

    Attributes:
        delimiter: Non-empty string joining path segments.  Default ".".
        max_depth: Levels to descend before storing a sub-tree verbatim.
            ``UNBOUNDED`` (-1) descends to every scalar.
        index_style: Rendering of array indices.  Default BARE.
        promote_arrays: When True, unflatten turns every non-root object
            whose keys are exactly the canonical index tokens for ``0..n-1``
            back into a list, including objects that were never arrays.
            Default False.
        on_conflict: Collision handling during unflatten.  Default OVERWRITE.
        preserve_empty: When True, empty objects and arrays are emitted as
            leaf values instead of vanishing from the flat mapping.
        max_nesting: Hard limit on traversal depth, guarding against
            adversarially deep documents.  Default 512.
    """

    delimiter: str = "."
    max_depth: int = UNBOUNDED
    index_style: IndexStyle = IndexStyle.BARE
    promote_arrays: bool = False
    on_conflict: ConflictPolicy = ConflictPolicy.OVERWRITE
    preserve_empty: bool = False
    max_nesting: int = 512

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            msg = f"delimiter must be a non-empty string, got {self.delimiter!r}"
            raise ValueError(msg)
        if self.max_depth < UNBOUNDED:
            msg = f"max_depth must be >= 0 or UNBOUNDED (-1), got {self.max_depth}"
            raise ValueError(msg)
        if self.max_nesting < 1:
            msg = f"max_nesting must be >= 1, got {self.max_nesting}"
            raise ValueError(msg)
        if self.index_style == IndexStyle.BRACKET and (
            "[" in self.delimiter or "]" in self.delimiter
        ):
            msg = (
                f"delimiter {self.delimiter!r} cannot contain brackets "
                f"with index_style={self.index_style}"
            )
            raise ValueError(msg)
