"""Tree subpackage for JSON value classification.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the three node shapes (OBJECT, ARRAY, SCALAR)
- classify: maps any accepted value to its NodeKind
- to_native: converts numpy values to plain Python values
"""

from json_flat.tree.nodes import JsonValue, NodeKind, classify, to_native

__all__ = ["JsonValue", "NodeKind", "classify", "to_native"]
