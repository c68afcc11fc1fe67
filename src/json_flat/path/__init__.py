"""Path subpackage: encoding of tree paths as delimited flat keys."""

from json_flat.path.codec import PathCodec, Segment

__all__ = ["PathCodec", "Segment"]
