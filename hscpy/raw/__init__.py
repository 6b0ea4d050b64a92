"""Legacy raw point-list format."""

from hscpy.raw.model import RawPoint, RawSketch, RawStroke
from hscpy.raw.parser import RAW_GROUP_SIZE, RawState, parse_raw, verify_raw

__all__ = [
    "RAW_GROUP_SIZE",
    "RawPoint",
    "RawSketch",
    "RawState",
    "RawStroke",
    "parse_raw",
    "verify_raw",
]
