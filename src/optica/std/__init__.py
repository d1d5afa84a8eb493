"""
Leaf optics for common Python values and for optica's own datatypes.
"""

from . import attempt, either, fields, mapping, maybe, sequence, tuples

__all__ = [
    "attempt",
    "either",
    "fields",
    "mapping",
    "maybe",
    "sequence",
    "tuples",
]
