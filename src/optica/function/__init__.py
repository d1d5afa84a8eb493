"""
Capability extension points: canonical optics looked up by type.
"""

from .each import Each, each, each_instances
from .possible import Possible, possible, possible_instances
from .reverse import Reverse, reverse, reverse_instances, reversed_value

__all__ = [
    "Each",
    "each",
    "each_instances",
    "Possible",
    "possible",
    "possible_instances",
    "Reverse",
    "reverse",
    "reverse_instances",
    "reversed_value",
]
