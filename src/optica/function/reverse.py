"""
REVERSE: an Iso between a structure and its reversed-order view

Instances:
- list, str: element order reversed
- tuple: components reversed end to end, any arity; (a, b) ⇆ (b, a) is
  type-changing, a 1-tuple maps to itself

Reversing twice is the identity.
"""

from typing import Any, Callable, Generic, TypeVar

from ..iso import PIso, iso
from ..registry import InstanceRegistry, ANY


S = TypeVar('S')
A = TypeVar('A')


class Reverse(Generic[S, A]):
    """Capability: reverse is an Iso[S, A] from S to its reversed form A"""

    def __init__(self, reverse: PIso):
        self.reverse = reverse

    @staticmethod
    def from_reverse_function(reverse_function: Callable[[S], S]) -> 'Reverse[S, S]':
        """A self-inverse function is its own reverse_get"""
        return Reverse(iso(reverse_function, reverse_function))


def _reversed_sequence(s):
    return s[::-1]


reverse_instances: InstanceRegistry[Reverse] = InstanceRegistry("Reverse")

reverse_instances.register(list, list, Reverse.from_reverse_function(_reversed_sequence))
reverse_instances.register(tuple, tuple, Reverse.from_reverse_function(_reversed_sequence))
reverse_instances.register(str, str, Reverse.from_reverse_function(_reversed_sequence))


def reverse(source: Any, target: Any = None) -> PIso:
    """
    Reversing Iso for the given source type; target defaults to source
    (also when ANY is passed).

        reverse(list).get([1, 2, 3]) == [3, 2, 1]
    """
    if target is None or target is ANY:
        target = source
    return reverse_instances.resolve(source, target).reverse


def reversed_value(source: Any, s):
    """Reverse s using the instance registered for source"""
    return reverse(source).get(s)
