"""
EACH: a Traversal over every element of a container-like S

Instances (registered for any element type):
- list, tuple: every element, in order
- dict: every value, in key insertion order
- Maybe: the Just value; Either: the Right value; Try: the Success value
"""

from typing import Any, Generic, TypeVar

from ..datatypes import Maybe, Either, Try
from ..registry import InstanceRegistry, ANY
from ..traversal import PTraversal
from ..traverse import (
    Traverse, list_traverse, tuple_traverse, dict_values_traverse,
    maybe_traverse, either_traverse, try_traverse,
)


S = TypeVar('S')
A = TypeVar('A')


class Each(Generic[S, A]):
    """Capability: each is a Traversal[S, A] over all elements"""

    def __init__(self, each: PTraversal):
        self.each = each

    @staticmethod
    def from_traverse(traverse: Traverse) -> 'Each':
        return Each(PTraversal.from_traverse(traverse))


each_instances: InstanceRegistry[Each] = InstanceRegistry("Each")

each_instances.register(list, ANY, Each.from_traverse(list_traverse))
each_instances.register(tuple, ANY, Each.from_traverse(tuple_traverse))
each_instances.register(dict, ANY, Each.from_traverse(dict_values_traverse))
each_instances.register(Maybe, ANY, Each.from_traverse(maybe_traverse))
each_instances.register(Either, ANY, Each.from_traverse(either_traverse))
each_instances.register(Try, ANY, Each.from_traverse(try_traverse))


def each(source: Any, target: Any = ANY) -> PTraversal:
    """
    Traversal over every element of source.

        each(list).modify(lambda x: x + 1)([10, 20, 30]) == [11, 21, 31]
    """
    return each_instances.resolve(source, target).each
