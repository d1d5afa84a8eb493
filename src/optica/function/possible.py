"""
POSSIBLE: an Optional over the zero-or-one relevant value of an S

Instances (registered for any value type):
- Maybe: the Just value
- Either: the Right value
- Try: the Success value
"""

from typing import Any, Generic, TypeVar

from ..datatypes import Maybe, Either, Try
from ..optional import POptional
from ..registry import InstanceRegistry, ANY
from ..std import attempt, either, maybe


S = TypeVar('S')
A = TypeVar('A')


class Possible(Generic[S, A]):
    """Capability: possible is an Optional[S, A]"""

    def __init__(self, possible: POptional):
        self.possible = possible

    @staticmethod
    def from_prism(prism) -> 'Possible':
        return Possible(prism.as_optional())


possible_instances: InstanceRegistry[Possible] = InstanceRegistry("Possible")

possible_instances.register(Maybe, ANY, Possible.from_prism(maybe.just()))
possible_instances.register(Either, ANY, Possible.from_prism(either.right()))
possible_instances.register(Try, ANY, Possible.from_prism(attempt.success()))


def possible(source: Any, target: Any = ANY) -> POptional:
    """
    Optional over the value source may hold.

        possible(Either).get_all(Right(5)) == [5]
    """
    return possible_instances.resolve(source, target).possible
