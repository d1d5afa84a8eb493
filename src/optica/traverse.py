"""
TRAVERSE: containers that can run an effect over every element

traverse(applicative, f, fa) applies f to each element left to right,
combines the effects with the applicative and rebuilds the container.
PTraversal.from_traverse turns any instance into a traversal.
"""

from typing import Any, Callable, Dict, List, Tuple
from abc import ABC, abstractmethod

from .applicative import Applicative
from .datatypes import Maybe, Just, Either, Right, Try, Success


class Traverse(ABC):
    """Generic "traverse all elements with an effectful function" capability"""

    @abstractmethod
    def traverse(self, applicative: Applicative, f: Callable[[Any], Any], fa: Any) -> Any:
        pass


class ListTraverse(Traverse):

    def traverse(self, applicative, f, fa: List) -> Any:
        return applicative.map_n([f(a) for a in fa], lambda *bs: list(bs))


class TupleTraverse(Traverse):

    def traverse(self, applicative, f, fa: Tuple) -> Any:
        return applicative.map_n([f(a) for a in fa], lambda *bs: tuple(bs))


class DictValuesTraverse(Traverse):
    """Visits values in key insertion order; keys are kept"""

    def traverse(self, applicative, f, fa: Dict) -> Any:
        keys = list(fa.keys())
        return applicative.map_n(
            [f(fa[k]) for k in keys],
            lambda *bs: dict(zip(keys, bs))
        )


class MaybeTraverse(Traverse):

    def traverse(self, applicative, f, fa: Maybe) -> Any:
        return fa.fold(
            lambda: applicative.pure(fa),
            lambda a: applicative.map(f(a), Just)
        )


class EitherTraverse(Traverse):
    """Traverses the Right side; a Left is passed through"""

    def traverse(self, applicative, f, fa: Either) -> Any:
        return fa.fold(
            lambda _: applicative.pure(fa),
            lambda a: applicative.map(f(a), Right)
        )


class TryTraverse(Traverse):
    """Traverses a Success; a Failure is passed through"""

    def traverse(self, applicative, f, fa: Try) -> Any:
        return fa.fold(
            lambda _: applicative.pure(fa),
            lambda a: applicative.map(f(a), Success)
        )


list_traverse = ListTraverse()
tuple_traverse = TupleTraverse()
dict_values_traverse = DictValuesTraverse()
maybe_traverse = MaybeTraverse()
either_traverse = EitherTraverse()
try_traverse = TryTraverse()
