"""
FOLD: read-only access to zero or more targets

A Fold is a single function fold_map(monoid, f, s) that maps every target
with f and summarises the results with the monoid. Targets are always visited
in the source's natural left-to-right order, so order-sensitive summaries
(get_all, head_option, last_option, find) are deterministic.
"""

from typing import Any, Callable, Generic, Iterable, List, TypeVar
from abc import ABC, abstractmethod

from .datatypes import Maybe, Just, NOTHING
from .monoid import (
    Monoid, list_monoid, first_monoid, last_monoid,
    sum_monoid, all_monoid, any_monoid,
)
from .optic import Optic, OpticKind


S = TypeVar('S')
A = TypeVar('A')
C = TypeVar('C')
M = TypeVar('M')


class FoldOps(ABC):
    """
    Read operations every readable optic derives from its fold_map.
    Host classes implement fold_map(monoid, f, s).
    """

    @abstractmethod
    def fold_map(self, monoid: Monoid[M], f: Callable[[Any], M], s: Any) -> M:
        """Map every target with f and combine the results with monoid"""
        pass

    def fold(self, monoid: Monoid[M], s: Any) -> M:
        """Combine the targets themselves with the monoid"""
        return self.fold_map(monoid, lambda a: a, s)

    def get_all(self, s: Any) -> List[Any]:
        """All targets, in order"""
        return self.fold_map(list_monoid, lambda a: [a], s)

    def head_option(self, s: Any) -> Maybe:
        """First target, if any"""
        return self.fold_map(first_monoid, Just, s)

    def last_option(self, s: Any) -> Maybe:
        return self.fold_map(last_monoid, Just, s)

    def find(self, predicate: Callable[[Any], bool], s: Any) -> Maybe:
        """First target satisfying predicate"""
        return self.fold_map(
            first_monoid,
            lambda a: Just(a) if predicate(a) else NOTHING,
            s
        )

    def exists(self, predicate: Callable[[Any], bool], s: Any) -> bool:
        return self.fold_map(any_monoid, predicate, s)

    def for_all(self, predicate: Callable[[Any], bool], s: Any) -> bool:
        return self.fold_map(all_monoid, predicate, s)

    def count(self, s: Any) -> int:
        return self.fold_map(sum_monoid, lambda _: 1, s)

    def is_empty(self, s: Any) -> bool:
        return self.head_option(s).is_nothing

    def non_empty(self, s: Any) -> bool:
        return not self.is_empty(s)


class Fold(Optic, FoldOps, Generic[S, A]):
    """
    Fold[S, A]: summarise the A targets of an S.

    Composes with every kind except Setter; the result is always a Fold.
    """

    kind = OpticKind.FOLD

    def __init__(self, fold_map: Callable[[Monoid, Callable[[A], Any], S], Any]):
        self._fold_map = fold_map

    def fold_map(self, monoid, f, s):
        return self._fold_map(monoid, f, s)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_fold(self, other: 'Fold[A, C]') -> 'Fold[S, C]':
        return Fold(
            lambda monoid, f, s: self.fold_map(
                monoid, lambda a: other.fold_map(monoid, f, a), s
            )
        )

    def compose_getter(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def compose_traversal(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def compose_optional(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def compose_prism(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def compose_lens(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def compose_iso(self, other) -> 'Fold[S, C]':
        return self.compose_fold(other.as_fold())

    def as_fold(self) -> 'Fold[S, A]':
        return self

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @staticmethod
    def from_iterable(to_iterable: Callable[[S], Iterable[A]]) -> 'Fold[S, A]':
        """Fold over whatever to_iterable(s) yields, in iteration order"""
        return Fold(
            lambda monoid, f, s: monoid.combine_all(f(a) for a in to_iterable(s))
        )

    @staticmethod
    def identity() -> 'Fold[S, S]':
        """The source itself is the only target"""
        return Fold(lambda monoid, f, s: f(s))

    @staticmethod
    def select(predicate: Callable[[S], bool]) -> 'Fold[S, S]':
        """The source itself, when it satisfies predicate"""
        return Fold(
            lambda monoid, f, s: f(s) if predicate(s) else monoid.empty()
        )
