"""
GETTER: read-only access to exactly one target
"""

from typing import Callable, Generic, TypeVar

from .fold import Fold, FoldOps
from .optic import Optic, OpticKind


S = TypeVar('S')
A = TypeVar('A')
C = TypeVar('C')


class Getter(Optic, FoldOps, Generic[S, A]):
    """
    Getter[S, A]: a plain function S → A seen as an optic.
    Getter ∘ Getter/Lens/Iso is a Getter; with anything that may miss
    (Traversal, Optional, Prism, Fold) the result is a Fold.
    """

    kind = OpticKind.GETTER

    def __init__(self, get: Callable[[S], A]):
        self._get = get

    def get(self, s: S) -> A:
        return self._get(s)

    def fold_map(self, monoid, f, s):
        return f(self._get(s))

    def compose_getter(self, other: 'Getter[A, C]') -> 'Getter[S, C]':
        return Getter(lambda s: other.get(self.get(s)))

    def compose_lens(self, other) -> 'Getter[S, C]':
        return self.compose_getter(other.as_getter())

    def compose_iso(self, other) -> 'Getter[S, C]':
        return self.compose_getter(other.as_getter())

    def compose_fold(self, other) -> Fold:
        return self.as_fold().compose_fold(other)

    def compose_traversal(self, other) -> Fold:
        return self.as_fold().compose_fold(other.as_fold())

    def compose_optional(self, other) -> Fold:
        return self.as_fold().compose_fold(other.as_fold())

    def compose_prism(self, other) -> Fold:
        return self.as_fold().compose_fold(other.as_fold())

    def as_getter(self) -> 'Getter[S, A]':
        return self

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)
