"""
ISO: a lossless, reversible view

Laws:
- reverse_get(get(s)) == s
- get(reverse_get(b)) == b

An Iso is every other kind at once, so it composes with anything and the
result keeps the other operand's kind.
"""

from typing import Any, Callable, Generic, TypeVar

from .datatypes import Right
from .fold import Fold, FoldOps
from .getter import Getter
from .lens import PLens
from .optic import Optic, OpticKind
from .optional import POptional
from .prism import PPrism
from .setter import PSetter
from .traversal import PTraversal


S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class PIso(Optic, FoldOps, Generic[S, T, A, B]):
    """PIso[S, T, A, B] = (get: S → A, reverse_get: B → T)"""

    kind = OpticKind.ISO

    def __init__(self, get: Callable[[S], A], reverse_get: Callable[[B], T]):
        self._get = get
        self._reverse_get = reverse_get

    def get(self, s: S) -> A:
        return self._get(s)

    def reverse_get(self, b: B) -> T:
        return self._reverse_get(b)

    def reverse(self) -> 'PIso[B, A, T, S]':
        """The same bijection read the other way round"""
        return PIso(self._reverse_get, self._get)

    def set(self, b: B) -> Callable[[S], T]:
        return lambda s: self._reverse_get(b)

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return lambda s: self._reverse_get(f(self._get(s)))

    def modify_f(self, applicative, f: Callable[[A], Any]) -> Callable[[S], Any]:
        return lambda s: applicative.map(f(self._get(s)), self._reverse_get)

    def fold_map(self, monoid, f, s):
        return f(self._get(s))

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_iso(self, other: 'PIso[A, B, C, D]') -> 'PIso[S, T, C, D]':
        return PIso(
            lambda s: other.get(self._get(s)),
            lambda d: self._reverse_get(other.reverse_get(d))
        )

    def compose_lens(self, other) -> PLens:
        return self.as_lens().compose_lens(other)

    def compose_prism(self, other) -> PPrism:
        return self.as_prism().compose_prism(other)

    def compose_optional(self, other) -> POptional:
        return self.as_optional().compose_optional(other)

    def compose_getter(self, other) -> Getter:
        return self.as_getter().compose_getter(other)

    def compose_traversal(self, other) -> PTraversal:
        return self.as_traversal().compose_traversal(other)

    def compose_setter(self, other) -> PSetter:
        return self.as_setter().compose_setter(other)

    def compose_fold(self, other) -> Fold:
        return self.as_fold().compose_fold(other)

    # ------------------------------------------------------------------
    # Downgrades
    # ------------------------------------------------------------------

    def as_iso(self) -> 'PIso[S, T, A, B]':
        return self

    def as_lens(self) -> PLens:
        return PLens(self._get, lambda b, s: self._reverse_get(b))

    def as_prism(self) -> PPrism:
        return PPrism(lambda s: Right(self._get(s)), self._reverse_get)

    def as_optional(self) -> POptional:
        return POptional(lambda s: Right(self._get(s)), lambda b, s: self._reverse_get(b))

    def as_getter(self) -> Getter:
        return Getter(self._get)

    def as_traversal(self) -> PTraversal:
        return PTraversal(lambda applicative, f, s: self.modify_f(applicative, f)(s))

    def as_setter(self) -> PSetter:
        return PSetter(self.modify)

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)

    @staticmethod
    def identity() -> 'PIso[S, T, S, T]':
        return PIso(lambda s: s, lambda t: t)


Iso = PIso[S, S, A, A]


def iso(get: Callable[[S], A], reverse_get: Callable[[B], T]) -> PIso:
    return PIso(get, reverse_get)
