"""
LENS: total access to exactly one target

Laws:
- PutGet: get(set(b)(s)) == b
- GetPut: set(get(s))(s) == s
- PutPut: set(b2)(set(b1)(s)) == set(b2)(s)
"""

from typing import Any, Callable, Generic, TypeVar

from .datatypes import Right
from .fold import Fold, FoldOps
from .getter import Getter
from .optic import Optic, OpticKind
from .optional import POptional
from .setter import PSetter
from .traversal import PTraversal


S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class PLens(Optic, FoldOps, Generic[S, T, A, B]):
    """
    PLens[S, T, A, B] = (get: S → A, set: (B, S) → T)
    """

    kind = OpticKind.LENS

    def __init__(self, get: Callable[[S], A], set_: Callable[[B, S], T]):
        self._get = get
        self._set = set_

    def get(self, s: S) -> A:
        return self._get(s)

    def set(self, b: B) -> Callable[[S], T]:
        return lambda s: self._set(b, s)

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return lambda s: self._set(f(self._get(s)), s)

    def modify_f(self, applicative, f: Callable[[A], Any]) -> Callable[[S], Any]:
        return lambda s: applicative.map(f(self._get(s)), lambda b: self._set(b, s))

    def fold_map(self, monoid, f, s):
        return f(self._get(s))

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_lens(self, other: 'PLens[A, B, C, D]') -> 'PLens[S, T, C, D]':
        return PLens(
            lambda s: other.get(self._get(s)),
            lambda d, s: self._set(other.set(d)(self._get(s)), s)
        )

    def compose_iso(self, other) -> 'PLens[S, T, C, D]':
        return self.compose_lens(other.as_lens())

    def compose_prism(self, other) -> POptional:
        return self.as_optional().compose_optional(other.as_optional())

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

    def as_lens(self) -> 'PLens[S, T, A, B]':
        return self

    def as_optional(self) -> POptional:
        return POptional(lambda s: Right(self._get(s)), self._set)

    def as_getter(self) -> Getter:
        return Getter(self._get)

    def as_traversal(self) -> PTraversal:
        return PTraversal(lambda applicative, f, s: self.modify_f(applicative, f)(s))

    def as_setter(self) -> PSetter:
        return PSetter(self.modify)

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)


Lens = PLens[S, S, A, A]


def lens(get: Callable[[S], A], set_: Callable[[B, S], T]) -> PLens:
    return PLens(get, set_)
