"""
PRISM: a reversible partial view over a variant structure

get_or_modify tries to extract the target (Right(a)) and otherwise returns
the source re-typed (Left(t)); reverse_get always rebuilds a source from a
target.

Laws:
1. get_or_modify(reverse_get(b)) == Right(b)
2. get_or_modify(s) == Right(a)  implies  reverse_get(a) == s
"""

from typing import Any, Callable, Generic, TypeVar

from .datatypes import Either, Right, Left, Maybe
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


class PPrism(Optic, FoldOps, Generic[S, T, A, B]):
    """PPrism[S, T, A, B]: partial S → A, total B → T"""

    kind = OpticKind.PRISM

    def __init__(self, get_or_modify: Callable[[S], Either], reverse_get: Callable[[B], T]):
        self._get_or_modify = get_or_modify
        self._reverse_get = reverse_get

    def get_or_modify(self, s: S) -> Either:
        return self._get_or_modify(s)

    def reverse_get(self, b: B) -> T:
        return self._reverse_get(b)

    def get_option(self, s: S) -> Maybe:
        return self._get_or_modify(s).to_maybe()

    def is_matching(self, s: S) -> bool:
        return self._get_or_modify(s).is_right

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return lambda s: self._get_or_modify(s).fold(
            lambda t: t,
            lambda a: self._reverse_get(f(a))
        )

    def set(self, b: B) -> Callable[[S], T]:
        """Replace the target when the source matches; otherwise keep the source"""
        return self.modify(lambda _: b)

    def modify_f(self, applicative, f: Callable[[A], Any]) -> Callable[[S], Any]:
        return lambda s: self._get_or_modify(s).fold(
            applicative.pure,
            lambda a: applicative.map(f(a), self._reverse_get)
        )

    def modify_option(self, f: Callable[[A], B]) -> Callable[[S], Maybe]:
        return lambda s: self.get_option(s).map(lambda a: self._reverse_get(f(a)))

    def set_option(self, b: B) -> Callable[[S], Maybe]:
        return self.modify_option(lambda _: b)

    def fold_map(self, monoid, f, s):
        return self.get_option(s).fold(monoid.empty, f)

    def re(self) -> Getter:
        """The always-succeeding direction, B → T, as a Getter"""
        return Getter(self._reverse_get)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_prism(self, other: 'PPrism[A, B, C, D]') -> 'PPrism[S, T, C, D]':
        return PPrism(
            lambda s: self._get_or_modify(s).flat_map(
                lambda a: other.get_or_modify(a).left_map(lambda b: self.set(b)(s))
            ),
            lambda d: self._reverse_get(other.reverse_get(d))
        )

    def compose_iso(self, other) -> 'PPrism[S, T, C, D]':
        return self.compose_prism(other.as_prism())

    def compose_lens(self, other) -> POptional:
        return self.as_optional().compose_optional(other.as_optional())

    def compose_optional(self, other) -> POptional:
        return self.as_optional().compose_optional(other)

    def compose_traversal(self, other) -> PTraversal:
        return self.as_traversal().compose_traversal(other)

    def compose_setter(self, other) -> PSetter:
        return self.as_setter().compose_setter(other)

    def compose_fold(self, other) -> Fold:
        return self.as_fold().compose_fold(other)

    def compose_getter(self, other) -> Fold:
        return self.as_fold().compose_fold(other.as_fold())

    # ------------------------------------------------------------------
    # Downgrades
    # ------------------------------------------------------------------

    def as_prism(self) -> 'PPrism[S, T, A, B]':
        return self

    def as_optional(self) -> POptional:
        return POptional(self._get_or_modify, lambda b, s: self.set(b)(s))

    def as_traversal(self) -> PTraversal:
        return PTraversal(lambda applicative, f, s: self.modify_f(applicative, f)(s))

    def as_setter(self) -> PSetter:
        return PSetter(self.modify)

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)


Prism = PPrism[S, S, A, A]


def prism(get_or_modify: Callable[[S], Either], reverse_get: Callable[[B], T]) -> PPrism:
    return PPrism(get_or_modify, reverse_get)


def prism_from_option(get_option: Callable[[S], Maybe], reverse_get: Callable[[A], S]) -> Prism:
    """Monomorphic prism: a missing target answers Left(s) with the source unchanged"""
    return PPrism(
        lambda s: get_option(s).fold(lambda: Left(s), Right),
        reverse_get
    )
