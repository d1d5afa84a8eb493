"""
OPTIONAL: read and write access to zero or one target

get_or_modify(s) answers Right(a) when the target is present and Left(t)
(the untouched source, re-typed) when it is not. Setting a missing target is
a no-op.

Laws:
- get_option(set(b)(s)).is_just == get_option(s).is_just
- get_option(s) == Just(a)  implies  set(a)(s) == s
"""

from typing import Any, Callable, Generic, TypeVar

from .datatypes import Either, Right, Left, Maybe
from .fold import Fold, FoldOps
from .optic import Optic, OpticKind
from .setter import PSetter
from .traversal import PTraversal


S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class POptional(Optic, FoldOps, Generic[S, T, A, B]):
    """
    POptional[S, T, A, B]: a traversal with at most one target.

    Args:
        get_or_modify: S → Either[T, A]
        set_: (B, S) → T, only consulted when the target is present
    """

    kind = OpticKind.OPTIONAL

    def __init__(self, get_or_modify: Callable[[S], Either], set_: Callable[[B, S], T]):
        self._get_or_modify = get_or_modify
        self._set = set_

    def get_or_modify(self, s: S) -> Either:
        return self._get_or_modify(s)

    def get_option(self, s: S) -> Maybe:
        return self._get_or_modify(s).to_maybe()

    def set(self, b: B) -> Callable[[S], T]:
        return self.modify(lambda _: b)

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return lambda s: self._get_or_modify(s).fold(
            lambda t: t,
            lambda a: self._set(f(a), s)
        )

    def modify_f(self, applicative, f: Callable[[A], Any]) -> Callable[[S], Any]:
        return lambda s: self._get_or_modify(s).fold(
            applicative.pure,
            lambda a: applicative.map(f(a), lambda b: self._set(b, s))
        )

    def modify_option(self, f: Callable[[A], B]) -> Callable[[S], Maybe]:
        """Like modify, but NOTHING when there was no target to modify"""
        return lambda s: self.get_option(s).map(lambda a: self._set(f(a), s))

    def set_option(self, b: B) -> Callable[[S], Maybe]:
        return self.modify_option(lambda _: b)

    def fold_map(self, monoid, f, s):
        return self.get_option(s).fold(monoid.empty, f)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_optional(self, other: 'POptional[A, B, C, D]') -> 'POptional[S, T, C, D]':
        return POptional(
            lambda s: self._get_or_modify(s).flat_map(
                lambda a: other.get_or_modify(a).left_map(lambda b: self._set(b, s))
            ),
            lambda d, s: self.modify(lambda a: other.set(d)(a))(s)
        )

    def compose_prism(self, other) -> 'POptional[S, T, C, D]':
        return self.compose_optional(other.as_optional())

    def compose_lens(self, other) -> 'POptional[S, T, C, D]':
        return self.compose_optional(other.as_optional())

    def compose_iso(self, other) -> 'POptional[S, T, C, D]':
        return self.compose_optional(other.as_optional())

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

    def as_optional(self) -> 'POptional[S, T, A, B]':
        return self

    def as_traversal(self) -> PTraversal:
        return PTraversal(lambda applicative, f, s: self.modify_f(applicative, f)(s))

    def as_setter(self) -> PSetter:
        return PSetter(self.modify)

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)


Optional = POptional[S, S, A, A]


def optional(get_option: Callable[[S], Maybe], set_: Callable[[A, S], S]) -> Optional:
    """
    Monomorphic optional from get_option: S → Maybe[A] and set_: (A, S) → S.
    A missing target leaves the source unchanged.
    """
    return POptional(
        lambda s: get_option(s).fold(lambda: Left(s), Right),
        set_
    )
