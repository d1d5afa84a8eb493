"""
TRAVERSAL: read and write access to zero or more targets

A traversal is one function

    modify_f(applicative, f)(s) : (A → F[B]) → (S → F[T])

generic over the effect F, which is passed in as an Applicative instance.
The implementation may only lift values (pure), transform them (map) and
combine independent effects (combine2), always left to right in the
structure's natural order. Every other operation is an instantiation:

    modify      F = identity
    fold_map    F = const accumulator over a monoid
    get_all     F = const over list concatenation
    head_option F = const over the left-biased first monoid

Laws:
1. Identity:    modify_f(identity, id) = id
2. Composition: traversing with f then g equals one traversal with the
                composed effect
3. Consistency: get_all and modify agree with a hand-written Fold and Setter
                over the same targets
"""

from typing import Any, Callable, Generic, Sequence, TypeVar

from .applicative import Applicative, ConstApplicative, identity_applicative
from .fold import Fold, FoldOps
from .optic import Optic, OpticKind
from .setter import PSetter
from .traverse import Traverse


S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class PTraversal(Optic, FoldOps, Generic[S, T, A, B]):
    """
    PTraversal[S, T, A, B]: focus on every A inside an S; replacing them with
    B values yields a T.
    """

    kind = OpticKind.TRAVERSAL

    def __init__(self, modify_f: Callable[[Applicative, Callable[[A], Any], S], Any]):
        self._modify_f = modify_f

    def modify_f(self, applicative: Applicative, f: Callable[[A], Any]) -> Callable[[S], Any]:
        """Run the effectful f on every target and rebuild the source inside the effect"""
        return lambda s: self._modify_f(applicative, f, s)

    def fold_map(self, monoid, f, s):
        return self._modify_f(ConstApplicative(monoid), f, s)

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return lambda s: self._modify_f(identity_applicative, f, s)

    def set(self, b: B) -> Callable[[S], T]:
        return self.modify(lambda _: b)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose_traversal(self, other: 'PTraversal[A, B, C, D]') -> 'PTraversal[S, T, C, D]':
        return PTraversal(
            lambda applicative, f, s: self._modify_f(
                applicative, lambda a: other.modify_f(applicative, f)(a), s
            )
        )

    def compose_optional(self, other) -> 'PTraversal[S, T, C, D]':
        return self.compose_traversal(other.as_traversal())

    def compose_prism(self, other) -> 'PTraversal[S, T, C, D]':
        return self.compose_traversal(other.as_traversal())

    def compose_lens(self, other) -> 'PTraversal[S, T, C, D]':
        return self.compose_traversal(other.as_traversal())

    def compose_iso(self, other) -> 'PTraversal[S, T, C, D]':
        return self.compose_traversal(other.as_traversal())

    def compose_setter(self, other) -> PSetter:
        return self.as_setter().compose_setter(other)

    def compose_fold(self, other) -> Fold:
        return self.as_fold().compose_fold(other)

    def compose_getter(self, other) -> Fold:
        return self.as_fold().compose_fold(other.as_fold())

    # ------------------------------------------------------------------
    # Downgrades
    # ------------------------------------------------------------------

    def as_traversal(self) -> 'PTraversal[S, T, A, B]':
        return self

    def as_setter(self) -> PSetter:
        return PSetter(self.modify)

    def as_fold(self) -> Fold:
        return Fold(self.fold_map)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @staticmethod
    def from_traverse(traverse: Traverse) -> 'PTraversal':
        """Traversal over every element of a container with a Traverse instance"""
        return PTraversal(
            lambda applicative, f, s: traverse.traverse(applicative, f, s)
        )

    @staticmethod
    def identity() -> 'PTraversal[S, T, S, T]':
        return PTraversal(lambda applicative, f, s: f(s))


Traversal = PTraversal[S, S, A, A]


# ============================================================================
# FIXED-ARITY TRAVERSALS
# ============================================================================

def _from_getters(getters: Sequence[Callable[[S], A]], set_: Callable[..., T]) -> PTraversal:
    """
    Traversal over the targets named by getters. f runs on get1(s) .. getN(s)
    in that order and set_(b1, .., bN, s) receives the results positionally.
    """

    def modify_f(applicative, f, s):
        return applicative.map_n(
            [f(get(s)) for get in getters],
            lambda *bs: set_(*bs, s)
        )

    return PTraversal(modify_f)


def of2(get1, get2, set_: Callable[[B, B, S], T]) -> PTraversal:
    return _from_getters((get1, get2), set_)


def of3(get1, get2, get3, set_: Callable[[B, B, B, S], T]) -> PTraversal:
    return _from_getters((get1, get2, get3), set_)


def of4(get1, get2, get3, get4, set_: Callable[[B, B, B, B, S], T]) -> PTraversal:
    return _from_getters((get1, get2, get3, get4), set_)


def of5(get1, get2, get3, get4, get5, set_: Callable[[B, B, B, B, B, S], T]) -> PTraversal:
    return _from_getters((get1, get2, get3, get4, get5), set_)


def of6(get1, get2, get3, get4, get5, get6, set_: Callable[[B, B, B, B, B, B, S], T]) -> PTraversal:
    return _from_getters((get1, get2, get3, get4, get5, get6), set_)
