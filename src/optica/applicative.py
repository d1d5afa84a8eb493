"""
APPLICATIVE EFFECTS: pure, map, combine2

A traversal is generic over the effect F it runs per target. Python has no
higher-kinded types, so an effect is an instance of Applicative passed with
every call; the effectful values themselves are whatever that instance
understands (plain values, Maybe, Either, lists, monoid summaries).

Applicative laws (for the instances below):
- map(pure(a), f) = pure(f(a))
- map(fa, identity) = fa
- combine2 is associative up to tuple re-nesting, and pure is its unit

combine2 always evaluates in the order given: the left effect is the
earlier target. Order-sensitive effects (first failure, accumulated
messages) observe exactly that order.
"""

from typing import Any, Callable, Generic, List, Sequence, Tuple, TypeVar
from abc import ABC, abstractmethod

from .datatypes import Maybe, Just, Either, Left, Right
from .monoid import Monoid


A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
M = TypeVar('M')


class Applicative(ABC):
    """
    Effect interface used by every traversal.
    F[A] below means "an effectful value this instance understands".
    """

    @abstractmethod
    def pure(self, value: A) -> Any:
        """Lift a plain value: A → F[A]"""
        pass

    @abstractmethod
    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Transform the contained value: F[A] × (A → B) → F[B]"""
        pass

    @abstractmethod
    def combine2(self, fa: Any, fb: Any) -> Any:
        """Combine two independent effects: F[A] × F[B] → F[(A, B)]"""
        pass

    def map2(self, fa: Any, fb: Any, f: Callable[[A, B], C]) -> Any:
        return self.map(self.combine2(fa, fb), lambda ab: f(ab[0], ab[1]))

    def map_n(self, effects: Sequence[Any], f: Callable[..., C]) -> Any:
        """
        Combine any number of effects left to right and apply f to the
        unwrapped results in the same order.
        """
        if not effects:
            return self.pure(f())

        # Results accumulate as nested (earlier, latest) pairs, flattened once
        acc = self.map(effects[0], lambda a: ((), a))
        for fb in effects[1:]:
            acc = self.map2(acc, fb, lambda xs, b: (xs, b))
        return self.map(acc, lambda xs: f(*_flatten(xs)))

    def sequence(self, effects: Sequence[Any]) -> Any:
        """F[A] list → F[list of A]"""
        return self.map_n(effects, lambda *values: list(values))


def _flatten(pairs: Tuple) -> List[Any]:
    """((((), a), b), c) → [a, b, c]"""
    values = []
    while pairs:
        pairs, value = pairs
        values.append(value)
    values.reverse()
    return values


# ============================================================================
# IDENTITY & CONST (used to derive modify / fold_map)
# ============================================================================

class IdentityApplicative(Applicative):
    """No effect at all: F[A] = A"""

    def pure(self, value):
        return value

    def map(self, fa, f):
        return f(fa)

    def combine2(self, fa, fb):
        return (fa, fb)


class ConstApplicative(Applicative, Generic[M]):
    """
    Constant accumulator: F[A] = M for a fixed monoid M.
    map keeps the summary, combine2 appends summaries with the monoid.
    Running a traversal in Const yields a fold.
    """

    def __init__(self, monoid: Monoid[M]):
        self.monoid = monoid

    def pure(self, value) -> M:
        return self.monoid.empty()

    def map(self, fa: M, f) -> M:
        return fa

    def combine2(self, fa: M, fb: M) -> M:
        return self.monoid.combine(fa, fb)

    def map_n(self, effects: Sequence[M], f) -> M:
        """f is never called; the summaries are combined in one pass"""
        return self.monoid.combine_all(effects)


# ============================================================================
# FAILURE-AWARE EFFECTS
# ============================================================================

class MaybeApplicative(Applicative):
    """F[A] = Maybe[A]; any NOTHING makes the whole result NOTHING"""

    def pure(self, value) -> Maybe:
        return Just(value)

    def map(self, fa: Maybe, f) -> Maybe:
        return fa.map(f)

    def combine2(self, fa: Maybe, fb: Maybe) -> Maybe:
        return fa.flat_map(lambda a: fb.map(lambda b: (a, b)))


class EitherApplicative(Applicative):
    """F[A] = Either[E, A]; stops at the first (left-most) Left"""

    def pure(self, value) -> Either:
        return Right(value)

    def map(self, fa: Either, f) -> Either:
        return fa.map(f)

    def combine2(self, fa: Either, fb: Either) -> Either:
        return fa.flat_map(lambda a: fb.map(lambda b: (a, b)))


class ValidationApplicative(Applicative, Generic[M]):
    """
    F[A] = Either[E, A] where errors accumulate.
    Two Lefts are merged with the error monoid, in target order, so every
    failing target is reported.
    """

    def __init__(self, errors: Monoid[M]):
        self.errors = errors

    def pure(self, value) -> Either:
        return Right(value)

    def map(self, fa: Either, f) -> Either:
        return fa.map(f)

    def combine2(self, fa: Either, fb: Either) -> Either:
        if fa.is_left and fb.is_left:
            return Left(self.errors.combine(fa.value, fb.value))
        if fa.is_left:
            return fa
        if fb.is_left:
            return fb
        return Right((fa.value, fb.value))


class ListApplicative(Applicative):
    """F[A] = list of A; every combination of per-target results"""

    def pure(self, value) -> List:
        return [value]

    def map(self, fa: List, f) -> List:
        return [f(a) for a in fa]

    def combine2(self, fa: List, fb: List) -> List[Tuple]:
        return [(a, b) for a in fa for b in fb]


identity_applicative = IdentityApplicative()
maybe_applicative = MaybeApplicative()
either_applicative = EitherApplicative()
list_applicative = ListApplicative()
