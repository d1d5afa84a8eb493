"""
DATATYPES: Maybe, Either and Try

Small immutable value types the optics speak in:
- Maybe[A]     = Just(a) | Nothing        "zero or one target"
- Either[L, R] = Left(l) | Right(r)        "no match, source re-typed" | "match"
- Try[A]       = Success(a) | Failure(e)   result of user code that may raise

Maybe is used instead of None so that a present None target is
distinguishable from a missing one.
"""

from typing import Callable, Generic, List, TypeVar, Any
from dataclasses import dataclass
from abc import ABC, abstractmethod


# ============================================================================
# TYPE VARIABLES
# ============================================================================

A = TypeVar('A')
B = TypeVar('B')
L = TypeVar('L')
R = TypeVar('R')


# ============================================================================
# MAYBE
# ============================================================================

class Maybe(ABC, Generic[A]):
    """Optional value: Just(a) or Nothing"""

    @abstractmethod
    def fold(self, if_nothing: Callable[[], B], if_just: Callable[[A], B]) -> B:
        """Eliminate the Maybe: call if_nothing() or if_just(value)"""
        pass

    @property
    def is_just(self) -> bool:
        return self.fold(lambda: False, lambda _: True)

    @property
    def is_nothing(self) -> bool:
        return not self.is_just

    def map(self, f: Callable[[A], B]) -> 'Maybe[B]':
        return self.fold(lambda: NOTHING, lambda a: Just(f(a)))

    def flat_map(self, f: Callable[[A], 'Maybe[B]']) -> 'Maybe[B]':
        return self.fold(lambda: NOTHING, f)

    def filter(self, predicate: Callable[[A], bool]) -> 'Maybe[A]':
        return self.flat_map(lambda a: Just(a) if predicate(a) else NOTHING)

    def get_or_else(self, default: A) -> A:
        return self.fold(lambda: default, lambda a: a)

    def or_else(self, alternative: 'Maybe[A]') -> 'Maybe[A]':
        """Left-biased choice: self if it holds a value, else alternative"""
        return self if self.is_just else alternative

    def to_list(self) -> List[A]:
        return self.fold(list, lambda a: [a])


@dataclass(frozen=True)
class Just(Maybe[A]):
    value: A

    def fold(self, if_nothing, if_just):
        return if_just(self.value)


@dataclass(frozen=True)
class Nothing(Maybe[Any]):

    def fold(self, if_nothing, if_just):
        return if_nothing()


NOTHING = Nothing()


def from_nullable(value: A) -> Maybe[A]:
    """Just(value), or NOTHING when value is None"""
    return NOTHING if value is None else Just(value)


# ============================================================================
# EITHER
# ============================================================================

class Either(ABC, Generic[L, R]):
    """
    Disjoint union, right-biased.
    Prisms and optionals answer get_or_modify with Right(target) on a match
    and Left(source) otherwise.
    """

    @abstractmethod
    def fold(self, if_left: Callable[[L], B], if_right: Callable[[R], B]) -> B:
        pass

    @property
    def is_left(self) -> bool:
        return self.fold(lambda _: True, lambda _: False)

    @property
    def is_right(self) -> bool:
        return not self.is_left

    def map(self, f: Callable[[R], B]) -> 'Either[L, B]':
        return self.fold(Left, lambda r: Right(f(r)))

    def left_map(self, f: Callable[[L], B]) -> 'Either[B, R]':
        return self.fold(lambda l: Left(f(l)), Right)

    def bimap(self, f: Callable[[L], A], g: Callable[[R], B]) -> 'Either[A, B]':
        return self.fold(lambda l: Left(f(l)), lambda r: Right(g(r)))

    def flat_map(self, f: Callable[[R], 'Either[L, B]']) -> 'Either[L, B]':
        return self.fold(Left, f)

    def swap(self) -> 'Either[R, L]':
        return self.fold(Right, Left)

    def to_maybe(self) -> Maybe[R]:
        """Right(r) becomes Just(r), Left is dropped"""
        return self.fold(lambda _: NOTHING, Just)

    def get_or_else(self, default: R) -> R:
        return self.fold(lambda _: default, lambda r: r)


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L

    def fold(self, if_left, if_right):
        return if_left(self.value)


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R

    def fold(self, if_left, if_right):
        return if_right(self.value)


# ============================================================================
# TRY
# ============================================================================

class Try(ABC, Generic[A]):
    """Outcome of a computation that may raise: Success(value) or Failure(error)"""

    @abstractmethod
    def fold(self, if_failure: Callable[[Exception], B], if_success: Callable[[A], B]) -> B:
        pass

    @property
    def is_success(self) -> bool:
        return self.fold(lambda _: False, lambda _: True)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def map(self, f: Callable[[A], B]) -> 'Try[B]':
        """Apply f to a success; an exception raised by f becomes a Failure"""
        return self.fold(Failure, lambda a: attempt(f, a))

    def flat_map(self, f: Callable[[A], 'Try[B]']) -> 'Try[B]':
        return self.fold(Failure, f)

    def get_or_else(self, default: A) -> A:
        return self.fold(lambda _: default, lambda a: a)

    def to_maybe(self) -> Maybe[A]:
        return self.fold(lambda _: NOTHING, Just)

    def to_either(self) -> Either[Exception, A]:
        return self.fold(Left, Right)


@dataclass(frozen=True)
class Success(Try[A]):
    value: A

    def fold(self, if_failure, if_success):
        return if_success(self.value)


@dataclass(frozen=True)
class Failure(Try[Any]):
    error: Exception

    def fold(self, if_failure, if_success):
        return if_failure(self.error)


def attempt(func: Callable[..., A], *args, **kwargs) -> Try[A]:
    """
    Run func and capture the outcome.
    Exceptions (not BaseException: KeyboardInterrupt still propagates)
    become Failure values.
    """
    try:
        return Success(func(*args, **kwargs))
    except Exception as e:
        return Failure(e)
