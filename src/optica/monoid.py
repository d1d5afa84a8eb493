"""
MONOIDS: (M, combine, empty)

Folds summarise their targets through a caller-chosen monoid.
Laws:
- combine(combine(x, y), z) = combine(x, combine(y, z))
- combine(empty, x) = x = combine(x, empty)

combine is NOT assumed commutative: FirstMonoid keeps the left-most value and
the derived head_option depends on that bias.
"""

from typing import Generic, Iterable, List, TypeVar
from abc import ABC, abstractmethod
from functools import reduce
from itertools import chain

from .datatypes import Maybe, NOTHING


M = TypeVar('M')
A = TypeVar('A')


class Monoid(ABC, Generic[M]):
    """Associative combine with an identity element"""

    @abstractmethod
    def empty(self) -> M:
        pass

    @abstractmethod
    def combine(self, x: M, y: M) -> M:
        pass

    def combine_all(self, values: Iterable[M]) -> M:
        """Combine left to right, starting from empty()"""
        return reduce(self.combine, values, self.empty())


class ListMonoid(Monoid[List[A]]):
    """Concatenation; preserves target order"""

    def empty(self) -> List[A]:
        return []

    def combine(self, x: List[A], y: List[A]) -> List[A]:
        return x + y

    def combine_all(self, values: Iterable[List[A]]) -> List[A]:
        return list(chain.from_iterable(values))


class FirstMonoid(Monoid[Maybe[A]]):
    """Keeps the left-most Just"""

    def empty(self) -> Maybe[A]:
        return NOTHING

    def combine(self, x: Maybe[A], y: Maybe[A]) -> Maybe[A]:
        return x.or_else(y)


class LastMonoid(Monoid[Maybe[A]]):
    """Keeps the right-most Just"""

    def empty(self) -> Maybe[A]:
        return NOTHING

    def combine(self, x: Maybe[A], y: Maybe[A]) -> Maybe[A]:
        return y.or_else(x)


class SumMonoid(Monoid[int]):

    def empty(self) -> int:
        return 0

    def combine(self, x, y):
        return x + y


class AllMonoid(Monoid[bool]):
    """Conjunction, empty = True"""

    def empty(self) -> bool:
        return True

    def combine(self, x: bool, y: bool) -> bool:
        return x and y


class AnyMonoid(Monoid[bool]):
    """Disjunction, empty = False"""

    def empty(self) -> bool:
        return False

    def combine(self, x: bool, y: bool) -> bool:
        return x or y


list_monoid = ListMonoid()
first_monoid = FirstMonoid()
last_monoid = LastMonoid()
sum_monoid = SumMonoid()
all_monoid = AllMonoid()
any_monoid = AnyMonoid()
