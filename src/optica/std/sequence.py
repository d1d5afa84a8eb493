"""
List optics: index(i) focuses one position, filter_index(p) every position
whose index satisfies p. Indexes follow Python's convention, so -1 is the
last element. Updates return new lists.
"""

from typing import Callable, List

from ..datatypes import Just, NOTHING, Maybe
from ..optional import Optional, optional
from ..traversal import PTraversal


def _in_range(i: int, xs: List) -> bool:
    return -len(xs) <= i < len(xs)


def index(i: int) -> Optional:
    """Optional[List[A], A]; out-of-range indexes have no target"""

    def get_option(xs: List) -> Maybe:
        return Just(xs[i]) if _in_range(i, xs) else NOTHING

    def set_(x, xs: List) -> List:
        ys = list(xs)
        ys[i] = x
        return ys

    return optional(get_option, set_)


def head() -> Optional:
    return index(0)


def last() -> Optional:
    return index(-1)


def filter_index(predicate: Callable[[int], bool]) -> PTraversal:
    """Traversal over the elements whose position satisfies predicate"""

    def modify_f(applicative, f, xs: List):
        positions = [i for i in range(len(xs)) if predicate(i)]

        def rebuild(*bs):
            ys = list(xs)
            for i, b in zip(positions, bs):
                ys[i] = b
            return ys

        return applicative.map_n([f(xs[i]) for i in positions], rebuild)

    return PTraversal(modify_f)
