"""
SETTER: write-only access to zero or more targets

Law: modify(identity) = identity. Setters apply a plain function per target
and never read, so setter composition is just nesting of modify.
"""

from typing import Callable, Generic, TypeVar

from .optic import Optic, OpticKind


S = TypeVar('S')
T = TypeVar('T')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class PSetter(Optic, Generic[S, T, A, B]):
    """
    PSetter[S, T, A, B]: modify every A in an S with a function A → B,
    producing a T.
    """

    kind = OpticKind.SETTER

    def __init__(self, modify: Callable[[Callable[[A], B]], Callable[[S], T]]):
        self._modify = modify

    def modify(self, f: Callable[[A], B]) -> Callable[[S], T]:
        return self._modify(f)

    def set(self, b: B) -> Callable[[S], T]:
        return self._modify(lambda _: b)

    def compose_setter(self, other: 'PSetter[A, B, C, D]') -> 'PSetter[S, T, C, D]':
        return PSetter(lambda f: self.modify(other.modify(f)))

    def compose_traversal(self, other) -> 'PSetter[S, T, C, D]':
        return self.compose_setter(other.as_setter())

    def compose_optional(self, other) -> 'PSetter[S, T, C, D]':
        return self.compose_setter(other.as_setter())

    def compose_prism(self, other) -> 'PSetter[S, T, C, D]':
        return self.compose_setter(other.as_setter())

    def compose_lens(self, other) -> 'PSetter[S, T, C, D]':
        return self.compose_setter(other.as_setter())

    def compose_iso(self, other) -> 'PSetter[S, T, C, D]':
        return self.compose_setter(other.as_setter())

    def as_setter(self) -> 'PSetter[S, T, A, B]':
        return self

    @staticmethod
    def from_mapper(mapper: Callable[[Callable[[A], B], S], T]) -> 'PSetter[S, T, A, B]':
        """
        Setter from a structure-mapping function, e.g.
        PSetter.from_mapper(lambda f, xs: [f(x) for x in xs])
        """
        return PSetter(lambda f: lambda s: mapper(f, s))


Setter = PSetter[S, S, A, A]


def setter(mapper: Callable[[Callable[[A], A], S], S]) -> Setter:
    """Monomorphic setter from a structure-mapping function"""
    return PSetter.from_mapper(mapper)
