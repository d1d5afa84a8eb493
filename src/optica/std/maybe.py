"""
Maybe prisms: just() focuses the value of a Just, nothing() matches NOTHING.
"""

from ..datatypes import Just, NOTHING, Left, Right
from ..prism import PPrism, Prism, prism_from_option


def just() -> PPrism:
    """PPrism[Maybe[A], Maybe[B], A, B]; NOTHING is passed through unchanged"""
    return PPrism(
        lambda m: m.fold(lambda: Left(NOTHING), Right),
        Just
    )


def nothing() -> Prism:
    """Prism[Maybe[A], None] matching only NOTHING"""
    return prism_from_option(
        lambda m: m.fold(lambda: Just(None), lambda _: NOTHING),
        lambda _: NOTHING
    )
