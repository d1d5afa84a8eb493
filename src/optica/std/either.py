"""
Either prisms: left() and right() focus one side of an Either.
"""

from ..datatypes import Left, Right
from ..prism import PPrism


def right() -> PPrism:
    """PPrism[Either[L, A], Either[L, B], A, B]"""
    return PPrism(
        lambda e: e.fold(lambda _: Left(e), Right),
        Right
    )


def left() -> PPrism:
    """PPrism[Either[A, R], Either[B, R], A, B]"""
    return PPrism(
        lambda e: e.fold(Right, lambda _: Left(e)),
        Left
    )
