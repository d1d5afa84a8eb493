"""
Try prisms: success() focuses a Success value, failure() the captured error.
"""

from ..datatypes import Left, Right, Success, Failure
from ..prism import PPrism


def success() -> PPrism:
    """PPrism[Try[A], Try[B], A, B]; a Failure is passed through unchanged"""
    return PPrism(
        lambda t: t.fold(lambda _: Left(t), Right),
        Success
    )


def failure() -> PPrism:
    """Prism[Try[A], Exception]"""
    return PPrism(
        lambda t: t.fold(Right, lambda _: Left(t)),
        Failure
    )
