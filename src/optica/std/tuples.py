"""
Tuple lenses: element(i) focuses position i of a tuple; first() and second()
are the usual pair projections. Replacing an element may change its type.
"""

from ..lens import PLens


def element(i: int) -> PLens:
    def set_(b, t):
        return t[:i] + (b,) + t[i + 1:]

    return PLens(lambda t: t[i], set_)


def first() -> PLens:
    return element(0)


def second() -> PLens:
    return element(1)
