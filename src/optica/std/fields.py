"""
Dataclass field lenses. Updates go through dataclasses.replace, so frozen
dataclasses work and the original instance is never mutated.
"""

from dataclasses import replace

from ..lens import PLens


def field_lens(name: str) -> PLens:
    """Lens onto attribute `name` of a dataclass instance"""
    return PLens(
        lambda obj: getattr(obj, name),
        lambda value, obj: replace(obj, **{name: value})
    )
