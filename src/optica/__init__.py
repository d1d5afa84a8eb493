"""
OPTICA: Composable optics for immutable Python values

Isos, lenses, prisms, optionals, traversals, setters, folds and getters,
with a composition algebra where composing two optics yields the weaker of
the two kinds.
"""

__version__ = "1.0.0"

from .errors import (
    OpticError,
    CompositionError,
    InstanceNotFoundError,
)

from .datatypes import (
    Maybe,
    Just,
    Nothing,
    NOTHING,
    from_nullable,
    Either,
    Left,
    Right,
    Try,
    Success,
    Failure,
    attempt,
)

from .monoid import (
    Monoid,
    ListMonoid,
    FirstMonoid,
    LastMonoid,
    SumMonoid,
    AllMonoid,
    AnyMonoid,
)

from .applicative import (
    Applicative,
    IdentityApplicative,
    ConstApplicative,
    MaybeApplicative,
    EitherApplicative,
    ValidationApplicative,
    ListApplicative,
    identity_applicative,
    maybe_applicative,
    either_applicative,
    list_applicative,
)

from .traverse import Traverse

from .optic import (
    Capability,
    OpticKind,
    Optic,
    composed_kind,
    compose,
)

from .fold import Fold
from .getter import Getter
from .setter import PSetter, Setter, setter
from .traversal import PTraversal, Traversal, of2, of3, of4, of5, of6
from .optional import POptional, Optional, optional
from .prism import PPrism, Prism, prism, prism_from_option
from .lens import PLens, Lens, lens
from .iso import PIso, Iso, iso

from .registry import InstanceRegistry, ANY

from .function import (
    Reverse,
    reverse,
    reversed_value,
    Each,
    each,
    Possible,
    possible,
)

__all__ = [
    # Errors
    "OpticError",
    "CompositionError",
    "InstanceNotFoundError",

    # Datatypes
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    "from_nullable",
    "Either",
    "Left",
    "Right",
    "Try",
    "Success",
    "Failure",
    "attempt",

    # Monoids & effects
    "Monoid",
    "ListMonoid",
    "FirstMonoid",
    "LastMonoid",
    "SumMonoid",
    "AllMonoid",
    "AnyMonoid",
    "Applicative",
    "IdentityApplicative",
    "ConstApplicative",
    "MaybeApplicative",
    "EitherApplicative",
    "ValidationApplicative",
    "ListApplicative",
    "identity_applicative",
    "maybe_applicative",
    "either_applicative",
    "list_applicative",
    "Traverse",

    # Optics
    "Capability",
    "OpticKind",
    "Optic",
    "composed_kind",
    "compose",
    "Fold",
    "Getter",
    "PSetter",
    "Setter",
    "setter",
    "PTraversal",
    "Traversal",
    "of2",
    "of3",
    "of4",
    "of5",
    "of6",
    "POptional",
    "Optional",
    "optional",
    "PPrism",
    "Prism",
    "prism",
    "prism_from_option",
    "PLens",
    "Lens",
    "lens",
    "PIso",
    "Iso",
    "iso",

    # Capability lookups
    "InstanceRegistry",
    "ANY",
    "Reverse",
    "reverse",
    "reversed_value",
    "Each",
    "each",
    "Possible",
    "possible",
]
