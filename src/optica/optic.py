"""
OPTIC KINDS & COMPOSITION ALGEBRA

Every optic kind is described by the capabilities it offers:

    READ      enumerate targets (fold)
    WRITE     replace targets (modify)
    FOCUS_ONE zero-or-one target, read and written together
    GET       exactly one target can always be read
    REVIEW    the source can be rebuilt from a target alone

    Fold      {READ}
    Getter    {READ, GET}
    Setter    {WRITE}
    Traversal {READ, WRITE}
    Optional  {READ, WRITE, FOCUS_ONE}
    Prism     {READ, WRITE, FOCUS_ONE, REVIEW}
    Lens      {READ, WRITE, FOCUS_ONE, GET}
    Iso       {READ, WRITE, FOCUS_ONE, GET, REVIEW}

Composing two optics yields the kind whose capabilities are the
intersection of both operands (Lens ∘ Prism = Optional, Traversal ∘ Getter =
Fold, ...). The set of kinds is closed under intersection; an empty
intersection (Setter with Fold or Getter) is rejected with CompositionError
as soon as the composition is requested.
"""

from typing import FrozenSet, Optional
from enum import Enum
from functools import reduce
import logging

from .errors import CompositionError


logger = logging.getLogger(__name__)


class Capability(Enum):
    READ = "read"
    WRITE = "write"
    FOCUS_ONE = "focus_one"
    GET = "get"
    REVIEW = "review"


class OpticKind(Enum):
    """Optic kinds; the value names the matching compose_<kind> method"""
    FOLD = "fold"
    GETTER = "getter"
    SETTER = "setter"
    TRAVERSAL = "traversal"
    OPTIONAL = "optional"
    PRISM = "prism"
    LENS = "lens"
    ISO = "iso"

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return _CAPABILITIES[self]


_R, _W, _ONE, _GET, _REV = (
    Capability.READ, Capability.WRITE, Capability.FOCUS_ONE,
    Capability.GET, Capability.REVIEW,
)

_CAPABILITIES = {
    OpticKind.FOLD: frozenset({_R}),
    OpticKind.GETTER: frozenset({_R, _GET}),
    OpticKind.SETTER: frozenset({_W}),
    OpticKind.TRAVERSAL: frozenset({_R, _W}),
    OpticKind.OPTIONAL: frozenset({_R, _W, _ONE}),
    OpticKind.PRISM: frozenset({_R, _W, _ONE, _REV}),
    OpticKind.LENS: frozenset({_R, _W, _ONE, _GET}),
    OpticKind.ISO: frozenset({_R, _W, _ONE, _GET, _REV}),
}


def composed_kind(outer: OpticKind, inner: OpticKind) -> Optional[OpticKind]:
    """
    Kind produced by composing outer with inner, or None when the two
    share no capability.
    """
    shared = outer.capabilities & inner.capabilities
    for kind, capabilities in _CAPABILITIES.items():
        if capabilities == shared:
            return kind
    return None


class Optic:
    """
    Mixin shared by all optic kinds.
    Concrete kinds set `kind` and define compose_<kind> for every kind they
    accept; the generic compose below dispatches on the inner optic's kind.
    """

    kind: OpticKind

    def compose(self, other: 'Optic') -> 'Optic':
        """self ∘ other: focus with self, then focus further with other"""
        if composed_kind(self.kind, other.kind) is None:
            logger.debug("Rejected composition %s ∘ %s", self.kind.value, other.kind.value)
            raise CompositionError(self.kind, other.kind)
        return getattr(self, "compose_" + other.kind.value)(other)

    def __rshift__(self, other: 'Optic') -> 'Optic':
        return self.compose(other)


def compose(first: Optic, *rest: Optic) -> Optic:
    """Compose a chain of optics, outermost first"""
    return reduce(lambda outer, inner: outer.compose(inner), rest, first)
