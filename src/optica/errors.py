"""
ERRORS: construction-time rejections

Partial matches and effectful failures are data (Left, NOTHING, the chosen
effect's own failure value). Exceptions are reserved for mistakes made while
building optics or resolving capability instances.
"""


class OpticError(Exception):
    """Root of every error raised by optica"""


class CompositionError(OpticError, TypeError):
    """
    Raised when two optic kinds share no capability, e.g. a Setter composed
    with a Fold. Raised when the composition is built, never when it is used.
    """

    def __init__(self, outer_kind, inner_kind):
        self.outer_kind = outer_kind
        self.inner_kind = inner_kind
        super().__init__(
            f"Cannot compose {outer_kind.value} with {inner_kind.value}: "
            f"no shared capability"
        )


class InstanceNotFoundError(OpticError, LookupError):
    """Raised when a capability lookup has no instance for a pair of types"""

    def __init__(self, capability: str, source, target):
        self.capability = capability
        self.source = source
        self.target = target
        super().__init__(
            f"Could not find an instance of {capability}"
            f"[{_type_name(source)}, {_type_name(target)}]; "
            f"register one with {capability.lower()}_instances.register"
        )


def _type_name(key) -> str:
    return getattr(key, "__name__", repr(key))
