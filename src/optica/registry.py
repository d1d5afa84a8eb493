"""
INSTANCE REGISTRY: capability lookups keyed by a pair of types

Reverse, Each and Possible instances are looked up by the (source, target)
types the caller names explicitly, e.g. each_instances.resolve(list). The
registry never inspects the type of a value at runtime.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
import logging

from .errors import InstanceNotFoundError


logger = logging.getLogger(__name__)

I = TypeVar('I')

# Target key meaning "any target type"; lookups fall back to it
ANY = object


class InstanceRegistry(Generic[I]):
    """
    Registry of capability instances for one capability (e.g. "Each").
    Keys are (source, target) pairs of types or other hashable type tokens.
    """

    def __init__(self, capability: str):
        self.capability = capability
        self.instances: Dict[Tuple[Any, Any], I] = {}

    def register(self, source: Any, target: Any, instance: I) -> I:
        """Register (or replace) the instance for (source, target)"""
        if (source, target) in self.instances:
            logger.debug("Replacing %s instance for %r -> %r", self.capability, source, target)
        else:
            logger.debug("Registered %s instance for %r -> %r", self.capability, source, target)
        self.instances[(source, target)] = instance
        return instance

    def get(self, source: Any, target: Any = ANY) -> Optional[I]:
        """
        Exact (source, target) instance, else the (source, ANY) instance,
        else None.
        """
        instance = self.instances.get((source, target))
        if instance is None and target is not ANY:
            instance = self.instances.get((source, ANY))
        return instance

    def resolve(self, source: Any, target: Any = ANY) -> I:
        """Like get, but a missing instance raises InstanceNotFoundError"""
        instance = self.get(source, target)
        if instance is None:
            logger.debug("No %s instance for %r -> %r", self.capability, source, target)
            raise InstanceNotFoundError(self.capability, source, target)
        return instance

    def list_instances(self) -> List[Tuple[Any, Any]]:
        """All registered (source, target) keys"""
        return list(self.instances.keys())
