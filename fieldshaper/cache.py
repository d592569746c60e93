""".. Ignore pydocstyle D400.

==============
Property Cache
==============

Process-wide cache of property descriptors, keyed by type.

Types are assumed not to change during the lifetime of the process, so
entries are computed once and never evicted.

"""
import logging
from typing import Callable, Sequence

from .descriptors import PropertyDescriptor, get_properties

logger = logging.getLogger(__name__)


class PropertyCache:
    """Lazily populated mapping from a type to its property descriptors."""

    def __init__(
        self,
        factory: Callable[[type], Sequence[PropertyDescriptor]] = get_properties,
    ):
        """Initialize attributes."""
        self.factory = factory
        self._entries: dict[type, tuple[PropertyDescriptor, ...]] = {}

    def get_or_add(self, entity_type: type) -> tuple[PropertyDescriptor, ...]:
        """Return descriptors of the given type, computing them if necessary.

        No lock is held while computing. When several threads populate the
        same type concurrently, each computes the descriptors but only the
        first stored result is kept and returned to all of them.
        """
        try:
            return self._entries[entity_type]
        except KeyError:
            pass

        descriptors = tuple(self.factory(entity_type))
        stored = self._entries.setdefault(entity_type, descriptors)
        if stored is descriptors:
            logger.debug(
                "Cached %d properties of %r.", len(descriptors), entity_type
            )
        return stored

    def __contains__(self, entity_type) -> bool:
        """Check if descriptors of the type are already cached."""
        return entity_type in self._entries

    def __len__(self) -> int:
        """Return the number of cached types."""
        return len(self._entries)


properties_cache = PropertyCache()
