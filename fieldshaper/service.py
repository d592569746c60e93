""".. Ignore pydocstyle D400.

====================
Data Shaping Service
====================

Build reduced-field representations of entities.

Example of usage:

    .. code-block:: python

        from fieldshaper.service import DataShapingService

        service = DataShapingService()
        if not service.validate(Habit, fields):
            ...  # reject the request
        service.shape_data(habit, fields)
        service.shape_collection_data(habits, fields, entity_type=Habit)

"""
from itertools import chain
from typing import Any, Iterable, Optional

from .cache import PropertyCache, properties_cache
from .descriptors import PropertyDescriptor
from .selection import FieldSelection

_EMPTY = object()


class DataShapingService:
    """Shape entities into dictionaries holding only the requested fields.

    Requested names that the entity type does not have are ignored when
    shaping. Use :meth:`validate` to reject them explicitly.
    """

    def __init__(self, cache: PropertyCache = properties_cache):
        """Initialize attributes."""
        self.cache = cache

    def get_descriptors(
        self, entity_type: type, fields: Optional[str]
    ) -> tuple[PropertyDescriptor, ...]:
        """Return the descriptors of the type selected by the field list."""
        selection = FieldSelection.parse(fields)
        return selection.filter(self.cache.get_or_add(entity_type))

    @staticmethod
    def _shape(entity, descriptors) -> dict[str, Any]:
        return {
            descriptor.name: descriptor.get_value(entity) for descriptor in descriptors
        }

    def shape_data(
        self, entity, fields: Optional[str] = None, entity_type: Optional[type] = None
    ) -> dict[str, Any]:
        """Shape a single entity.

        :param entity: the entity to shape
        :param fields: comma separated list of requested fields, all fields
            are returned when it is empty or ``None``
        :param entity_type: the type whose properties define the shape,
            defaults to the type of the entity
        """
        if entity_type is None:
            entity_type = type(entity)
        return self._shape(entity, self.get_descriptors(entity_type, fields))

    def shape_collection_data(
        self,
        entities: Iterable,
        fields: Optional[str] = None,
        entity_type: Optional[type] = None,
    ) -> list[dict[str, Any]]:
        """Shape every entity in the collection.

        The field list is parsed and the descriptors resolved only once. The
        collection is iterated a single time, so generators are accepted.

        :param entity_type: the type shared by all entities, defaults to the
            type of the first one
        """
        entities = iter(entities)
        if entity_type is None:
            first = next(entities, _EMPTY)
            if first is _EMPTY:
                return []
            entity_type = type(first)
            entities = chain([first], entities)

        descriptors = self.get_descriptors(entity_type, fields)
        return [self._shape(entity, descriptors) for entity in entities]

    def get_invalid_fields(
        self, entity_type: type, fields: Optional[str] = None
    ) -> list[str]:
        """Return the requested field names the type does not have."""
        selection = FieldSelection.parse(fields)
        if not selection:
            return []
        return selection.missing(self.cache.get_or_add(entity_type))

    def validate(self, entity_type: type, fields: Optional[str] = None) -> bool:
        """Check that every requested field is a property of the type.

        An empty field list is always valid.
        """
        return not self.get_invalid_fields(entity_type, fields)
