""".. Ignore pydocstyle D400.

====================
Property Descriptors
====================

Enumerate public readable instance properties of a type.

"""
import dataclasses
import inspect
import logging
import typing
from operator import attrgetter
from typing import Any, Callable, NamedTuple

from django.db import models

logger = logging.getLogger(__name__)


class PropertyDescriptor(NamedTuple):
    """Name of a public property and the accessor reading it."""

    name: str
    accessor: Callable[[Any], Any]

    def get_value(self, entity: Any) -> Any:
        """Read the current value of the property off the given entity."""
        return self.accessor(entity)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_class_var(annotation) -> bool:
    """Check if the annotation declares a class variable."""
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return (
        annotation is typing.ClassVar
        or typing.get_origin(annotation) is typing.ClassVar
    )


def _model_properties(model):
    # Relations are read through the stored key so values stay serializable.
    for field in model._meta.concrete_fields:
        yield field.name, field.attname


def _dataclass_properties(entity_type):
    for field in dataclasses.fields(entity_type):
        yield field.name, field.name


def _namedtuple_properties(entity_type):
    for name in entity_type._fields:
        yield name, name


def _class_properties(entity_type):
    """Collect annotated attributes, slots and properties, base classes first."""
    for klass in reversed(entity_type.__mro__):
        if klass is object:
            continue

        for name, annotation in inspect.get_annotations(klass).items():
            if not _is_class_var(annotation):
                yield name, name

        slots = vars(klass).get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            yield name, name

        for name, value in vars(klass).items():
            if isinstance(value, property) and value.fget is not None:
                yield name, name


def get_properties(entity_type: type) -> tuple[PropertyDescriptor, ...]:
    """Return descriptors of all public readable properties of the type.

    Descriptors are returned in declaration order. When a name is declared
    more than once (e.g. overridden in a subclass) the first declaration
    determines its position.

    A type without public properties, or one that cannot be introspected,
    yields an empty tuple.
    """
    if isinstance(entity_type, type) and issubclass(entity_type, models.Model):
        candidates = _model_properties(entity_type)
    elif dataclasses.is_dataclass(entity_type):
        candidates = _dataclass_properties(entity_type)
    elif isinstance(entity_type, type) and hasattr(entity_type, "_fields"):
        candidates = _namedtuple_properties(entity_type)
    else:
        candidates = _class_properties(entity_type)

    descriptors = {}
    try:
        for name, attribute in candidates:
            if _is_public(name) and name not in descriptors:
                descriptors[name] = PropertyDescriptor(name, attrgetter(attribute))
    except (AttributeError, TypeError):
        logger.warning(
            "Unable to enumerate properties of %r, no fields will be shaped.",
            entity_type,
            exc_info=True,
        )
        return ()

    return tuple(descriptors.values())
