""".. Ignore pydocstyle D400.

===============
Field Selection
===============

Parse the comma separated list of requested fields.

"""
from typing import Iterable, Iterator, Optional

from .descriptors import PropertyDescriptor

FIELD_SEPARATOR = ","


class FieldSelection:
    """Case-insensitive set of requested field names.

    An empty selection means that all fields are requested.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()):
        """Initialize attributes.

        Names are deduplicated case-insensitively, the first spelling is kept.
        """
        self._names: dict[str, str] = {}
        for name in names:
            self._names.setdefault(name.casefold(), name)

    @classmethod
    def parse(cls, fields: Optional[str]) -> "FieldSelection":
        """Parse the comma separated field list.

        Tokens are stripped of surrounding whitespace and empty tokens are
        ignored, so ``None``, an empty string or a string of whitespace give
        an empty selection.
        """
        if not fields:
            return cls()
        tokens = (token.strip() for token in fields.split(FIELD_SEPARATOR))
        return cls(token for token in tokens if token)

    def filter(self, descriptors: Iterable[PropertyDescriptor]):
        """Return the selected descriptors, or all of them if nothing is selected."""
        if not self:
            return tuple(descriptors)
        return tuple(
            descriptor for descriptor in descriptors if descriptor.name in self
        )

    def missing(self, descriptors: Iterable[PropertyDescriptor]) -> list[str]:
        """Return requested names that match none of the descriptors."""
        known = {descriptor.name.casefold() for descriptor in descriptors}
        return [name for key, name in self._names.items() if key not in known]

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.casefold() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldSelection):
            return NotImplemented
        return self._names.keys() == other._names.keys()

    def __hash__(self) -> int:
        return hash(frozenset(self._names))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"
