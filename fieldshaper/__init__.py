""".. Ignore pydocstyle D400.

===========
FieldShaper
===========

Return only the fields a client asked for.

.. automodule:: fieldshaper.service
   :members:

.. automodule:: fieldshaper.selection
   :members:

.. automodule:: fieldshaper.cache
   :members:

.. automodule:: fieldshaper.descriptors
   :members:

"""
from fieldshaper.__about__ import (  # noqa: F401
    __author__,
    __copyright__,
    __email__,
    __license__,
    __summary__,
    __title__,
    __url__,
    __version__,
)
