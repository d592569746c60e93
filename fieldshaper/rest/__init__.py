""".. Ignore pydocstyle D400.

=====================
Django REST framework
=====================

Shape responses of Django REST framework views.

.. automodule:: fieldshaper.rest.mixins
   :members:

"""
from .mixins import (
    DataShapingMixin,
    InvalidFieldsError,
    ShapedListModelMixin,
    ShapedReadOnlyModelViewSet,
    ShapedRetrieveModelMixin,
)

__all__ = (
    "DataShapingMixin",
    "InvalidFieldsError",
    "ShapedListModelMixin",
    "ShapedReadOnlyModelViewSet",
    "ShapedRetrieveModelMixin",
)
