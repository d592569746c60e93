"""Mixins that shape responses of Django REST framework views."""
import logging

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import exceptions, status, viewsets
from rest_framework.response import Response

from fieldshaper.service import DataShapingService

logger = logging.getLogger(__name__)

DEFAULT_QUERY_PARAM = "fields"


def get_query_param():
    """Return the name of the query parameter holding the field list."""
    return getattr(settings, "FIELDSHAPER", {}).get("QUERY_PARAM", DEFAULT_QUERY_PARAM)


def fields_parameter():
    """Describe the field list query parameter for the OpenAPI schema."""
    return OpenApiParameter(
        name=get_query_param(),
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        required=False,
        description="Comma separated list of fields to return. All fields are "
        "returned when omitted. Field names are case-insensitive.",
    )


class InvalidFieldsError(exceptions.APIException):
    """Requested fields do not exist on the shaped type."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "invalid_fields"

    def __init__(self, invalid_fields, entity_type=None):
        """Initialize attributes."""
        self.invalid_fields = list(invalid_fields)
        self.entity_type = entity_type
        joined = ", ".join(f"'{name}'" for name in self.invalid_fields)
        message = f"The provided data shaping fields aren't valid: {joined}."
        super().__init__({"error": message, "fields": self.invalid_fields})


class DataShapingMixin:
    """Shape serialized entities according to the requested field list.

    Views set ``shaping_type`` to the class whose properties define the
    shape. When it is not set, the model of the view's queryset is used.
    """

    shaping_type = None
    shaping_service = DataShapingService()

    def get_shaping_fields(self):
        """Return the raw field list from the request."""
        return self.request.query_params.get(get_query_param())

    def get_shaping_type(self):
        """Return the class whose properties define the shape."""
        if self.shaping_type is not None:
            return self.shaping_type
        queryset = getattr(self, "queryset", None)
        model = getattr(queryset, "model", None)
        assert model is not None, (
            f"'{self.__class__.__name__}' should either include a `shaping_type` "
            "attribute, or override the `get_shaping_type()` method."
        )
        return model

    def check_shaping_fields(self):
        """Reject the request when unknown fields are requested."""
        fields = self.get_shaping_fields()
        entity_type = self.get_shaping_type()
        invalid_fields = self.shaping_service.get_invalid_fields(entity_type, fields)
        if invalid_fields:
            logger.info(
                "Rejected unknown fields %s of %s.",
                invalid_fields,
                entity_type.__name__,
            )
            raise InvalidFieldsError(invalid_fields, entity_type)
        return fields

    def shape(self, instance, fields):
        """Shape a single instance."""
        return self.shaping_service.shape_data(
            instance, fields, entity_type=self.get_shaping_type()
        )

    def shape_collection(self, instances, fields):
        """Shape a collection of instances."""
        return self.shaping_service.shape_collection_data(
            instances, fields, entity_type=self.get_shaping_type()
        )


class ShapedListModelMixin(DataShapingMixin):
    """List a queryset, returning only the requested fields."""

    @extend_schema(parameters=[fields_parameter()])
    def list(self, request, *args, **kwargs):
        """List shaped entities."""
        fields = self.check_shaping_fields()
        queryset = self.filter_queryset(self.get_queryset())

        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(self.shape_collection(page, fields))

        return Response(self.shape_collection(queryset, fields))


class ShapedRetrieveModelMixin(DataShapingMixin):
    """Retrieve a model instance, returning only the requested fields."""

    @extend_schema(parameters=[fields_parameter()])
    def retrieve(self, request, *args, **kwargs):
        """Retrieve a shaped entity."""
        fields = self.check_shaping_fields()
        instance = self.get_object()
        return Response(self.shape(instance, fields))


class ShapedReadOnlyModelViewSet(
    ShapedRetrieveModelMixin, ShapedListModelMixin, viewsets.GenericViewSet
):
    """A viewset providing shaped `list` and `retrieve` actions."""
