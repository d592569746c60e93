"""Views used in tests.

The views serve in-memory objects, so no database is needed.
"""
from dataclasses import dataclass
from typing import Optional

from django.http import Http404
from rest_framework.pagination import PageNumberPagination

from fieldshaper.rest import ShapedReadOnlyModelViewSet

from .models import Habit

HABITS = [
    Habit(id=1, name="Run", description="Morning run", length=30, owner_id=7),
    Habit(id=2, name="Read", length=20, status=Habit.STATUS_COMPLETED),
    Habit(id=3, name="Meditate", length=10),
]


@dataclass
class HabitDto:
    """Habit representation exposed by the API."""

    id: int
    name: str
    length: int
    description: Optional[str] = None


class HabitViewSet(ShapedReadOnlyModelViewSet):
    """Shape habit model instances."""

    queryset = Habit.objects.none()

    def get_queryset(self):
        """Return all habits."""
        return list(HABITS)

    def get_object(self):
        """Return the habit with the requested id."""
        for habit in self.get_queryset():
            if str(habit.pk) == self.kwargs["pk"]:
                return habit
        raise Http404


class HabitDtoPagination(PageNumberPagination):
    """Paginate habits two at a time."""

    page_size = 2


class HabitDtoViewSet(ShapedReadOnlyModelViewSet):
    """Shape habit DTOs page by page."""

    shaping_type = HabitDto
    pagination_class = HabitDtoPagination

    def get_queryset(self):
        """Map habits to DTOs."""
        return [
            HabitDto(
                id=habit.id,
                name=habit.name,
                length=habit.length,
                description=habit.description or None,
            )
            for habit in HABITS
        ]
