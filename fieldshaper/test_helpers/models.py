"""Models used in tests."""
from django.conf import settings
from django.db import models


class Habit(models.Model):
    """A habit tracked by a user."""

    STATUS_ONGOING = "ongoing"
    STATUS_COMPLETED = "completed"
    STATUS_CHOICES = (
        (STATUS_ONGOING, "Ongoing"),
        (STATUS_COMPLETED, "Completed"),
    )

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    length = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_ONGOING
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.CASCADE
    )

    @property
    def display_name(self):
        """Return the name in title case."""
        return self.name.title()
