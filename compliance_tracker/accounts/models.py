from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):

    class Role(models.TextChoices):
        SUPER_ADMIN = "super_admin", "Super Admin"
        SPECIALIST = "specialist", "Compliance & Admin Specialist"
        PIC = "pic", "Person-in-Charge"

    # Roles trusted to read compliance aggregates
    REVIEWER_ROLES = (Role.SUPER_ADMIN, Role.SPECIALIST)

    employee_name = models.CharField(max_length=150, blank=True)

    role = models.CharField(
        max_length=30,
        choices=Role.choices,
        default=Role.PIC,
        db_index=True,
    )

    @property
    def display_name(self):
        """Name shown on calendars and in emails."""
        return (
            self.employee_name.strip()
            or self.get_full_name()
            or self.username
        )

    @property
    def is_reviewer(self):
        return self.is_superuser or self.role in self.REVIEWER_ROLES

    def __str__(self):
        full = self.employee_name or self.get_full_name()
        return f"{full} ({self.username})" if full else self.username
