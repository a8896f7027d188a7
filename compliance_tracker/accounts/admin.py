from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    PICs receive reminders at their `email`; an account without one
    is still assignable but never notified.
    """

    ordering = ("username",)

    list_display = (
        "username",
        "display_name",
        "email",
        "role",
        "assignment_count",
        "is_active",
    )

    list_filter = ("role", "is_active")

    search_fields = (
        "username",
        "email",
        "employee_name",
        "first_name",
        "last_name",
    )

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Compliance role", {"fields": ("employee_name", "role")}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Compliance role", {"fields": ("email", "employee_name", "role")}),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _assignment_count=Count("requirement_assignments")
        )

    @admin.display(description="Assignments", ordering="_assignment_count")
    def assignment_count(self, obj):
        return obj._assignment_count
