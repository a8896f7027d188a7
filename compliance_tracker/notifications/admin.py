from django.contrib import admin

from .models import ReminderDelivery


@admin.register(ReminderDelivery)
class ReminderDeliveryAdmin(admin.ModelAdmin):
    """
    Read-mostly view of the reminder sent-ledger.
    Deleting a row allows that reminder to be sent again.
    """

    list_display = (
        "id",
        "assignment",
        "recipient_email",
        "offset_days",
        "target_date",
        "sent_at",
    )

    list_filter = (
        "offset_days",
        "target_date",
    )

    search_fields = (
        "recipient_email",
        "assignment__requirement__name",
    )

    ordering = ("-sent_at",)
    list_per_page = 25

    readonly_fields = (
        "assignment",
        "offset_days",
        "target_date",
        "recipient_email",
        "sent_at",
    )
