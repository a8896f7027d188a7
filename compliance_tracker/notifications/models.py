from django.db import models
from django.utils import timezone

from compliance.models import RequirementAssignment


class ReminderDelivery(models.Model):
    """
    Sent-ledger for compliance deadline reminders.

    One row per (assignment, offset, target date), written only
    after the email was accepted. The reminder run consults it
    so that a second run on the same day does not resend.
    """

    # =====================================================
    # LEDGER KEY
    # =====================================================
    assignment = models.ForeignKey(
        RequirementAssignment,
        on_delete=models.CASCADE,
        related_name="reminder_deliveries"
    )

    offset_days = models.PositiveSmallIntegerField(
        help_text="Days before the deadline (30, 14, 7, 1)"
    )

    target_date = models.DateField(
        help_text="Deadline the reminder was sent for"
    )

    # =====================================================
    # DELIVERY
    # =====================================================
    recipient_email = models.EmailField(blank=True)

    sent_at = models.DateTimeField(
        default=timezone.now,
        db_index=True
    )

    class Meta:
        ordering = ["-sent_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["assignment", "offset_days", "target_date"],
                name="unique_reminder_per_offset_and_date",
            ),
        ]
        verbose_name_plural = "reminder deliveries"

    def __str__(self):
        return (
            f"{self.recipient_email or self.assignment_id} | "
            f"D-{self.offset_days} | "
            f"{self.target_date}"
        )
