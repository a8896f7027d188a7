"""
notifications/signals/compliance.py

Real-time email notices for assignments and submissions.
Deadline reminders are NOT sent here; the daily job owns those.
"""

from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver

from compliance.models import RequirementAssignment, Upload
from notifications.services.assignment import notify_requirement_assigned
from notifications.services.review import (
    notify_submission_pending_review,
    notify_submission_status,
)


# ============================================================
# PRE_SAVE: TRACK WHAT CHANGED
# ============================================================

@receiver(pre_save, sender=RequirementAssignment)
def track_assignment_deadline_change(sender, instance, **kwargs):
    """
    Sets a flag that post_save can check.
    """
    instance._deadline_changed = False

    if not instance.pk:
        return

    old_deadline = (
        RequirementAssignment.objects
        .filter(pk=instance.pk)
        .values_list("deadline", flat=True)
        .first()
    )
    instance._deadline_changed = old_deadline != instance.deadline


@receiver(pre_save, sender=Upload)
def track_upload_decision_change(sender, instance, **kwargs):
    instance._old_approval_status = None

    if not instance.pk:
        return

    instance._old_approval_status = (
        Upload.objects
        .filter(pk=instance.pk)
        .values_list("approval_status", flat=True)
        .first()
    )


# ============================================================
# ASSIGNMENT: NEW PIC / MOVED DEADLINE
# ============================================================

@receiver(post_save, sender=RequirementAssignment)
def handle_assignment_saved(sender, instance, created, **kwargs):
    if created:
        notify_requirement_assigned(assignment=instance, context="assigned")
        return

    if getattr(instance, "_deadline_changed", False):
        notify_requirement_assigned(assignment=instance, context="updated")


# ============================================================
# UPLOAD: SUBMITTED / REVIEWED
# ============================================================

@receiver(post_save, sender=Upload)
def handle_upload_saved(sender, instance, created, **kwargs):
    if created:
        notify_submission_pending_review(upload=instance)
        return

    notify_submission_status(
        upload=instance,
        old_status=getattr(instance, "_old_approval_status", None),
    )
