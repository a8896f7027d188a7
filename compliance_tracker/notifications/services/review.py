from django.contrib.auth import get_user_model
from django.db.models import Q

from compliance.models import Upload
from notifications.services.dispatch import send_notification_safely

User = get_user_model()


def _upload_context(upload):
    uploader = upload.uploader
    return {
        "requirement_name": upload.requirement.name,
        "uploader_name": uploader.display_name if uploader else "N/A",
        "uploaded_at": upload.uploaded_at,
        "approval_status": upload.approval_status,
        "remarks": upload.admin_remarks,
    }


def reviewer_recipients():
    """Active super admins / specialists with an email."""
    return (
        User.objects
        .filter(is_active=True)
        .filter(
            Q(role__in=[User.Role.SUPER_ADMIN, User.Role.SPECIALIST])
            | Q(is_superuser=True)
        )
        .exclude(email="")
        .order_by("id")
    )


# ============================================================
# NEW SUBMISSION (PIC → SPECIALISTS)
# ============================================================

def notify_submission_pending_review(*, upload):
    """
    Tell every reviewer that a submission is waiting.
    Returns the number of emails sent.
    """
    if upload.approval_status != Upload.ApprovalStatus.PENDING:
        return 0

    context = _upload_context(upload)
    sent = 0

    for reviewer in reviewer_recipients():
        if send_notification_safely(
            to_email=reviewer.email,
            subject="Submission pending review",
            template="emails/submission_pending_review.html",
            context={**context, "recipient_name": reviewer.display_name},
        ):
            sent += 1

    return sent


# ============================================================
# REVIEW DECISION CHANGED (SPECIALIST → UPLOADER)
# ============================================================

def notify_submission_status(*, upload, old_status=None):
    """
    Notify the uploader when a submission is approved or rejected.

    Dedup:
    - Only on an actual change of decision
    """
    if old_status == upload.approval_status:
        return False

    if upload.approval_status == Upload.ApprovalStatus.APPROVED:
        subject = "Submission approved"
    elif upload.approval_status == Upload.ApprovalStatus.REJECTED:
        subject = "Submission rejected"
    else:
        return False

    uploader = upload.uploader
    if not uploader or not uploader.email:
        return False

    return send_notification_safely(
        to_email=uploader.email,
        subject=subject,
        template="emails/submission_status.html",
        context={
            **_upload_context(upload),
            "recipient_name": uploader.display_name,
        },
    )
