"""
notifications/services/reminders/compliance.py

Daily compliance deadline reminders for PICs.

For each offset (days before the deadline, in order) the run picks
the assignments due exactly on `today + offset` that are not yet
APPROVED, and emails their PIC once per (assignment, offset).

- `today` is always passed in; only the entry point reads the clock
- assignments without a user or an email are skipped silently
- a failed send is logged and the run moves on
- successful sends are recorded in the ReminderDelivery ledger so a
  second run on the same day does not resend (unless forced)
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from django.conf import settings
from django.utils import timezone

from compliance.models import RequirementAssignment
from compliance.services.snapshots import AssignmentFact, load_due_assignments
from notifications.models import ReminderDelivery
from notifications.services.dispatch import send_notification

logger = logging.getLogger(__name__)


# ============================================================
# OFFSETS (DAYS BEFORE DEADLINE)
# ============================================================

REMINDER_OFFSETS = (30, 14, 7, 1)

REMINDER_TEMPLATE = "emails/compliance_reminder.html"


def get_reminder_offsets():
    return tuple(getattr(settings, "COMPLIANCE_REMINDER_OFFSETS", REMINDER_OFFSETS))


def days_left_label(offset_days):
    return "24 hours" if offset_days == 1 else f"D-{offset_days}"


def reminder_subject(offset_days):
    return f"Compliance deadline reminder ({days_left_label(offset_days)})"


# ============================================================
# NOTICES
# ============================================================

@dataclass(frozen=True)
class ReminderNotice:
    recipient_email: str
    recipient_name: str
    requirement_name: str
    assignment: AssignmentFact
    offset_days: int
    target_date: date

    @property
    def ledger_key(self):
        return (self.assignment.id, self.offset_days, self.target_date)

    @property
    def subject(self):
        return reminder_subject(self.offset_days)

    def template_context(self):
        return {
            "recipient_name": self.recipient_name or "PIC",
            "requirement_name": self.requirement_name or "N/A",
            "deadline": self.assignment.deadline,
            "days_left": days_left_label(self.offset_days),
            "status": self.assignment.compliance_status or "PENDING",
        }


@dataclass
class ReminderRunResult:
    sent: int = 0
    skipped: int = 0
    failed: int = 0
    duplicates: int = 0


def select_due_assignments(assignments, target_date):
    """Deadline equals target_date (date only) and not yet approved."""
    return [
        a for a in assignments
        if a.deadline == target_date
        and a.compliance_status != RequirementAssignment.ComplianceStatus.APPROVED
    ]


def notices_for_offset(assignments, offset_days, target_date) -> List[ReminderNotice]:
    return [
        ReminderNotice(
            recipient_email=a.pic_email,
            recipient_name=a.pic_name,
            requirement_name=a.requirement_name,
            assignment=a,
            offset_days=offset_days,
            target_date=target_date,
        )
        for a in select_due_assignments(assignments, target_date)
        if a.has_recipient
    ]


def build_reminder_notices(assignments, today, offsets=REMINDER_OFFSETS):
    """
    Every notice owed on `today`, offsets in the given order.
    Pure: no queries, no sends.
    """
    notices = []
    for offset_days in offsets:
        target_date = today + timedelta(days=offset_days)
        notices.extend(notices_for_offset(assignments, offset_days, target_date))
    return notices


# ============================================================
# LEDGER
# ============================================================

def already_sent(notice):
    assignment_id, offset_days, target_date = notice.ledger_key
    return ReminderDelivery.objects.filter(
        assignment_id=assignment_id,
        offset_days=offset_days,
        target_date=target_date,
    ).exists()


def record_sent(notice):
    assignment_id, offset_days, target_date = notice.ledger_key
    ReminderDelivery.objects.get_or_create(
        assignment_id=assignment_id,
        offset_days=offset_days,
        target_date=target_date,
        defaults={"recipient_email": notice.recipient_email},
    )


# ============================================================
# SEND COMPLIANCE REMINDERS
# ============================================================

def dispatch_reminder(notice, dispatcher=send_notification):
    return dispatcher(
        to_email=notice.recipient_email,
        subject=notice.subject,
        template=REMINDER_TEMPLATE,
        context=notice.template_context(),
    )


def send_compliance_reminders(
    today=None,
    *,
    dispatcher=None,
    offsets=None,
    use_ledger=None,
    load_assignments=load_due_assignments,
):
    """
    Run the reminder scan once.

    Query failures propagate (the run is aborted). Send failures
    are logged with recipient, requirement and offset, and the
    remaining notices are still processed.
    """
    today = today or timezone.localdate()
    dispatcher = dispatcher or send_notification
    offsets = get_reminder_offsets() if offsets is None else tuple(offsets)
    if use_ledger is None:
        use_ledger = getattr(settings, "COMPLIANCE_REMINDER_LEDGER", True)

    result = ReminderRunResult()

    for offset_days in offsets:
        target_date = today + timedelta(days=offset_days)

        due = select_due_assignments(load_assignments(target_date), target_date)
        notices = notices_for_offset(due, offset_days, target_date)
        result.skipped += len(due) - len(notices)

        for notice in notices:
            if use_ledger and already_sent(notice):
                result.duplicates += 1
                continue

            try:
                delivered = dispatch_reminder(notice, dispatcher)
            except Exception:
                result.failed += 1
                logger.exception(
                    "Reminder (%s) to %s for '%s' (assignment=%s) failed",
                    days_left_label(offset_days),
                    notice.recipient_email,
                    notice.requirement_name,
                    notice.assignment.id,
                )
                continue

            if not delivered:
                result.failed += 1
                logger.warning(
                    "Reminder (%s) to %s for '%s' (assignment=%s) was not accepted",
                    days_left_label(offset_days),
                    notice.recipient_email,
                    notice.requirement_name,
                    notice.assignment.id,
                )
                continue

            result.sent += 1
            if use_ledger:
                record_sent(notice)

            logger.info(
                "Reminder (%s) sent to %s for '%s'",
                days_left_label(offset_days),
                notice.recipient_email,
                notice.requirement_name,
            )

    logger.info(
        "Compliance reminders for %s: %s sent, %s skipped, %s failed, %s already sent",
        today, result.sent, result.skipped, result.failed, result.duplicates,
    )
    return result
