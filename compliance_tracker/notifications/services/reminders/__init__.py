"""
Reminder notification service layer.

Time-based reminder emitters triggered by schedulers
(management commands, APScheduler jobs).

Reminder logic is:
- service-layer only
- date-based (evaluation date passed in)
- deduplicated through the ReminderDelivery ledger
"""

# =====================================================
# COMPLIANCE DEADLINE REMINDERS
# =====================================================
from .compliance import (
    REMINDER_OFFSETS,
    ReminderNotice,
    ReminderRunResult,
    build_reminder_notices,
    send_compliance_reminders,
)

__all__ = [
    "REMINDER_OFFSETS",
    "ReminderNotice",
    "ReminderRunResult",
    "build_reminder_notices",
    "send_compliance_reminders",
]
