"""
Notification service layer.

Each module emits one kind of outbound notice. All email goes
through `dispatch.send_notification`.
"""

# =====================================================
# DISPATCH
# =====================================================
from .dispatch import (
    send_notification,
    send_notification_safely,
)

# =====================================================
# ASSIGNMENT
# =====================================================
from .assignment import (
    notify_requirement_assigned,
)

# =====================================================
# REVIEW
# =====================================================
from .review import (
    notify_submission_pending_review,
    notify_submission_status,
)

# =====================================================
# REMINDERS
# =====================================================
from .reminders import (
    send_compliance_reminders,
)

# =====================================================
# PUBLIC EXPORTS
# =====================================================
__all__ = [
    # Dispatch
    "send_notification",
    "send_notification_safely",

    # Assignment
    "notify_requirement_assigned",

    # Review
    "notify_submission_pending_review",
    "notify_submission_status",

    # Reminders
    "send_compliance_reminders",
]
