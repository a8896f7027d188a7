from notifications.services.dispatch import send_notification_safely


ASSIGNMENT_SUBJECTS = {
    "assigned": "New compliance requirement assigned",
    "updated": "Compliance deadline updated",
}


# ============================================================
# REQUIREMENT ASSIGNED / DEADLINE UPDATED (SPECIALIST → PIC)
# ============================================================

def notify_requirement_assigned(*, assignment, context="assigned"):
    """
    Email the PIC when a requirement is assigned to them
    (context="assigned") or its deadline moves (context="updated").

    Returns True only if an email was sent.
    """
    if context not in ASSIGNMENT_SUBJECTS:
        raise ValueError(f"Unknown assignment notice context: {context!r}")

    user = assignment.user
    if not user or not user.email:
        return False

    return send_notification_safely(
        to_email=user.email,
        subject=ASSIGNMENT_SUBJECTS[context],
        template="emails/requirement_deadline.html",
        context={
            "context": context,
            "recipient_name": user.display_name,
            "requirement_name": assignment.requirement.name,
            "deadline": assignment.deadline,
        },
    )
