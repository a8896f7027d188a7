"""
compliance/services/status.py

Status derivation for requirement snapshots.

Two rule variants, both evaluated top to bottom (first match wins):

summary_status  -> dashboard counters ("is the obligation met")
calendar_status -> calendar / detail views (surfaces pending review)

Every view that shows a requirement status calls one of these.
Nothing here reads the database or writes status back.
"""

from django.db import models

from compliance.models import RequirementAssignment, Upload


# ============================================================
# STATUS TAXONOMY
# ============================================================

class SummaryStatus(models.TextChoices):
    NA = "NA", "Not applicable"
    COMPLIANT = "COMPLIANT", "Compliant"
    PENDING = "PENDING", "Pending"
    OVERDUE = "OVERDUE", "Overdue"


class CalendarStatus(models.TextChoices):
    NA = "NA", "Not applicable"
    FOR_APPROVAL = "FOR_APPROVAL", "For approval"
    PENDING = "PENDING", "Pending"
    OVERDUE = "OVERDUE", "Overdue"
    COMPLIED = "COMPLIED", "Complied"


APPROVED = RequirementAssignment.ComplianceStatus.APPROVED
OVERDUE = RequirementAssignment.ComplianceStatus.OVERDUE
UPLOAD_PENDING = Upload.ApprovalStatus.PENDING


# ============================================================
# SHARED PREDICATES
# ============================================================

def _any_overdue(assignments):
    return any(a.compliance_status == OVERDUE for a in assignments)


def _all_approved(assignments):
    return all(a.compliance_status == APPROVED for a in assignments)


def has_pending_upload(requirement):
    return any(u.approval_status == UPLOAD_PENDING for u in requirement.uploads)


# ============================================================
# RULE VARIANTS
# ============================================================

def summary_status(requirement):
    if requirement.deadline is None:
        return SummaryStatus.NA

    assignments = requirement.assignments

    if not assignments:
        return SummaryStatus.PENDING

    if _any_overdue(assignments):
        return SummaryStatus.OVERDUE

    if _all_approved(assignments):
        return SummaryStatus.COMPLIANT

    return SummaryStatus.PENDING


def calendar_status(requirement):
    """
    Same as summary_status, except that an upload awaiting review
    takes precedence over every assignment-derived status.
    """
    if requirement.deadline is None:
        return CalendarStatus.NA

    if has_pending_upload(requirement):
        return CalendarStatus.FOR_APPROVAL

    assignments = requirement.assignments

    if not assignments:
        return CalendarStatus.PENDING

    if _any_overdue(assignments):
        return CalendarStatus.OVERDUE

    if _all_approved(assignments):
        return CalendarStatus.COMPLIED

    return CalendarStatus.PENDING


# ============================================================
# DETAIL
# ============================================================

def pic_names(requirement):
    """Distinct assignee names, in assignment order."""
    names = []
    for assignment in requirement.assignments:
        name = assignment.pic_name
        if name and name not in names:
            names.append(name)
    return names


def requirement_status_detail(requirement):
    deadline = requirement.deadline

    return {
        "id": requirement.id,
        "name": requirement.name,
        "agency": requirement.agency_code,
        "deadline": deadline.isoformat() if deadline else None,
        "status": calendar_status(requirement).value,
        "summary_status": summary_status(requirement).value,
        "pic": ", ".join(pic_names(requirement)),
    }
