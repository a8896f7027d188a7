"""
compliance/services/snapshots.py

Read-only fact snapshots of requirements, built fresh from the ORM
on every call. The status engine and the aggregates only ever see
these frozen objects, never model instances.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from compliance.models import Requirement, RequirementAssignment


# ============================================================
# FACTS
# ============================================================

@dataclass(frozen=True)
class AssignmentFact:
    id: int
    requirement_id: int
    requirement_name: str
    compliance_status: str
    deadline: Optional[date] = None
    user_id: Optional[int] = None
    pic_name: str = ""
    pic_email: str = ""

    @property
    def has_recipient(self) -> bool:
        return bool(self.user_id and self.pic_email)


@dataclass(frozen=True)
class UploadFact:
    id: int
    requirement_id: int
    approval_status: str
    assignment_id: Optional[int] = None
    uploaded_at: Optional[datetime] = None


@dataclass(frozen=True)
class RequirementSnapshot:
    id: int
    name: str
    agency_id: int
    agency_code: str
    agency_name: str
    deadline: Optional[date] = None
    category: str = ""
    assignments: Tuple[AssignmentFact, ...] = field(default_factory=tuple)
    uploads: Tuple[UploadFact, ...] = field(default_factory=tuple)


# ============================================================
# MODEL -> FACT
# ============================================================

def assignment_fact(assignment, requirement=None) -> AssignmentFact:
    requirement = requirement or assignment.requirement
    user = assignment.user

    return AssignmentFact(
        id=assignment.id,
        requirement_id=requirement.id,
        requirement_name=requirement.name,
        compliance_status=assignment.compliance_status,
        deadline=assignment.deadline,
        user_id=user.id if user else None,
        pic_name=user.display_name if user else "",
        pic_email=(user.email or "").strip() if user else "",
    )


def upload_fact(upload) -> UploadFact:
    return UploadFact(
        id=upload.id,
        requirement_id=upload.requirement_id,
        approval_status=upload.approval_status,
        assignment_id=upload.assignment_id,
        uploaded_at=upload.uploaded_at,
    )


def requirement_snapshot(requirement) -> RequirementSnapshot:
    """
    Expects `assignments__user` and `uploads` to be prefetched
    when called in a loop.
    """
    agency = requirement.agency

    assignments = sorted(requirement.assignments.all(), key=lambda a: a.id)
    uploads = sorted(requirement.uploads.all(), key=lambda u: u.id)

    return RequirementSnapshot(
        id=requirement.id,
        name=requirement.name,
        agency_id=agency.id,
        agency_code=agency.code,
        agency_name=agency.name,
        deadline=requirement.deadline,
        category=requirement.category,
        assignments=tuple(assignment_fact(a, requirement) for a in assignments),
        uploads=tuple(upload_fact(u) for u in uploads),
    )


# ============================================================
# QUERIES
# ============================================================

def load_requirement_snapshots(queryset=None):
    """
    Load every active requirement of an active agency, with its
    assignments and uploads. Retired records drop out of every
    aggregate, matching the active-agency count on the dashboard.

    Database errors are not caught here: a failed read must
    abort the caller instead of producing partial aggregates.
    """
    if queryset is None:
        queryset = Requirement.objects.all()

    queryset = (
        queryset
        .filter(is_active=True, agency__is_active=True)
        .select_related("agency")
        .prefetch_related("assignments__user", "uploads")
        .order_by("id")
    )

    return [requirement_snapshot(r) for r in queryset]


def load_due_assignments(target_date):
    """
    Assignments whose own deadline falls on `target_date`, that are
    not yet approved and whose requirement and agency are active.
    """
    assignments = (
        RequirementAssignment.objects
        .select_related("requirement", "user")
        .filter(
            deadline=target_date,
            requirement__is_active=True,
            requirement__agency__is_active=True,
        )
        .exclude(compliance_status=RequirementAssignment.ComplianceStatus.APPROVED)
        .order_by("id")
    )

    return [assignment_fact(a) for a in assignments]
