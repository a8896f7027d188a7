from datetime import date
import itertools

from compliance.services.snapshots import (
    AssignmentFact,
    RequirementSnapshot,
    UploadFact,
)

_ids = itertools.count(1)


def assignment(status="PENDING", deadline=date(2024, 6, 8), pic_name="", pic_email="",
               user_id=None, requirement_id=0, requirement_name="Requirement"):
    return AssignmentFact(
        id=next(_ids),
        requirement_id=requirement_id,
        requirement_name=requirement_name,
        compliance_status=status,
        deadline=deadline,
        user_id=user_id,
        pic_name=pic_name,
        pic_email=pic_email,
    )


def upload(status="PENDING"):
    return UploadFact(id=next(_ids), requirement_id=0, approval_status=status)


def requirement(deadline=date(2024, 6, 8), statuses=(), uploads=(), name=None,
                agency_id=1, agency_code="BSP", agency_name="Bangko Sentral",
                assignments=None):
    req_id = next(_ids)
    if assignments is None:
        assignments = [assignment(s, deadline=deadline) for s in statuses]

    return RequirementSnapshot(
        id=req_id,
        name=name or f"Requirement {req_id}",
        agency_id=agency_id,
        agency_code=agency_code,
        agency_name=agency_name,
        deadline=deadline,
        assignments=tuple(assignments),
        uploads=tuple(upload(s) for s in uploads),
    )
