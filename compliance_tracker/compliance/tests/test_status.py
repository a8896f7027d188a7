import pytest

from compliance.services.status import (
    CalendarStatus,
    SummaryStatus,
    calendar_status,
    requirement_status_detail,
    summary_status,
)
from compliance.tests.builders import assignment, requirement


ASSIGNMENT_STATUSES = ["PENDING", "SUBMITTED", "APPROVED", "REJECTED", "OVERDUE"]


# ============================================================
# SUMMARY STATUS
# ============================================================

class TestSummaryStatus:

    @pytest.mark.parametrize("statuses", [(), ("APPROVED",), ("OVERDUE", "PENDING")])
    def test_no_deadline_is_not_applicable(self, statuses):
        req = requirement(deadline=None, statuses=statuses, uploads=("PENDING",))
        assert summary_status(req) == SummaryStatus.NA

    def test_no_assignments_is_pending(self):
        assert summary_status(requirement()) == SummaryStatus.PENDING

    @pytest.mark.parametrize("other", ASSIGNMENT_STATUSES)
    def test_any_overdue_wins(self, other):
        req = requirement(statuses=("APPROVED", other, "OVERDUE"))
        assert summary_status(req) == SummaryStatus.OVERDUE

    def test_all_approved_is_compliant(self):
        req = requirement(statuses=("APPROVED", "APPROVED"))
        assert summary_status(req) == SummaryStatus.COMPLIANT

    @pytest.mark.parametrize("other", ["PENDING", "SUBMITTED", "REJECTED"])
    def test_partially_approved_is_pending(self, other):
        req = requirement(statuses=("APPROVED", other))
        assert summary_status(req) == SummaryStatus.PENDING

    def test_pending_upload_does_not_affect_summary(self):
        req = requirement(statuses=("APPROVED",), uploads=("PENDING",))
        assert summary_status(req) == SummaryStatus.COMPLIANT


# ============================================================
# CALENDAR STATUS
# ============================================================

class TestCalendarStatus:

    def test_no_deadline_is_not_applicable(self):
        req = requirement(deadline=None, uploads=("PENDING",))
        assert calendar_status(req) == CalendarStatus.NA

    @pytest.mark.parametrize("statuses", [(), ("OVERDUE",), ("APPROVED",), ("PENDING",)])
    def test_pending_upload_takes_precedence(self, statuses):
        req = requirement(statuses=statuses, uploads=("APPROVED", "PENDING"))
        assert calendar_status(req) == CalendarStatus.FOR_APPROVAL

    def test_reviewed_uploads_fall_through(self):
        req = requirement(statuses=("OVERDUE",), uploads=("APPROVED", "REJECTED"))
        assert calendar_status(req) == CalendarStatus.OVERDUE

    def test_no_assignments_is_pending(self):
        assert calendar_status(requirement()) == CalendarStatus.PENDING

    def test_all_approved_is_complied(self):
        req = requirement(statuses=("APPROVED",))
        assert calendar_status(req) == CalendarStatus.COMPLIED

    def test_mixed_is_pending(self):
        req = requirement(statuses=("APPROVED", "SUBMITTED"))
        assert calendar_status(req) == CalendarStatus.PENDING


@pytest.mark.parametrize("statuses", [
    ("PENDING",), ("APPROVED",), ("OVERDUE",), ("APPROVED", "REJECTED"), (),
])
def test_variants_agree_without_pending_uploads(statuses):
    req = requirement(statuses=statuses, uploads=("REJECTED",))
    mapping = {
        SummaryStatus.PENDING: CalendarStatus.PENDING,
        SummaryStatus.OVERDUE: CalendarStatus.OVERDUE,
        SummaryStatus.COMPLIANT: CalendarStatus.COMPLIED,
    }
    assert calendar_status(req) == mapping[summary_status(req)]


def test_status_detail_lists_distinct_pics():
    req = requirement(
        name="Annual filing",
        assignments=[
            assignment("APPROVED", pic_name="Ana"),
            assignment("PENDING", pic_name="Ben"),
            assignment("PENDING", pic_name="Ana"),
        ],
        uploads=("PENDING",),
    )

    detail = requirement_status_detail(req)

    assert detail == {
        "id": req.id,
        "name": "Annual filing",
        "agency": "BSP",
        "deadline": "2024-06-08",
        "status": "FOR_APPROVAL",
        "summary_status": "PENDING",
        "pic": "Ana, Ben",
    }
