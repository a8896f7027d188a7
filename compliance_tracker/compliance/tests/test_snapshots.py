from datetime import date

import pytest

from compliance.models import Agency
from compliance.services.snapshots import load_due_assignments, load_requirement_snapshots

pytestmark = pytest.mark.django_db


def test_snapshot_carries_assignments_and_uploads(make_requirement, make_assignment,
                                                  make_upload, make_user):
    pic = make_user(email="ana@example.com", employee_name="Ana Reyes")
    req = make_requirement(name="AML report", category="Reporting")
    make_assignment(req, user=pic, status="SUBMITTED")
    make_assignment(req, user=None)
    make_upload(req, status="PENDING")

    [snapshot] = load_requirement_snapshots()

    assert snapshot.name == "AML report"
    assert snapshot.agency_code == "BSP"
    assert snapshot.category == "Reporting"
    assert [a.compliance_status for a in snapshot.assignments] == ["SUBMITTED", "PENDING"]
    assert snapshot.assignments[0].pic_name == "Ana Reyes"
    assert snapshot.assignments[0].has_recipient
    assert not snapshot.assignments[1].has_recipient
    assert [u.approval_status for u in snapshot.uploads] == ["PENDING"]


def test_assignment_deadline_defaults_to_requirement(make_requirement, make_assignment):
    req = make_requirement(deadline=date(2024, 9, 30))
    assignment = make_assignment(req)
    override = make_assignment(req, deadline=date(2024, 9, 15))

    assert assignment.deadline == date(2024, 9, 30)
    assert override.deadline == date(2024, 9, 15)


def test_load_due_assignments_filters_date_and_approval(make_requirement, make_assignment):
    req = make_requirement(deadline=date(2024, 6, 8))
    due = make_assignment(req, status="REJECTED")
    make_assignment(req, status="APPROVED")
    make_assignment(req, deadline=date(2024, 6, 9))

    facts = load_due_assignments(date(2024, 6, 8))

    assert [f.id for f in facts] == [due.id]
    assert facts[0].requirement_name == req.name


def test_retired_requirements_and_agencies_are_not_loaded(make_requirement):
    live = make_requirement(name="AML report")
    make_requirement(name="Old circular", is_active=False)
    retired_agency = Agency.objects.create(code="old", name="Dissolved Board", is_active=False)
    make_requirement(name="Board filing", agency=retired_agency)

    assert [s.id for s in load_requirement_snapshots()] == [live.id]


def test_due_assignments_skip_retired_requirements_and_agencies(make_requirement,
                                                                make_assignment):
    due = make_assignment(make_requirement())
    make_assignment(make_requirement(is_active=False))
    retired_agency = Agency.objects.create(code="old", name="Dissolved Board", is_active=False)
    make_assignment(make_requirement(agency=retired_agency))

    assert [f.id for f in load_due_assignments(date(2024, 6, 8))] == [due.id]
