import pytest
from django.core.exceptions import ValidationError

from compliance.models import Agency

pytestmark = pytest.mark.django_db


def test_agency_code_is_normalised():
    agency = Agency.objects.create(code="  sec ", name="Securities and Exchange Commission")

    assert agency.code == "SEC"
    assert str(agency) == "SEC - Securities and Exchange Commission"


def test_upload_must_match_assignment_requirement(make_requirement, make_assignment,
                                                  make_upload):
    assignment = make_assignment(make_requirement(name="AML report"))
    upload = make_upload(make_requirement(name="Capital adequacy"))
    upload.assignment = assignment

    with pytest.raises(ValidationError) as excinfo:
        upload.full_clean()

    assert "assignment" in excinfo.value.message_dict


def test_review_records_reviewer_and_remarks(make_requirement, make_upload, specialist):
    upload = make_upload(make_requirement())

    upload.mark_approved(reviewer=specialist, remarks="Complete")
    upload.refresh_from_db()

    assert upload.approval_status == "APPROVED"
    assert upload.reviewed_by == specialist
    assert upload.admin_remarks == "Complete"
    assert upload.reviewed_at is not None
