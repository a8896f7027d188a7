import pytest
from django.urls import reverse

pytestmark = pytest.mark.django_db


@pytest.fixture
def admin_client(client, make_user):
    user = make_user(role="super_admin", is_staff=True, is_superuser=True)
    client.force_login(user)
    return client


@pytest.mark.parametrize("url_name", [
    "admin:accounts_user_changelist",
    "admin:compliance_agency_changelist",
    "admin:compliance_requirement_changelist",
    "admin:compliance_requirementassignment_changelist",
    "admin:compliance_upload_changelist",
    "admin:notifications_reminderdelivery_changelist",
])
def test_changelists_render(admin_client, make_requirement, make_assignment, url_name):
    make_assignment(make_requirement())

    response = admin_client.get(reverse(url_name))

    assert response.status_code == 200


def test_approve_action_notifies_uploader(admin_client, make_requirement, make_upload,
                                          make_user, mailoutbox):
    pic = make_user(email="ana@example.com")
    upload = make_upload(make_requirement(), uploader=pic)
    mailoutbox.clear()

    admin_client.post(reverse("admin:compliance_upload_changelist"), {
        "action": "approve_selected",
        "_selected_action": [upload.pk],
    })

    upload.refresh_from_db()
    assert upload.approval_status == "APPROVED"
    assert [m.subject for m in mailoutbox] == ["Submission approved"]
