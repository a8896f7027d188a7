from datetime import date

import pytest

pytestmark = pytest.mark.django_db


@pytest.fixture
def pic(make_user):
    return make_user(email="ana@example.com", employee_name="Ana Reyes")


def test_new_assignment_notifies_pic(make_requirement, make_assignment, pic, mailoutbox):
    make_assignment(make_requirement(name="AML report"), user=pic)

    [message] = mailoutbox
    assert message.to == ["ana@example.com"]
    assert message.subject == "New compliance requirement assigned"
    assert "AML report" in message.body


def test_deadline_change_notifies_pic(make_requirement, make_assignment, pic, mailoutbox):
    assignment = make_assignment(make_requirement(), user=pic)
    mailoutbox.clear()

    assignment.compliance_status = "SUBMITTED"
    assignment.save()
    assert mailoutbox == []

    assignment.deadline = date(2024, 7, 15)
    assignment.save()

    [message] = mailoutbox
    assert message.subject == "Compliance deadline updated"
    assert "July 15, 2024" in message.body


def test_assignment_without_email_sends_nothing(make_requirement, make_assignment,
                                                make_user, mailoutbox):
    make_assignment(make_requirement(), user=make_user(email=""))
    make_assignment(make_requirement(), user=None)

    assert mailoutbox == []


def test_new_upload_notifies_reviewers(make_requirement, make_upload, pic,
                                       specialist, mailoutbox):
    make_upload(make_requirement(name="AML report"), uploader=pic)

    [message] = mailoutbox
    assert message.to == ["specialist@example.com"]
    assert message.subject == "Submission pending review"
    assert "Ana Reyes" in message.body


def test_review_decision_notifies_uploader(make_requirement, make_upload, pic,
                                           specialist, mailoutbox):
    upload = make_upload(make_requirement(), uploader=pic)
    mailoutbox.clear()

    upload.mark_rejected(reviewer=specialist, remarks="Missing signature page")

    [message] = mailoutbox
    assert message.to == ["ana@example.com"]
    assert message.subject == "Submission rejected"
    assert "Missing signature page" in message.body

    mailoutbox.clear()
    upload.admin_remarks = "Edited remarks"
    upload.save()
    assert mailoutbox == []


def test_mail_failure_does_not_break_save(make_requirement, make_assignment, pic,
                                          monkeypatch):
    def broken_send_mail(**kwargs):
        raise ConnectionRefusedError("SMTP server unavailable")

    monkeypatch.setattr("notifications.services.dispatch.send_mail", broken_send_mail)

    assignment = make_assignment(make_requirement(), user=pic)

    assert assignment.pk is not None
