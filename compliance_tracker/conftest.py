import itertools
from datetime import date

import pytest

from compliance.models import Agency, Requirement, RequirementAssignment, Upload


_usernames = itertools.count(1)


@pytest.fixture
def make_user(django_user_model):
    def _make_user(email="pic@example.com", role="pic", employee_name="", **extra):
        return django_user_model.objects.create_user(
            username=extra.pop("username", f"user{next(_usernames)}"),
            email=email,
            password="secret-pass-123",
            role=role,
            employee_name=employee_name,
            **extra,
        )

    return _make_user


@pytest.fixture
def agency(db):
    return Agency.objects.create(code="bsp", name="Bangko Sentral ng Pilipinas")


@pytest.fixture
def make_requirement(agency):
    def _make_requirement(name="Quarterly report", deadline=date(2024, 6, 8), **extra):
        return Requirement.objects.create(
            agency=extra.pop("agency", agency),
            name=name,
            deadline=deadline,
            **extra,
        )

    return _make_requirement


@pytest.fixture
def make_assignment():
    def _make_assignment(requirement, user=None, status="PENDING", **extra):
        return RequirementAssignment.objects.create(
            requirement=requirement,
            user=user,
            compliance_status=status,
            **extra,
        )

    return _make_assignment


@pytest.fixture
def make_upload():
    def _make_upload(requirement, status="PENDING", **extra):
        return Upload.objects.create(
            requirement=requirement,
            approval_status=status,
            **extra,
        )

    return _make_upload


@pytest.fixture
def specialist(make_user):
    return make_user(
        email="specialist@example.com",
        role="specialist",
        employee_name="Sam Specialist",
        username="specialist",
    )
