import pytest

from notifications import scheduler


@pytest.fixture(autouse=True)
def reset_scheduler():
    yield
    scheduler.stop_scheduler()


def test_disabled_by_default(settings):
    settings.ENABLE_SCHEDULER = False

    assert scheduler.start_scheduler() is None


def test_registers_single_daily_job(settings):
    settings.ENABLE_SCHEDULER = True
    settings.COMPLIANCE_REMINDER_HOUR = 6

    started = scheduler.start_scheduler()
    again = scheduler.start_scheduler()

    assert again is started
    job = started.get_job(scheduler.JOB_ID)
    assert job.max_instances == 1
    assert job.coalesce is True
    assert str(job.trigger.fields[5]) == "6"


def test_job_runs_management_command(monkeypatch):
    calls = []
    monkeypatch.setattr(scheduler, "call_command", lambda name: calls.append(name))

    scheduler.run_compliance_reminders()

    assert calls == ["send_compliance_reminders"]
