"""
notifications/scheduler.py

In-process daily trigger for the compliance reminder command.

One BackgroundScheduler per process, guarded by a module global so
that repeated `ready()` calls never register the job twice. Several
serving processes each run their own copy; the reminder ledger is
what keeps them from emailing twice.
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler
from django.conf import settings
from django.core.management import call_command
from django.utils import timezone

logger = logging.getLogger(__name__)

JOB_ID = "send_compliance_reminders"

_scheduler = None


def reminder_hour():
    return int(getattr(settings, "COMPLIANCE_REMINDER_HOUR", 8))


def start_scheduler():
    """
    Returns the running scheduler, or None when ENABLE_SCHEDULER
    is off.
    """
    global _scheduler

    if not getattr(settings, "ENABLE_SCHEDULER", False):
        logger.info("Compliance reminder scheduler disabled (ENABLE_SCHEDULER=False)")
        return None

    if _scheduler is not None:
        return _scheduler

    hour = reminder_hour()
    scheduler = BackgroundScheduler(timezone=settings.TIME_ZONE)

    scheduler.add_job(
        run_compliance_reminders,
        trigger="cron",
        hour=hour,
        minute=0,
        id=JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    _scheduler = scheduler

    logger.info(
        "Compliance reminders scheduled daily at %02d:00 %s",
        hour, settings.TIME_ZONE,
    )
    return _scheduler


def stop_scheduler():
    global _scheduler

    if _scheduler is None:
        return

    _scheduler.shutdown(wait=False)
    _scheduler = None
    logger.info("Compliance reminder scheduler stopped")


def run_compliance_reminders():
    """Job body: the command owns the reminder logic."""
    logger.info(
        "Scheduled compliance reminder run at %s",
        f"{timezone.localtime():%Y-%m-%d %H:%M:%S}",
    )
    call_command("send_compliance_reminders")
