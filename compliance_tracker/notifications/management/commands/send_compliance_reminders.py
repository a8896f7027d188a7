"""
notifications/management/commands/send_compliance_reminders.py

Scheduled command (runs once per day).

Emails PICs whose assignments are due in 30, 14, 7 or 1 day(s)
and are not yet approved. Re-running on the same day does not
resend unless --force is given.
"""

from datetime import datetime

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from notifications.services.reminders import send_compliance_reminders


class Command(BaseCommand):
    help = "Send compliance deadline reminders to PICs"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            help="Evaluate as if today were YYYY-MM-DD (default: local today)",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Send reminders even if already sent today",
        )

    def handle(self, *args, **options):
        today = self._parse_date(options.get("date"))
        now = timezone.now()

        self.stdout.write(
            self.style.NOTICE(
                f"[{now:%Y-%m-%d %H:%M:%S}] Starting compliance reminders for {today}"
            )
        )

        result = send_compliance_reminders(
            today,
            use_ledger=False if options["force"] else None,
        )

        summary = (
            f"[{now:%Y-%m-%d %H:%M:%S}] Completed: "
            f"{result.sent} sent, "
            f"{result.skipped} skipped (no recipient), "
            f"{result.duplicates} already sent, "
            f"{result.failed} failed"
        )

        if result.failed:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))

    def _parse_date(self, value):
        if not value:
            return timezone.localdate()
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            raise CommandError(f"Invalid --date '{value}', expected YYYY-MM-DD")
