import os

from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"
    verbose_name = "Compliance notifications"

    def ready(self):
        # Receivers for assignment and upload notices
        from . import signals  # noqa: F401

        if not self.is_reloader_child():
            return

        from .scheduler import start_scheduler
        start_scheduler()

    @staticmethod
    def is_reloader_child():
        """
        runserver imports the project twice (watcher + server).
        Only the server process, flagged RUN_MAIN=true, owns the
        reminder job.
        """
        return os.environ.get("RUN_MAIN") == "true"
