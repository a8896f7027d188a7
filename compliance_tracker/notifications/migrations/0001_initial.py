import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("compliance", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ReminderDelivery",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("offset_days", models.PositiveSmallIntegerField(help_text="Days before the deadline (30, 14, 7, 1)")),
                ("target_date", models.DateField(help_text="Deadline the reminder was sent for")),
                ("recipient_email", models.EmailField(blank=True, max_length=254)),
                ("sent_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("assignment", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="reminder_deliveries", to="compliance.requirementassignment")),
            ],
            options={
                "ordering": ["-sent_at"],
                "verbose_name_plural": "reminder deliveries",
            },
        ),
        migrations.AddConstraint(
            model_name="reminderdelivery",
            constraint=models.UniqueConstraint(fields=("assignment", "offset_days", "target_date"), name="unique_reminder_per_offset_and_date"),
        ),
    ]
