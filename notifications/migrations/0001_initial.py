from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


ROLE_CHOICES = [("customer", "customer"), ("artisan", "artisan"), ("admin", "admin")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("recipient_role", models.CharField(choices=ROLE_CHOICES, max_length=20)),
                ("sender_role", models.CharField(choices=ROLE_CHOICES, max_length=20)),
                ("message", models.TextField()),
                ("type", models.CharField(choices=[("booking", "booking"), ("status_update", "status_update"), ("review", "review"), ("system_alert", "system_alert"), ("comment", "comment")], max_length=20)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications_received", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications_sent", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ("-created_at", "-id"),
                "indexes": [models.Index(fields=["recipient", "is_read"], name="notif_recipient_read_idx")],
            },
        ),
    ]
