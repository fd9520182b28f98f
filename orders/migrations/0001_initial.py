from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("portfolio_order", "portfolio_order"), ("custom_request", "custom_request")], max_length=20)),
                ("catalog_item_id", models.PositiveBigIntegerField(blank=True, null=True)),
                ("title", models.CharField(max_length=200)),
                ("cover_image", models.CharField(blank=True, default="", max_length=500)),
                ("quantity", models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ("unit_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ("total_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ("note", models.TextField(blank=True, default="")),
                ("status", models.CharField(choices=[("pending", "pending"), ("offer_made", "offer_made"), ("accepted", "accepted"), ("completed", "completed"), ("cancelled", "cancelled")], default="pending", max_length=20)),
                ("delivery_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("artisan", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="orders_received", to=settings.AUTH_USER_MODEL)),
                ("customer", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="orders_placed", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ("-created_at", "-id"),
                "indexes": [
                    models.Index(fields=["customer", "status"], name="order_customer_status_idx"),
                    models.Index(fields=["artisan", "status"], name="order_artisan_status_idx"),
                ],
            },
        ),
    ]
