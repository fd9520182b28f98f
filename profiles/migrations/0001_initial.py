from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("customer", "customer"), ("artisan", "artisan"), ("admin", "admin")], max_length=20)),
                ("craft_type", models.CharField(blank=True, choices=[("tailoring", "Tailoring"), ("carpentry", "Carpentry"), ("embroidery", "Embroidery"), ("pottery", "Pottery"), ("blacksmith", "Blacksmith"), ("painter", "Painter"), ("other", "Other")], default="", max_length=20)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("tel", models.CharField(blank=True, default="", max_length=50)),
                ("description", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
