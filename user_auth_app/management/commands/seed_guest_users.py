from decimal import Decimal

from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from rest_framework.authtoken.models import Token

from portfolio.models import PortfolioItem
from profiles.models import Profile

GUESTS = {
    "customer": {"username": "andrey", "password": "asdasd", "email": "andrey@example.com"},
    "artisan": {"username": "kevin", "password": "asdasd24", "email": "kevin@example.com"},
}

DEMO_ITEM = {"title": "Walnut Serving Board", "price": Decimal("50.00"), "cover_image": "/media/demo/board.jpg"}


class Command(BaseCommand):
    help = "Create or update demo guest users (one customer, one artisan with a portfolio item)."

    def handle(self, *args, **options):
        User = get_user_model()

        for role, cfg in GUESTS.items():
            u, created = User.objects.get_or_create(
                username=cfg["username"],
                defaults={"email": cfg["email"]},
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created user '{u.username}'"))
            else:
                self.stdout.write(f"User '{u.username}' already exists")

            u.set_password(cfg["password"])
            u.save(update_fields=["password"])

            prof, _ = Profile.objects.get_or_create(user=u, defaults={"type": role})
            if prof.type != role:
                prof.type = role
                prof.save(update_fields=["type"])

            if role == Profile.Type.ARTISAN:
                PortfolioItem.objects.get_or_create(
                    artisan=u,
                    title=DEMO_ITEM["title"],
                    defaults={"price": DEMO_ITEM["price"], "cover_image": DEMO_ITEM["cover_image"]},
                )

            token, _ = Token.objects.get_or_create(user=u)
            self.stdout.write(f"  -> type={role}, token={token.key}")

        self.stdout.write(self.style.SUCCESS("Guest users ready."))
