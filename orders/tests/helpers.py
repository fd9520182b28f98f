from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from rest_framework.authtoken.models import Token

from orders.models import Order
from portfolio.models import PortfolioItem
from profiles.models import Profile

User = get_user_model()


def create_user_with_type(username: str, t: str):
    user = User.objects.create_user(username, f"{username}@example.com", "pass1234")
    Profile.objects.create(user=user, type=t)
    token = Token.objects.create(user=user)
    return user, token


def add_portfolio_item(artisan, title="Walnut Serving Board", price="50.00", cover_image="/media/board.jpg"):
    return PortfolioItem.objects.create(
        artisan=artisan, title=title, price=price, cover_image=cover_image
    )


def create_portfolio_order(customer, artisan, item, quantity=1, status=Order.Status.PENDING):
    unit = Decimal(str(item.price))
    return Order.objects.create(
        customer=customer,
        artisan=artisan,
        kind=Order.Kind.PORTFOLIO_ORDER,
        catalog_item_id=item.id,
        title=item.title,
        cover_image=item.cover_image,
        quantity=quantity,
        unit_price=unit,
        total_price=unit * quantity,
        status=status,
    )


def create_custom_request(customer, artisan, title="Engraved Box", status=Order.Status.PENDING,
                          unit_price="0.00", quantity=1, note=""):
    unit = Decimal(unit_price)
    return Order.objects.create(
        customer=customer,
        artisan=artisan,
        kind=Order.Kind.CUSTOM_REQUEST,
        title=title,
        quantity=quantity,
        unit_price=unit,
        total_price=unit * quantity,
        note=note,
        delivery_date=date(2026, 12, 1),
        status=status,
    )
