from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from notifications.models import Notification
from orders.models import Order
from .helpers import add_portfolio_item, create_user_with_type


class OrderCreateTests(APITestCase):
    def setUp(self):
        self.url = reverse("order-list")

        self.artisan, self.artisan_token = create_user_with_type("artisan", "artisan")
        self.cust, self.cust_token = create_user_with_type("cust", "customer")
        self.item = add_portfolio_item(self.artisan, price="50.00")

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_portfolio_order_priced_from_catalog_201(self):
        self.auth(self.cust_token)
        payload = {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id, "quantity": 3}
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        data = res.data
        self.assertIn("id", data)
        self.assertEqual(data["customer"], self.cust.id)
        self.assertEqual(data["artisan"], self.artisan.id)
        self.assertEqual(data["kind"], "portfolio_order")
        self.assertEqual(data["catalog_item_id"], self.item.id)
        self.assertEqual(data["title"], "Walnut Serving Board")
        self.assertEqual(data["cover_image"], "/media/board.jpg")
        self.assertEqual(data["quantity"], 3)
        self.assertEqual(Decimal(data["unit_price"]), Decimal("50.00"))
        self.assertEqual(Decimal(data["total_price"]), Decimal("150.00"))
        self.assertEqual(data["status"], "pending")

    def test_client_supplied_price_is_ignored(self):
        self.auth(self.cust_token)
        payload = {
            "artisan_id": self.artisan.id,
            "catalog_item_id": self.item.id,
            "quantity": 2,
            "price": "1.00",
            "unit_price": "1.00",
            "total_price": "2.00",
        }
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        order = Order.objects.get(id=res.data["id"])
        self.assertEqual(order.unit_price, Decimal("50.00"))
        self.assertEqual(order.total_price, Decimal("100.00"))

    def test_price_is_the_current_catalog_price(self):
        self.item.price = Decimal("65.00")
        self.item.save()
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Decimal(res.data["unit_price"]), Decimal("65.00"))
        self.assertEqual(res.data["quantity"], 1)

    def test_portfolio_order_notifies_artisan_once(self):
        self.auth(self.cust_token)
        self.client.post(
            self.url,
            {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id, "quantity": 3},
            format="json",
        )
        notes = Notification.objects.filter(recipient=self.artisan)
        self.assertEqual(notes.count(), 1)
        n = notes.get()
        self.assertEqual(n.type, "booking")
        self.assertEqual(n.sender_id, self.cust.id)
        self.assertEqual(n.recipient_role, "artisan")
        self.assertEqual(n.sender_role, "customer")
        self.assertIn("3x Walnut Serving Board", n.message)
        self.assertFalse(Notification.objects.filter(recipient=self.cust).exists())

    def test_snapshot_survives_catalog_changes(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id}, format="json"
        )
        self.item.title = "Renamed"
        self.item.save()
        self.item.delete()
        order = Order.objects.get(id=res.data["id"])
        self.assertEqual(order.title, "Walnut Serving Board")
        self.assertEqual(order.catalog_item_id, res.data["catalog_item_id"])

    def test_custom_request_starts_unpriced(self):
        self.auth(self.cust_token)
        payload = {
            "artisan_id": self.artisan.id,
            "title": "Engraved Box",
            "delivery_date": "2026-12-01",
            "reference_image": "/media/ref.png",
        }
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["kind"], "custom_request")
        self.assertIsNone(res.data["catalog_item_id"])
        self.assertEqual(res.data["cover_image"], "/media/ref.png")
        self.assertEqual(res.data["delivery_date"], "2026-12-01")
        self.assertEqual(Decimal(res.data["unit_price"]), Decimal("0"))
        self.assertEqual(Decimal(res.data["total_price"]), Decimal("0"))
        self.assertEqual(res.data["status"], "pending")

        n = Notification.objects.get(recipient=self.artisan)
        self.assertEqual(n.message, "New custom request: Engraved Box")

    def test_custom_request_missing_title_400(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "delivery_date": "2026-12-01"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("message", res.data)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(Notification.objects.exists())

    def test_custom_request_missing_delivery_date_400(self):
        self.auth(self.cust_token)
        res = self.client.post(self.url, {"artisan_id": self.artisan.id, "title": "Box"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Order.objects.exists())

    def test_quantity_below_one_400(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url,
            {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id, "quantity": 0},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_quantity_above_limit_400(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url,
            {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id, "quantity": Order.MAX_QUANTITY + 1},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("quantity", res.data["errors"])
        self.assertEqual(Order.objects.count(), 0)

    def test_total_too_large_400_creates_nothing(self):
        pricey = add_portfolio_item(self.artisan, title="Gold Throne", price="99999999.99")
        self.auth(self.cust_token)
        res = self.client.post(
            self.url,
            {"artisan_id": self.artisan.id, "catalog_item_id": pricey.id, "quantity": 1000},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data, {"message": "Order total is too large."})
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(Notification.objects.count(), 0)

    def test_missing_artisan_id_400(self):
        self.auth(self.cust_token)
        res = self.client.post(self.url, {"catalog_item_id": self.item.id}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_artisan_404(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": 999999, "catalog_item_id": self.item.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["message"], "Artisan not found.")

    def test_customer_is_not_an_artisan_404(self):
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": self.cust.id, "title": "Box", "delivery_date": "2026-12-01"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_catalog_item_of_other_artisan_404(self):
        other, _ = create_user_with_type("other_artisan", "artisan")
        foreign_item = add_portfolio_item(other, title="Vase")
        self.auth(self.cust_token)
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "catalog_item_id": foreign_item.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Order.objects.exists())

    def test_unauthenticated_returns_401(self):
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_artisan_cannot_order_403(self):
        self.auth(self.artisan_token)
        res = self.client.post(
            self.url, {"artisan_id": self.artisan.id, "catalog_item_id": self.item.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
