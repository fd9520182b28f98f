from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from notifications.models import Notification
from .helpers import create_user_with_type


class CustomRequestNegotiationFlowTests(APITestCase):
    """A custom request negotiated twice and then accepted."""

    def setUp(self):
        self.artisan, self.artisan_token = create_user_with_type("kevin", "artisan")
        self.cust, self.cust_token = create_user_with_type("andrey", "customer")

    def as_customer(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {self.cust_token.key}")

    def as_artisan(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {self.artisan_token.key}")

    def test_full_flow(self):
        self.as_customer()
        res = self.client.post(
            reverse("order-list"),
            {
                "artisan_id": self.artisan.id,
                "title": "Engraved Box",
                "note": "Walnut, initials on the lid",
                "delivery_date": "2026-12-01",
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        order_id = res.data["id"]
        self.assertEqual(res.data["kind"], "custom_request")
        self.assertEqual(res.data["status"], "pending")

        self.as_artisan()
        res = self.client.put(reverse("order-status", args=[order_id]), {"price": "120.00"}, format="json")
        self.assertEqual(res.data["status"], "offer_made")

        self.as_customer()
        res = self.client.put(
            reverse("order-response", args=[order_id]),
            {"action": "negotiate", "note": "Can you do 90?"},
            format="json",
        )
        self.assertEqual(res.data["status"], "pending")

        self.as_artisan()
        res = self.client.put(reverse("order-status", args=[order_id]), {"price": "100.00"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(Decimal(res.data["unit_price"]), Decimal("100.00"))

        self.as_customer()
        res = self.client.put(reverse("order-response", args=[order_id]), {"action": "accept"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "accepted")
        self.assertEqual(Decimal(res.data["total_price"]), Decimal("100.00"))
        self.assertEqual(
            res.data["note"],
            "Walnut, initials on the lid\n[Customer feedback]: Can you do 90?",
        )

        # Accepted is final for both parties.
        res = self.client.put(reverse("order-cancel", args=[order_id]), format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.as_artisan()
        res = self.client.put(reverse("order-status", args=[order_id]), {"price": "150.00"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)

        to_artisan = list(
            Notification.objects.filter(recipient=self.artisan).order_by("id").values_list("message", flat=True)
        )
        self.assertEqual(
            to_artisan,
            [
                "New custom request: Engraved Box",
                "Customer wants to negotiate on 'Engraved Box': Can you do 90?",
                "Customer accepted your price of $100.00 for 'Engraved Box'!",
            ],
        )
        to_customer = list(
            Notification.objects.filter(recipient=self.cust).order_by("id").values_list("message", flat=True)
        )
        self.assertEqual(
            to_customer,
            [
                "Artisan sent an offer of $120.00 for 'Engraved Box'.",
                "Artisan sent an offer of $100.00 for 'Engraved Box'.",
            ],
        )
