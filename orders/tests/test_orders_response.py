from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from notifications.models import Notification
from orders.models import Order
from .helpers import create_custom_request, create_user_with_type


class OrderResponseTests(APITestCase):
    def setUp(self):
        self.artisan, self.artisan_token = create_user_with_type("artisan", "artisan")
        self.cust, self.cust_token = create_user_with_type("cust", "customer")
        self.other_cust, self.other_cust_token = create_user_with_type("other", "customer")
        self.order = create_custom_request(
            self.cust, self.artisan, status=Order.Status.OFFER_MADE, unit_price="80.00", note="Oak please"
        )
        self.url = reverse("order-response", args=[self.order.id])

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_accept_offer(self):
        self.auth(self.cust_token)
        res = self.client.put(self.url, {"action": "accept"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "accepted")
        self.assertEqual(Decimal(res.data["unit_price"]), Decimal("80.00"))

        n = Notification.objects.get(recipient=self.artisan)
        self.assertEqual(n.message, "Customer accepted your price of $80.00 for 'Engraved Box'!")
        self.assertEqual(n.sender_role, "customer")
        self.assertFalse(Notification.objects.filter(recipient=self.cust).exists())

    def test_reject_offer(self):
        self.auth(self.cust_token)
        res = self.client.put(self.url, {"action": "reject"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "cancelled")
        n = Notification.objects.get(recipient=self.artisan)
        self.assertEqual(n.message, "Customer rejected the offer for 'Engraved Box'.")

    def test_negotiate_appends_note_and_reopens(self):
        self.auth(self.cust_token)
        res = self.client.put(self.url, {"action": "negotiate", "note": "Too expensive"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "pending")
        self.assertEqual(res.data["note"], "Oak please\n[Customer feedback]: Too expensive")

        n = Notification.objects.get(recipient=self.artisan)
        self.assertEqual(n.message, "Customer wants to negotiate on 'Engraved Box': Too expensive")

    def test_negotiate_without_note_400(self):
        self.auth(self.cust_token)
        res = self.client.put(self.url, {"action": "negotiate", "note": "   "}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.Status.OFFER_MADE)

    def test_unknown_action_400(self):
        self.auth(self.cust_token)
        res = self.client.put(self.url, {"action": "haggle"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("action", res.data["errors"])

    def test_respond_while_pending_409(self):
        pending = create_custom_request(self.cust, self.artisan)
        self.auth(self.cust_token)
        res = self.client.put(reverse("order-response", args=[pending.id]), {"action": "accept"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        pending.refresh_from_db()
        self.assertEqual(pending.status, Order.Status.PENDING)

    def test_other_customer_403(self):
        self.auth(self.other_cust_token)
        res = self.client.put(self.url, {"action": "accept"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.Status.OFFER_MADE)

    def test_artisan_cannot_respond_403(self):
        self.auth(self.artisan_token)
        res = self.client.put(self.url, {"action": "accept"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
