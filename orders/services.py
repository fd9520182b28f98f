"""
Order negotiation service.

Owns every write to an order's status and prices: creation from a portfolio
item or as a custom request, the artisan's offer/status updates, and the
customer's accept/reject/negotiate/cancel responses. Each status change is a
single conditional UPDATE on the expected current status, so two concurrent
transitions on one order can never both succeed. The counter-party is
notified only after the write has committed.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from common.exceptions import Forbidden, InvalidInput, InvalidState, NotFound
from notifications.models import Notification
from notifications.recipients import Recipient
from notifications.sink import NotificationSink
from orders.models import Order
from orders.transitions import (
    ARTISAN_STATUS_ACTIONS,
    CUSTOMER_RESPONSE_ACTIONS,
    Action,
    Transition,
    get_transition,
)
from portfolio.catalog import CatalogLookup
from profiles.models import Profile
from user_auth_app.actors import Actor

logger = logging.getLogger(__name__)

User = get_user_model()

CENT = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT)


def _total(unit_price: Decimal, quantity: int) -> Decimal:
    total = _money(unit_price * quantity)
    if total > Order.MAX_TOTAL:
        raise InvalidInput("Order total is too large.")
    return total


def _append_note(existing: str, addition: str) -> str:
    entry = f"[Customer feedback]: {addition}"
    return f"{existing}\n{entry}" if existing else entry


class OrderService:
    """Creates orders and drives them through the negotiation state machine."""

    def __init__(
        self,
        catalog: CatalogLookup | None = None,
        notifier: NotificationSink | None = None,
    ):
        self.catalog = catalog or CatalogLookup()
        self.notifier = notifier or NotificationSink()

    # ------------------------------------------------------------------ queries

    def list_orders(self, actor: Actor, role: str | None = None, status: str | None = None) -> QuerySet:
        """Orders the actor takes part in, newest first.

        `role` selects the side (customer/artisan) and must be the actor's own;
        admins see every order.
        """
        if status is not None and status not in Order.Status.values:
            raise InvalidInput(f"Unknown status '{status}'.")

        qs = Order.objects.select_related("customer", "artisan")
        if not (actor.is_admin and role is None):
            role = role or actor.role
            if role != actor.role or actor.is_admin:
                raise Forbidden(f"You cannot list orders as {role}.")
            side = "customer_id" if actor.is_customer else "artisan_id"
            qs = qs.filter(**{side: actor.id})

        if status is not None:
            qs = qs.filter(status=status)
        return qs.order_by("-created_at", "-id")

    def get_order(self, actor: Actor, order_id: int) -> Order:
        """Return one order visible to the actor (either party, or an admin)."""
        order = self._load(order_id)
        if not actor.is_admin and actor.id not in (order.customer_id, order.artisan_id):
            raise Forbidden("You are not a party to this order.")
        return order

    # ----------------------------------------------------------------- creation

    def create_order(
        self,
        actor: Actor,
        *,
        artisan_id: int,
        catalog_item_id: int | None = None,
        quantity: int = 1,
        note: str = "",
        title: str = "",
        delivery_date: date | None = None,
        reference_image: str = "",
    ) -> Order:
        """Place a portfolio order or raise a custom request.

        Portfolio orders are priced from the current catalog price; any price
        sent by the client is never consulted. Custom requests start unpriced.
        """
        if not actor.is_customer:
            raise Forbidden("Only customers can place orders.")
        if not User.objects.filter(id=artisan_id, profile__type=Profile.Type.ARTISAN).exists():
            raise NotFound("Artisan not found.")
        if quantity is None:
            quantity = 1
        if quantity < 1:
            raise InvalidInput("Quantity must be at least 1.")
        if quantity > Order.MAX_QUANTITY:
            raise InvalidInput(f"Quantity must be at most {Order.MAX_QUANTITY}.")

        fields = {
            "customer_id": actor.id,
            "artisan_id": artisan_id,
            "quantity": quantity,
            "note": note or "",
            "delivery_date": delivery_date,
            "status": Order.Status.PENDING,
        }

        if catalog_item_id is not None:
            item = self.catalog.get_item(artisan_id, catalog_item_id)
            unit_price = _money(item.price)
            fields.update(
                kind=Order.Kind.PORTFOLIO_ORDER,
                catalog_item_id=item.item_id,
                title=item.title,
                cover_image=item.cover_image,
                unit_price=unit_price,
                total_price=_total(unit_price, quantity),
            )
            message = f"New order: {quantity}x {item.title}"
        else:
            title = (title or "").strip()
            if not title:
                raise InvalidInput("Title is required for a custom request.")
            if delivery_date is None:
                raise InvalidInput("Delivery date is required for a custom request.")
            fields.update(
                kind=Order.Kind.CUSTOM_REQUEST,
                catalog_item_id=None,
                title=title,
                cover_image=reference_image or "",
                unit_price=Decimal("0.00"),
                total_price=Decimal("0.00"),
            )
            message = f"New custom request: {title}"

        with transaction.atomic():
            order = Order.objects.create(**fields)

        logger.info(
            "order_created",
            extra={"order_id": order.id, "actor": str(actor), "status": order.status},
        )
        self.notifier.send(
            recipient=Recipient.artisan(order.artisan_id),
            sender=Recipient.customer(actor.id),
            message=message,
            type=Notification.Type.BOOKING,
            order_id=order.id,
        )
        return order

    # -------------------------------------------------------------- transitions

    def artisan_update(
        self,
        actor: Actor,
        order_id: int,
        status: str | None = None,
        price: Decimal | None = None,
    ) -> Order:
        """Artisan side: make an offer on a custom request, or set a status."""
        order = self._load(order_id)
        self._authorize(order, actor, Profile.Type.ARTISAN)

        if price is not None and status is not None:
            raise InvalidInput("Send either a status or a price, not both.")

        if price is not None:
            if not order.is_custom_request:
                raise InvalidInput("A price can only be set on custom requests.")
            price = _money(price)
            if price <= 0:
                raise InvalidInput("Price must be greater than 0.")
            if price > Order.MAX_UNIT_PRICE:
                raise InvalidInput("Price is too large.")
            total = _total(price, order.quantity)
            transition = get_transition(Action.MAKE_OFFER)
            self._ensure_allowed(order, actor, transition)
            changes = {"unit_price": price, "total_price": total}
            return self._apply(order, actor, transition, changes, price=price)

        if status is None:
            raise InvalidInput("Provide a status or a price.")
        action = ARTISAN_STATUS_ACTIONS.get(status)
        if action is None:
            allowed = ", ".join(sorted(ARTISAN_STATUS_ACTIONS))
            raise InvalidInput(f"Status must be one of: {allowed}.")
        transition = get_transition(action)
        self._ensure_allowed(order, actor, transition)
        return self._apply(order, actor, transition)

    def customer_respond(self, actor: Actor, order_id: int, action: str, note: str | None = None) -> Order:
        """Customer side: accept, reject or negotiate the artisan's offer."""
        order = self._load(order_id)
        self._authorize(order, actor, Profile.Type.CUSTOMER)

        resolved = CUSTOMER_RESPONSE_ACTIONS.get(action)
        if resolved is None:
            raise InvalidInput("Action must be one of: accept, reject, negotiate.")
        note = (note or "").strip()
        if resolved == Action.NEGOTIATE and not note:
            raise InvalidInput("A note is required to negotiate.")

        transition = get_transition(resolved)
        self._ensure_allowed(order, actor, transition)
        changes = {}
        if resolved == Action.NEGOTIATE:
            changes["note"] = _append_note(order.note, note)
        return self._apply(order, actor, transition, changes, note=note)

    def customer_cancel(self, actor: Actor, order_id: int) -> Order:
        """Customer side: withdraw an order that has not been accepted yet."""
        order = self._load(order_id)
        self._authorize(order, actor, Profile.Type.CUSTOMER)
        transition = get_transition(Action.CUSTOMER_CANCEL)
        self._ensure_allowed(order, actor, transition)
        return self._apply(order, actor, transition)

    # ---------------------------------------------------------------- internals

    def _load(self, order_id: int) -> Order:
        try:
            return Order.objects.get(pk=order_id)
        except Order.DoesNotExist:
            raise NotFound("Order not found.")

    def _authorize(self, order: Order, actor: Actor, role: str) -> None:
        party_id = order.artisan_id if role == Profile.Type.ARTISAN else order.customer_id
        if actor.role != role or actor.id != party_id:
            logger.info(
                "order_transition_forbidden",
                extra={"order_id": order.id, "actor": str(actor)},
            )
            raise Forbidden("Not authorized for this order.")

    def _ensure_allowed(self, order: Order, actor: Actor, transition: Transition) -> None:
        reason = None
        if order.is_terminal:
            reason = f"Order is already {order.status}."
        elif order.kind not in transition.kinds:
            reason = f"Action '{transition.action.value}' is not available for {order.kind} orders."
        elif order.status not in transition.sources:
            reason = f"Action '{transition.action.value}' is not allowed while the order is {order.status}."
        if reason:
            logger.info(
                "order_transition_rejected",
                extra={
                    "order_id": order.id,
                    "actor": str(actor),
                    "action": transition.action.value,
                    "status": order.status,
                    "error": reason,
                },
            )
            raise InvalidState(reason)

    def _apply(self, order: Order, actor: Actor, transition: Transition, changes: dict | None = None, **context) -> Order:
        """Compare-and-swap the status, then notify the counter-party."""
        changes = dict(changes or {})
        expected = order.status
        with transaction.atomic():
            updated = Order.objects.filter(pk=order.pk, status=expected).update(
                status=transition.target,
                updated_at=timezone.now(),
                **changes,
            )
        if updated != 1:
            logger.info(
                "order_transition_conflict",
                extra={"order_id": order.id, "actor": str(actor), "action": transition.action.value},
            )
            raise InvalidState("Order was changed by another request. Reload and try again.")

        order.refresh_from_db()
        logger.info(
            "order_transition",
            extra={
                "order_id": order.id,
                "actor": str(actor),
                "action": transition.action.value,
                "status": order.status,
            },
        )

        if transition.notify_role == Profile.Type.CUSTOMER:
            recipient = Recipient.customer(order.customer_id)
        else:
            recipient = Recipient.artisan(order.artisan_id)
        context.setdefault("price", order.unit_price)
        self.notifier.send(
            recipient=recipient,
            sender=Recipient(actor.role, actor.id),
            message=transition.render(title=order.title, **context),
            type=transition.notification_type,
            order_id=order.id,
        )
        return order
