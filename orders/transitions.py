"""Order negotiation state machine.

Every legal status change is one row of TRANSITIONS: who may trigger it, from
which statuses, for which order kinds, where it leads and what the
counter-party is told. The service layer only interprets this table; adding
or tightening a rule means editing a row here.
"""

from dataclasses import dataclass
from enum import Enum

from notifications.models import Notification
from orders.models import Order
from profiles.models import Profile

Status = Order.Status
Kind = Order.Kind
Role = Profile.Type

ALL_KINDS = frozenset({Kind.PORTFOLIO_ORDER.value, Kind.CUSTOM_REQUEST.value})
OPEN_STATUSES = frozenset({Status.PENDING.value, Status.OFFER_MADE.value})


class Action(str, Enum):
    MAKE_OFFER = "make_offer"
    ACCEPT_ORDER = "accept_order"
    COMPLETE = "complete"
    ARTISAN_CANCEL = "artisan_cancel"
    ACCEPT_OFFER = "accept_offer"
    REJECT_OFFER = "reject_offer"
    NEGOTIATE = "negotiate"
    CUSTOMER_CANCEL = "customer_cancel"


@dataclass(frozen=True)
class Transition:
    action: Action
    actor_role: str
    sources: frozenset
    target: str
    message: str
    notification_type: str = Notification.Type.STATUS_UPDATE.value
    kinds: frozenset = ALL_KINDS

    @property
    def notify_role(self) -> str:
        """The counter-party; the actor is never notified of its own action."""
        if self.actor_role == Role.ARTISAN:
            return Role.CUSTOMER.value
        return Role.ARTISAN.value

    def render(self, **context) -> str:
        return self.message.format(**context)


TRANSITIONS = {
    t.action: t
    for t in (
        Transition(
            action=Action.MAKE_OFFER,
            actor_role=Role.ARTISAN.value,
            sources=frozenset({Status.PENDING.value}),
            target=Status.OFFER_MADE.value,
            kinds=frozenset({Kind.CUSTOM_REQUEST.value}),
            notification_type=Notification.Type.SYSTEM_ALERT.value,
            message="Artisan sent an offer of ${price} for '{title}'.",
        ),
        Transition(
            action=Action.ACCEPT_ORDER,
            actor_role=Role.ARTISAN.value,
            sources=frozenset({Status.PENDING.value}),
            target=Status.ACCEPTED.value,
            kinds=frozenset({Kind.PORTFOLIO_ORDER.value}),
            message="Your order '{title}' was accepted.",
        ),
        Transition(
            action=Action.COMPLETE,
            actor_role=Role.ARTISAN.value,
            sources=OPEN_STATUSES,
            target=Status.COMPLETED.value,
            message="Your order '{title}' is ready!",
        ),
        Transition(
            action=Action.ARTISAN_CANCEL,
            actor_role=Role.ARTISAN.value,
            sources=OPEN_STATUSES,
            target=Status.CANCELLED.value,
            message="Your order '{title}' was cancelled.",
        ),
        Transition(
            action=Action.ACCEPT_OFFER,
            actor_role=Role.CUSTOMER.value,
            sources=frozenset({Status.OFFER_MADE.value}),
            target=Status.ACCEPTED.value,
            message="Customer accepted your price of ${price} for '{title}'!",
        ),
        Transition(
            action=Action.REJECT_OFFER,
            actor_role=Role.CUSTOMER.value,
            sources=frozenset({Status.OFFER_MADE.value}),
            target=Status.CANCELLED.value,
            message="Customer rejected the offer for '{title}'.",
        ),
        Transition(
            action=Action.NEGOTIATE,
            actor_role=Role.CUSTOMER.value,
            sources=frozenset({Status.OFFER_MADE.value}),
            target=Status.PENDING.value,
            message="Customer wants to negotiate on '{title}': {note}",
        ),
        Transition(
            action=Action.CUSTOMER_CANCEL,
            actor_role=Role.CUSTOMER.value,
            sources=OPEN_STATUSES,
            target=Status.CANCELLED.value,
            message="Customer cancelled the request for '{title}'.",
        ),
    )
}

# PUT /orders/{id}/status: requested status -> artisan action
ARTISAN_STATUS_ACTIONS = {
    Status.ACCEPTED.value: Action.ACCEPT_ORDER,
    Status.COMPLETED.value: Action.COMPLETE,
    Status.CANCELLED.value: Action.ARTISAN_CANCEL,
}

# PUT /orders/{id}/response: customer verb -> customer action
CUSTOMER_RESPONSE_ACTIONS = {
    "accept": Action.ACCEPT_OFFER,
    "reject": Action.REJECT_OFFER,
    "negotiate": Action.NEGOTIATE,
}


def get_transition(action: Action) -> Transition:
    return TRANSITIONS[Action(action)]
