"""Orders API views.

List and create orders on the same endpoint, return only orders that involve
the authenticated user on the requested side. Status changes are exposed as
three PUT endpoints, one per acting party and intent; all of them delegate to
the order service, which enforces the negotiation rules.
"""

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from user_auth_app.actors import get_actor
from orders.services import OrderService
from .permissions import IsOrderArtisan, IsOrderCustomer, IsOrderParticipant
from .serializers import (
    OrderCreateSerializer,
    OrderOutputSerializer,
    OrderResponseSerializer,
    OrderStatusUpdateSerializer,
)


class OrderServiceMixin:
    """Gives views a fresh OrderService per request."""

    service_class = OrderService

    def get_service(self) -> OrderService:
        return self.service_class()


class OrderListCreateAPIView(OrderServiceMixin, generics.ListCreateAPIView):
    """GET: list the user's orders (?role=customer|artisan, ?status=...).
    POST: place an order or raise a custom request (customer-only).
    """

    def get_permissions(self):
        """Customer-only on POST; any marketplace role may list."""
        if self.request.method == "POST":
            return [IsOrderCustomer()]
        return [IsOrderParticipant()]

    def get_serializer_class(self):
        """Use output serializer for GET and input serializer for POST."""
        return OrderOutputSerializer if self.request.method == "GET" else OrderCreateSerializer

    # --- GET ---
    def get_queryset(self):
        params = self.request.query_params
        return self.get_service().list_orders(
            get_actor(self.request),
            role=params.get("role") or None,
            status=params.get("status") or None,
        )

    # --- POST ---
    def create(self, request, *args, **kwargs):
        """Validate the body, create the order and return the full payload."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = self.get_service().create_order(get_actor(request), **serializer.validated_data)
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderRetrieveAPIView(OrderServiceMixin, APIView):
    """GET /api/orders/{id}/ -> one order, visible to its two parties."""

    permission_classes = [IsOrderParticipant]

    def get(self, request, pk: int):
        order = self.get_service().get_order(get_actor(request), pk)
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)


class OrderStatusUpdateAPIView(OrderServiceMixin, APIView):
    """PUT /api/orders/{id}/status/ -> artisan sets a status or makes a price offer."""

    permission_classes = [IsOrderArtisan]

    def put(self, request, pk: int):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = self.get_service().artisan_update(
            get_actor(request),
            pk,
            status=data.get("status"),
            price=data.get("price"),
        )
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)


class OrderResponseAPIView(OrderServiceMixin, APIView):
    """PUT /api/orders/{id}/response/ -> customer accepts, rejects or negotiates an offer."""

    permission_classes = [IsOrderCustomer]

    def put(self, request, pk: int):
        serializer = OrderResponseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = self.get_service().customer_respond(
            get_actor(request), pk, data["action"], note=data.get("note")
        )
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)


class OrderCancelAPIView(OrderServiceMixin, APIView):
    """PUT /api/orders/{id}/cancel/ -> customer cancels before the order is accepted."""

    permission_classes = [IsOrderCustomer]

    def put(self, request, pk: int):
        order = self.get_service().customer_cancel(get_actor(request), pk)
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_200_OK)
