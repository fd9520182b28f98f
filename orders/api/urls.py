from django.urls import path
from .views import (
    OrderListCreateAPIView,
    OrderRetrieveAPIView,
    OrderStatusUpdateAPIView,
    OrderResponseAPIView,
    OrderCancelAPIView,
)

urlpatterns = [
    path("orders/", OrderListCreateAPIView.as_view(), name="order-list"),
    path("orders/<int:pk>/", OrderRetrieveAPIView.as_view(), name="order-detail"),
    path("orders/<int:pk>/status/", OrderStatusUpdateAPIView.as_view(), name="order-status"),
    path("orders/<int:pk>/response/", OrderResponseAPIView.as_view(), name="order-response"),
    path("orders/<int:pk>/cancel/", OrderCancelAPIView.as_view(), name="order-cancel"),
]
