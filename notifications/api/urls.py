from django.urls import path
from .views import NotificationListAPIView, NotificationMarkReadAPIView, NotificationDeleteAPIView

urlpatterns = [
    path("notifications/", NotificationListAPIView.as_view(), name="notification-list"),
    path("notifications/read/", NotificationMarkReadAPIView.as_view(), name="notification-read"),
    path("notifications/<int:pk>/", NotificationDeleteAPIView.as_view(), name="notification-detail"),
]
