"""Notifications API views.

Every endpoint works on the authenticated user's own inbox: list the newest
notifications, mark all as read, delete a single one.
"""

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.models import Notification
from .serializers import NotificationOutputSerializer

INBOX_LIMIT = 50


class NotificationListAPIView(generics.ListAPIView):
    """GET /api/notifications/ -> newest notifications of the current user."""

    serializer_class = NotificationOutputSerializer

    def get_queryset(self):
        return (
            Notification.objects.filter(recipient=self.request.user)
            .order_by("-created_at", "-id")[:INBOX_LIMIT]
        )


class NotificationMarkReadAPIView(APIView):
    """PUT /api/notifications/read/ -> mark all unread notifications as read."""

    def put(self, request):
        updated = Notification.objects.filter(recipient=request.user, is_read=False).update(is_read=True)
        return Response(
            {"message": "All notifications marked as read.", "updated": updated},
            status=status.HTTP_200_OK,
        )


class NotificationDeleteAPIView(generics.DestroyAPIView):
    """DELETE /api/notifications/{id}/ -> remove one of the user's notifications.

    Foreign notifications are invisible here, so they answer 404 like missing ones.
    """

    def get_queryset(self):
        return Notification.objects.filter(recipient=self.request.user)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response(status=status.HTTP_204_NO_CONTENT)
