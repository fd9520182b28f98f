"""Reviews API views.

Customers post reviews of artisans; any authenticated user can read an
artisan's reviews, newest first.
"""

from rest_framework import generics, status
from rest_framework.response import Response

from reviews.services import ReviewService
from user_auth_app.actors import get_actor
from .permissions import IsCustomerReviewer
from .serializers import ReviewCreateSerializer, ReviewOutputSerializer


class ReviewCreateAPIView(generics.CreateAPIView):
    """POST /api/reviews/ -> create a review (customer-only)."""

    serializer_class = ReviewCreateSerializer
    permission_classes = [IsCustomerReviewer]

    def create(self, request, *args, **kwargs):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        review = ReviewService().create_review(
            get_actor(request), data["artisan_id"], data["stars"], data["comment"]
        )
        return Response(ReviewOutputSerializer(review).data, status=status.HTTP_201_CREATED)


class ArtisanReviewListAPIView(generics.ListAPIView):
    """GET /api/artisans/{artisan_id}/reviews/ -> one artisan's reviews."""

    serializer_class = ReviewOutputSerializer

    def get_queryset(self):
        return ReviewService().list_reviews(self.kwargs["artisan_id"])
