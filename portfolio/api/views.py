"""Portfolio API views.

Artisans publish items to their portfolio; any authenticated user may browse
an artisan's portfolio or fetch a single item.
"""

from django.contrib.auth import get_user_model
from rest_framework import generics

from common.exceptions import NotFound
from profiles.models import Profile
from user_auth_app.api.permissions import IsArtisan
from portfolio.models import PortfolioItem
from .serializers import PortfolioItemSerializer

User = get_user_model()


class PortfolioItemCreateAPIView(generics.CreateAPIView):
    """POST /api/portfolio/ -> add an item to the authenticated artisan's portfolio."""

    serializer_class = PortfolioItemSerializer
    permission_classes = [IsArtisan]


class PortfolioItemRetrieveAPIView(generics.RetrieveAPIView):
    """GET /api/portfolio/{id}/ -> a single portfolio item."""

    queryset = PortfolioItem.objects.all()
    serializer_class = PortfolioItemSerializer


class ArtisanPortfolioListAPIView(generics.ListAPIView):
    """GET /api/artisans/{artisan_id}/portfolio/ -> all items of one artisan."""

    serializer_class = PortfolioItemSerializer

    def get_queryset(self):
        artisan_id = self.kwargs["artisan_id"]
        if not User.objects.filter(id=artisan_id, profile__type=Profile.Type.ARTISAN).exists():
            raise NotFound("Artisan not found.")
        return PortfolioItem.objects.filter(artisan_id=artisan_id).order_by("-created_at", "-id")
