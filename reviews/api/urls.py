from django.urls import path
from .views import ArtisanReviewListAPIView, ReviewCreateAPIView

urlpatterns = [
    path("reviews/", ReviewCreateAPIView.as_view(), name="review-create"),
    path("artisans/<int:artisan_id>/reviews/", ArtisanReviewListAPIView.as_view(), name="artisan-reviews"),
]
