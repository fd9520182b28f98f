from django.urls import path
from .views import PortfolioItemCreateAPIView, PortfolioItemRetrieveAPIView, ArtisanPortfolioListAPIView

urlpatterns = [
    path("portfolio/", PortfolioItemCreateAPIView.as_view(), name="portfolio-create"),
    path("portfolio/<int:pk>/", PortfolioItemRetrieveAPIView.as_view(), name="portfolio-detail"),
    path("artisans/<int:artisan_id>/portfolio/", ArtisanPortfolioListAPIView.as_view(), name="artisan-portfolio"),
]
