"""Catalog lookup used by order creation.

Resolves an artisan's portfolio item into an immutable snapshot of the data an
order copies at creation time, so later catalog edits never leak into
existing orders.
"""

from dataclasses import dataclass
from decimal import Decimal

from common.exceptions import NotFound
from portfolio.models import PortfolioItem


@dataclass(frozen=True)
class CatalogSnapshot:
    item_id: int
    title: str
    price: Decimal
    cover_image: str


class CatalogLookup:
    """Read-only access to artisans' portfolios."""

    def get_item(self, artisan_id: int, item_id: int) -> CatalogSnapshot:
        """Return the item if it belongs to `artisan_id`; raise NotFound otherwise."""
        try:
            item = PortfolioItem.objects.get(id=item_id, artisan_id=artisan_id)
        except PortfolioItem.DoesNotExist:
            raise NotFound("Catalog item not found.")
        return CatalogSnapshot(
            item_id=item.id,
            title=item.title,
            price=item.price,
            cover_image=item.cover_image,
        )
