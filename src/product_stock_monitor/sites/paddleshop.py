from __future__ import annotations

from ..models import Status
from ..parsers.classifier import PatternRule, StatusClassifier
from ..parsers.common import SelectorQuery
from .profile import SiteProfile


# English storefront. The stock badge is the only `.stock` inside the product summary;
# related-product carousels reuse the class, hence the scoping.
PADDLESHOP = SiteProfile(
    domain="www.paddleshop.co.uk",
    site_name="PaddleShop",
    name_selector=SelectorQuery("div.product-summary h1.product-title", "name"),
    availability_selector=SelectorQuery("div.product-summary p.stock", "availability"),
    classifier=StatusClassifier(
        {
            "In stock": Status.IN_STOCK,
            "Out of stock": Status.OUT_OF_STOCK,
            "Temporarily out of stock": Status.OUT_OF_STOCK,
            "Sold out": Status.OUT_OF_STOCK,
            "Discontinued": Status.OUT_OF_STOCK,
            # Shown both for orderable incoming stock and for unannounced restocks.
            "Pre-order": Status.UNKNOWN,
        },
        [
            PatternRule.of(r"only [1-9]\d* (?:left )?in stock", Status.IN_STOCK),
            PatternRule.of(r"[1-9]\d* in stock", Status.IN_STOCK),
        ],
    ),
)
