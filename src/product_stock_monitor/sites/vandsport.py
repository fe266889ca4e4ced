from __future__ import annotations

from ..models import Status
from ..parsers.classifier import PatternRule, StatusClassifier
from ..parsers.common import SelectorQuery
from .profile import SiteProfile


VANDSPORT = SiteProfile(
    domain="www.vandsport.dk",
    site_name="Vandsport",
    name_selector=SelectorQuery("#product-page h1[itemprop='name']", "name"),
    availability_selector=SelectorQuery("#product-page .stock-status > span", "availability"),
    classifier=StatusClassifier(
        {
            "På lager": Status.IN_STOCK,
            "Få på lager": Status.IN_STOCK,
            "Ikke på lager": Status.OUT_OF_STOCK,
            "Udsolgt": Status.OUT_OF_STOCK,
            "Midlertidigt udsolgt": Status.OUT_OF_STOCK,
            # Remote warehouse: sometimes shippable, sometimes weeks out.
            "På fjernlager": Status.UNKNOWN,
        },
        [
            PatternRule.of(r"[1-9]\d* (?:stk\.? )?på lager", Status.IN_STOCK),
            # Restock window ("på lager indenfor 3-4 uger") means not available today.
            PatternRule.of(r"på lager (?:indenfor|inden for|om) \d+(?:\s*-\s*\d+)? (?:dag|dage|uge|uger)", Status.OUT_OF_STOCK),
            PatternRule.of(r"forventes på lager.*", Status.OUT_OF_STOCK),
        ],
    ),
)
