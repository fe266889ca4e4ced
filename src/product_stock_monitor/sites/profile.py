from __future__ import annotations

from dataclasses import dataclass

from ..parsers.classifier import StatusClassifier
from ..parsers.common import SelectorQuery


@dataclass(frozen=True)
class SiteProfile:
    domain: str
    site_name: str
    name_selector: SelectorQuery
    availability_selector: SelectorQuery
    classifier: StatusClassifier
