from __future__ import annotations

from typing import Protocol

import requests

from .errors import FetchError, ParseError
from .http_client import FetchResult
from .models import Status
from .parsers.common import element_text, parse_document, select_exactly_one
from .sites.profile import SiteProfile
from .sites.registry import get_profile_for_url


class PageFetcher(Protocol):
    def fetch_text(self, url: str) -> FetchResult: ...


class ProductMonitor(Protocol):
    """What the runner needs from a tracked product, whatever site it lives on."""

    @property
    def url(self) -> str: ...

    name: str | None
    status: Status

    def refresh(self) -> None: ...

    def is_available(self) -> bool: ...

    def describe(self) -> str: ...


class SiteMonitor:
    """
    Tracks one product page on a site described by a SiteProfile.

    `refresh()` raises FetchError, ParseError or AmbiguousSelectionError and
    never retries. Whatever happens, `status` is UNKNOWN unless the last
    refresh classified the availability text.
    """

    def __init__(self, url: str, *, profile: SiteProfile, fetcher: PageFetcher) -> None:
        self._url = url
        self._profile = profile
        self._fetcher = fetcher
        self.name: str | None = None
        self.status: Status = Status.UNKNOWN

    @property
    def url(self) -> str:
        return self._url

    @property
    def profile(self) -> SiteProfile:
        return self._profile

    def refresh(self) -> None:
        self.status = Status.UNKNOWN

        html = self._fetch()
        doc = parse_document(html)

        name_el = select_exactly_one(doc, self._profile.name_selector)
        name = element_text(name_el)
        if not name:
            raise ParseError(f"{self._profile.name_selector.label} element {self._profile.name_selector.selector!r} is empty")
        self.name = name

        availability_el = select_exactly_one(doc, self._profile.availability_selector)
        self.status = self._profile.classifier.classify(element_text(availability_el))

    def _fetch(self) -> str:
        try:
            res = self._fetcher.fetch_text(self._url)
        except requests.RequestException as e:
            raise FetchError(self._url, f"{type(e).__name__}: {e}") from e
        if not res.ok or not res.text:
            raise FetchError(self._url, res.error or "fetch failed", status_code=res.status_code)
        return res.text

    def is_available(self) -> bool:
        return self.status is Status.IN_STOCK

    def describe(self) -> str:
        if self.name is not None:
            return f"Status for {self.name} is {self.status}"
        return f"Status for product with url {self._url} is {self.status}"

    def __repr__(self) -> str:
        return f"SiteMonitor(site={self._profile.site_name!r}, url={self._url!r}, status={self.status.value!r})"


def monitor_for_url(url: str, *, fetcher: PageFetcher) -> SiteMonitor:
    return SiteMonitor(url, profile=get_profile_for_url(url), fetcher=fetcher)
