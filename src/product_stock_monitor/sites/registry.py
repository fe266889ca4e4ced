from __future__ import annotations

from urllib.parse import urlparse

from ..errors import UnsupportedSiteError
from .paddleshop import PADDLESHOP
from .profile import SiteProfile
from .vandsport import VANDSPORT


_PROFILES: dict[str, SiteProfile] = {p.domain: p for p in (PADDLESHOP, VANDSPORT)}


def domain_from_url(url: str) -> str:
    return urlparse(url).netloc.lower()


def get_profile_for_domain(domain: str) -> SiteProfile | None:
    domain = domain.lower()
    profile = _PROFILES.get(domain)
    if profile is None and domain.startswith("www."):
        profile = _PROFILES.get(domain[4:])
    if profile is None:
        profile = _PROFILES.get(f"www.{domain}")
    return profile


def get_profile_for_url(url: str) -> SiteProfile:
    domain = domain_from_url(url)
    profile = get_profile_for_domain(domain)
    if profile is None:
        raise UnsupportedSiteError(url, domain)
    return profile


def supported_domains() -> list[str]:
    return sorted(_PROFILES)
