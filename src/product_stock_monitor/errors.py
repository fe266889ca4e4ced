from __future__ import annotations


class MonitorError(Exception):
    """Base class for failures raised while refreshing a monitor."""


class FetchError(MonitorError):
    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class ParseError(MonitorError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class AmbiguousSelectionError(MonitorError):
    """
    A selector that must identify a single element matched zero or several.

    This usually means the site changed its page structure and the site profile
    needs new selectors.
    """

    def __init__(self, selector: str, match_count: int, *, label: str | None = None) -> None:
        what = f"{label} selector" if label else "selector"
        super().__init__(f"{what} {selector!r} matched {match_count} elements, expected exactly 1")
        self.selector = selector
        self.match_count = match_count
        self.label = label


class UnsupportedSiteError(ValueError):
    def __init__(self, url: str, domain: str) -> None:
        super().__init__(f"no site profile for domain {domain!r} (url={url})")
        self.url = url
        self.domain = domain
