from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import AmbiguousSelectionError, ParseError


_WS_RE = re.compile(r"\s+")


def compact_ws(text: str) -> str:
    return _WS_RE.sub(" ", (text or "").strip())


def normalize_phrase(text: str) -> str:
    # NBSP and friends are covered by \s; casefold handles e.g. German ß.
    return compact_ws(text).casefold()


@dataclass(frozen=True)
class SelectorQuery:
    selector: str
    label: str


def parse_document(html: str) -> BeautifulSoup:
    if not html or not html.strip():
        raise ParseError("empty page")
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as e:
        raise ParseError(f"{type(e).__name__}: {e}") from e
    if soup.find(True) is None:
        raise ParseError("page contains no elements")
    return soup


def select_exactly_one(document: BeautifulSoup | Tag, query: SelectorQuery) -> Tag:
    matches = document.select(query.selector)
    if len(matches) != 1:
        raise AmbiguousSelectionError(query.selector, len(matches), label=query.label)
    return matches[0]


def element_text(el: Tag) -> str:
    return compact_ws(el.get_text(" ", strip=True))
