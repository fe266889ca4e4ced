from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..models import Status
from .common import normalize_phrase


@dataclass(frozen=True)
class PatternRule:
    """A phrase family, e.g. "only 3 in stock", matched against normalized text."""

    pattern: re.Pattern[str]
    status: Status

    @classmethod
    def of(cls, pattern: str, status: Status) -> PatternRule:
        return cls(re.compile(pattern), status)


class StatusClassifier:
    """
    Maps the free-form availability copy of one site to a Status.

    Lookup order: exact phrase table, then phrase families. Anything not
    covered is UNKNOWN, and so is text that matches families pointing at
    different statuses. A table may also pin a phrase to UNKNOWN explicitly
    when it reads both ways on that site.
    """

    def __init__(self, phrases: Mapping[str, Status], patterns: Sequence[PatternRule] = ()) -> None:
        self._phrases = {normalize_phrase(k): v for k, v in phrases.items()}
        self._patterns = tuple(patterns)

    @property
    def phrases(self) -> Mapping[str, Status]:
        return dict(self._phrases)

    def classify(self, raw_text: str) -> Status:
        key = normalize_phrase(raw_text)
        if not key:
            return Status.UNKNOWN
        exact = self._phrases.get(key)
        if exact is not None:
            return exact

        hits = {rule.status for rule in self._patterns if rule.pattern.fullmatch(key)}
        if len(hits) == 1:
            return hits.pop()
        return Status.UNKNOWN
