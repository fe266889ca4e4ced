from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    UNKNOWN = "unknown"
    IN_STOCK = "in stock"
    OUT_OF_STOCK = "out of stock"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MonitorRun:
    url: str
    ok: bool
    error: str | None
    duration_ms: int
    status: Status
    line: str


@dataclass(frozen=True)
class RunSummary:
    started_at: str
    finished_at: str
    monitors_ok: int
    monitors_error: int
    in_stock: int
    out_of_stock: int
    unknown: int
