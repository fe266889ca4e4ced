from __future__ import annotations

import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .errors import AmbiguousSelectionError
from .models import MonitorRun, RunSummary, Status
from .monitor import ProductMonitor
from .sites.registry import domain_from_url
from .timeutil import utc_now_iso


def _log_enabled() -> bool:
    return os.getenv("MONITOR_LOG", "1").strip() != "0"


def _log(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def _site_label(monitor: ProductMonitor) -> str:
    return domain_from_url(monitor.url) or monitor.url


def _refresh_one(monitor: ProductMonitor) -> tuple[str | None, int]:
    started = time.perf_counter()
    error: str | None = None
    try:
        monitor.refresh()
    except AmbiguousSelectionError as e:
        error = f"{type(e).__name__}: {e}"
        if _log_enabled():
            _log(f"[{_site_label(monitor)}] selector drift, site profile needs updating :: {e}")
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
    duration_ms = int((time.perf_counter() - started) * 1000)
    return error, duration_ms


def _to_run(monitor: ProductMonitor, error: str | None, duration_ms: int) -> MonitorRun:
    line = monitor.describe()
    if error:
        line = f"{line} :: Error occurred while updating: {error}"
    return MonitorRun(
        url=monitor.url,
        ok=error is None,
        error=error,
        duration_ms=duration_ms,
        status=monitor.status,
        line=line,
    )


def _emit(monitor: ProductMonitor, outcome: tuple[str | None, int], *, idx: int, total: int, log_enabled: bool) -> MonitorRun:
    error, duration_ms = outcome
    run = _to_run(monitor, error, duration_ms)
    if log_enabled:
        state = "ok" if run.ok else "error"
        _log(f"[{_site_label(monitor)}] progress={idx}/{total} {state} status={run.status} {run.duration_ms}ms")
    print(run.line, flush=True)
    return run


def run_all(monitors: Sequence[ProductMonitor], *, max_workers: int = 1) -> tuple[list[MonitorRun], RunSummary]:
    """
    Refresh every monitor and print one line per monitor to stdout, in input order.

    A failing monitor never stops the batch: its error is attached to its line
    and to its MonitorRun.
    """
    log_enabled = _log_enabled()
    started_at = utc_now_iso()
    if log_enabled:
        _log(f"[monitor] start monitors={len(monitors)} max_workers={max_workers}")

    runs: list[MonitorRun] = []
    total = len(monitors)
    if max_workers > 1 and total > 1:
        # Monitors share no state; map() yields in input order, so lines stay ordered.
        with ThreadPoolExecutor(max_workers=max_workers) as ex:
            for idx, (monitor, outcome) in enumerate(zip(monitors, ex.map(_refresh_one, monitors)), start=1):
                runs.append(_emit(monitor, outcome, idx=idx, total=total, log_enabled=log_enabled))
    else:
        for idx, monitor in enumerate(monitors, start=1):
            runs.append(_emit(monitor, _refresh_one(monitor), idx=idx, total=total, log_enabled=log_enabled))

    summary = RunSummary(
        started_at=started_at,
        finished_at=utc_now_iso(),
        monitors_ok=sum(1 for r in runs if r.ok),
        monitors_error=sum(1 for r in runs if not r.ok),
        in_stock=sum(1 for r in runs if r.status is Status.IN_STOCK),
        out_of_stock=sum(1 for r in runs if r.status is Status.OUT_OF_STOCK),
        unknown=sum(1 for r in runs if r.status is Status.UNKNOWN),
    )
    if log_enabled:
        _log(
            f"[monitor] done ok={summary.monitors_ok} error={summary.monitors_error} "
            f"in_stock={summary.in_stock} out_of_stock={summary.out_of_stock} unknown={summary.unknown}"
        )
    return runs, summary
