from __future__ import annotations

import argparse
import os
import sys

from .errors import UnsupportedSiteError
from .http_client import HttpClient
from .monitor import SiteMonitor, monitor_for_url
from .runner import run_all
from .sites.registry import supported_domains
from .targets import DEFAULT_TARGETS


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="product-stock-monitor")
    parser.add_argument(
        "--targets",
        default=os.getenv("MONITOR_TARGETS", ""),
        help="Comma-separated list of product URLs. Defaults to built-in list.",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=float(os.getenv("TIMEOUT_SECONDS", "25")),
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=int(os.getenv("MAX_WORKERS", "1")),
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=int(os.getenv("MAX_RETRIES", "1")),
        help="Fetch attempts per product page (1 = no retry).",
    )
    args = parser.parse_args(argv)

    targets = [t.strip() for t in args.targets.split(",") if t.strip()] or list(DEFAULT_TARGETS)

    proxy_url = os.getenv("PROXY_URL", "").strip() or None
    client = HttpClient(
        timeout_seconds=args.timeout_seconds,
        proxy_url=proxy_url,
        max_retries=args.max_retries,
    )

    monitors: list[SiteMonitor] = []
    for url in targets:
        try:
            monitors.append(monitor_for_url(url, fetcher=client))
        except UnsupportedSiteError as e:
            print(f"[monitor] skipping target: {e}", file=sys.stderr, flush=True)
    if not monitors:
        parser.error(f"no target URL belongs to a supported site ({', '.join(supported_domains())})")

    _runs, summary = run_all(monitors, max_workers=args.max_workers)
    if summary.monitors_ok == 0:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
