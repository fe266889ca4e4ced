from __future__ import annotations

import os
import sys

from product_stock_monitor.errors import ParseError
from product_stock_monitor.http_client import HttpClient
from product_stock_monitor.parsers.common import element_text, parse_document
from product_stock_monitor.sites.registry import domain_from_url, get_profile_for_domain
from product_stock_monitor.targets import DEFAULT_TARGETS


def main() -> int:
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")
    except Exception:
        pass

    targets_env = os.getenv("LIVE_TARGETS", "").strip()
    targets = [t.strip() for t in targets_env.split(",") if t.strip()] if targets_env else list(DEFAULT_TARGETS)

    timeout_seconds = float(os.getenv("LIVE_TIMEOUT_SECONDS", "25"))
    proxy_url = os.getenv("PROXY_URL", "").strip() or None
    client = HttpClient(timeout_seconds=timeout_seconds, proxy_url=proxy_url)

    errors: list[str] = []

    for target in targets:
        domain = domain_from_url(target)
        print(f"\n== {domain} :: {target}", flush=True)
        profile = get_profile_for_domain(domain)
        if profile is None:
            errors.append(f"  ✗ {domain}: no site profile")
            continue

        fetch = client.fetch_text(target)
        print(f"ok={fetch.ok} status_code={fetch.status_code} {fetch.elapsed_ms}ms error={fetch.error}", flush=True)
        if not fetch.ok or not fetch.text:
            errors.append(f"  ✗ {domain}: {fetch.error}")
            continue

        try:
            doc = parse_document(fetch.text)
        except ParseError as e:
            errors.append(f"  ✗ {domain}: {e}")
            continue

        # Show every match, not just the first: drift shows up as 0 or >1.
        for query in (profile.name_selector, profile.availability_selector):
            matches = doc.select(query.selector)
            print(f"  {query.label}: {query.selector!r} matches={len(matches)}", flush=True)
            for el in matches[:5]:
                text = element_text(el)
                extra = f" -> {profile.classifier.classify(text)}" if query is profile.availability_selector else ""
                print(f"    - {text!r}{extra}", flush=True)
            if len(matches) != 1:
                errors.append(f"  ✗ {domain}: {query.label} selector matched {len(matches)}")

    if errors:
        print(f"\nErrors ({len(errors)}):", flush=True)
        for e in errors:
            print(e, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
