from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass

import requests
from requests import Response
from requests.adapters import HTTPAdapter


DEFAULT_USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_6) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
]


@dataclass(frozen=True)
class FetchResult:
    url: str
    status_code: int | None
    ok: bool
    text: str | None
    error: str | None
    elapsed_ms: int


class HttpClient:
    """
    Blocking page fetcher.

    One attempt per call unless `max_retries` is raised; monitors never retry on
    their own, so any retry policy lives here and is opt-in.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float,
        proxy_url: str | None = None,
        user_agents: list[str] | None = None,
        max_retries: int = 1,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._proxy_url = proxy_url
        self._user_agents = user_agents or DEFAULT_USER_AGENTS
        self._max_retries = max(1, max_retries)

        # Sessions are per thread so a worker pool can share one client.
        self._local = threading.local()

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if isinstance(sess, requests.Session):
            return sess
        s = requests.Session()
        adapter = HTTPAdapter(pool_connections=16, pool_maxsize=16)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        self._local.session = s
        return s

    @staticmethod
    def _should_retry_status(status_code: int) -> bool:
        return status_code == 408 or status_code == 425 or status_code == 429 or (500 <= status_code <= 599)

    @staticmethod
    def _retry_after_seconds(resp: Response) -> float | None:
        raw = (resp.headers or {}).get("Retry-After")
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError:
            return None

    @staticmethod
    def _sleep_backoff(attempt: int, *, retry_after_seconds: float | None = None) -> None:
        if retry_after_seconds is not None:
            time.sleep(min(5.0, max(0.0, retry_after_seconds)))
            return
        base = min(2.5, 0.35 * attempt)
        time.sleep(base + random.random() * 0.15)

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": random.choice(self._user_agents),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-GB,en;q=0.9,da;q=0.8",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def _proxies(self) -> dict[str, str] | None:
        if not self._proxy_url:
            return None
        return {"http": self._proxy_url, "https": self._proxy_url}

    def fetch_text(self, url: str) -> FetchResult:
        started = time.perf_counter()
        last_error: str | None = None
        for attempt in range(1, self._max_retries + 1):
            try:
                resp: Response = self._session().get(
                    url,
                    headers=self._headers(),
                    proxies=self._proxies(),
                    timeout=(self._timeout_seconds, self._timeout_seconds),
                    allow_redirects=True,
                )
            except requests.RequestException as e:
                last_error = f"{type(e).__name__}: {e}"
                if attempt < self._max_retries:
                    self._sleep_backoff(attempt)
                    continue
                break

            if self._should_retry_status(resp.status_code) and attempt < self._max_retries:
                last_error = f"HTTP {resp.status_code}"
                self._sleep_backoff(attempt, retry_after_seconds=self._retry_after_seconds(resp))
                continue
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            ok = 200 <= resp.status_code < 400
            return FetchResult(
                url=str(resp.url),
                status_code=resp.status_code,
                ok=ok,
                text=resp.text if ok else None,
                error=None if ok else f"HTTP {resp.status_code}",
                elapsed_ms=elapsed_ms,
            )
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return FetchResult(url=url, status_code=None, ok=False, text=None, error=last_error, elapsed_ms=elapsed_ms)
