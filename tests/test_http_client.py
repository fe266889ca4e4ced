from __future__ import annotations

import unittest
from unittest.mock import Mock, patch

import requests

from product_stock_monitor.http_client import HttpClient


def _resp(status_code: int, text: str = "", url: str = "https://example.test/p") -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.url = url
    resp.text = text
    resp.headers = {}
    return resp


class TestHttpClient(unittest.TestCase):
    def test_single_attempt_by_default(self) -> None:
        client = HttpClient(timeout_seconds=1.0)
        client._session().get = Mock(return_value=_resp(502, "bad gateway"))

        with patch("product_stock_monitor.http_client.time.sleep", autospec=True) as sleep:
            res = client.fetch_text("https://example.test/p")

        self.assertFalse(res.ok)
        self.assertEqual(res.error, "HTTP 502")
        self.assertEqual(client._session().get.call_count, 1)
        sleep.assert_not_called()

    def test_retries_on_transient_5xx_when_enabled(self) -> None:
        client = HttpClient(timeout_seconds=1.0, max_retries=3)
        client._session().get = Mock(side_effect=[_resp(502, "bad gateway"), _resp(200, "<html>ok</html>")])

        with patch("product_stock_monitor.http_client.time.sleep", autospec=True):
            res = client.fetch_text("https://example.test/p")

        self.assertTrue(res.ok)
        self.assertEqual(client._session().get.call_count, 2)
        self.assertEqual(res.text, "<html>ok</html>")
        self.assertEqual(res.status_code, 200)
        self.assertIsNone(res.error)

    def test_does_not_retry_on_404(self) -> None:
        client = HttpClient(timeout_seconds=1.0, max_retries=3)
        client._session().get = Mock(return_value=_resp(404, "not found", url="https://example.test/missing"))

        with patch("product_stock_monitor.http_client.time.sleep", autospec=True):
            res = client.fetch_text("https://example.test/missing")

        self.assertFalse(res.ok)
        self.assertEqual(client._session().get.call_count, 1)
        self.assertEqual(res.status_code, 404)
        self.assertIsNone(res.text)

    def test_transport_exception_becomes_failed_result(self) -> None:
        client = HttpClient(timeout_seconds=1.0)
        client._session().get = Mock(side_effect=requests.ConnectionError("connection refused"))

        res = client.fetch_text("https://example.test/p")

        self.assertFalse(res.ok)
        self.assertIsNone(res.status_code)
        self.assertEqual(res.error, "ConnectionError: connection refused")
        self.assertEqual(res.url, "https://example.test/p")

    def test_proxy_is_passed_to_requests(self) -> None:
        client = HttpClient(timeout_seconds=2.0, proxy_url="http://127.0.0.1:3128")
        client._session().get = Mock(return_value=_resp(200, "<html></html>"))

        client.fetch_text("https://example.test/p")

        kwargs = client._session().get.call_args.kwargs
        self.assertEqual(kwargs["proxies"], {"http": "http://127.0.0.1:3128", "https": "http://127.0.0.1:3128"})
        self.assertEqual(kwargs["timeout"], (2.0, 2.0))
        self.assertIn("User-Agent", kwargs["headers"])


if __name__ == "__main__":
    unittest.main()
