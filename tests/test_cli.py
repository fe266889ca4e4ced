from __future__ import annotations

import io
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from product_stock_monitor.cli import main
from product_stock_monitor.http_client import FetchResult


_PAGE = (
    "<html><body><div class='product-summary'>"
    "<h1 class='product-title'>Boden Standard NX 6</h1><p class='stock'>Only 1 in stock</p>"
    "</div></body></html>"
)


class TestCli(unittest.TestCase):
    def _run(self, argv: list[str], fetch) -> tuple[int, str, str]:
        out = io.StringIO()
        err = io.StringIO()
        with mock.patch.dict(os.environ, {"MONITOR_LOG": "1"}):
            with mock.patch("product_stock_monitor.cli.HttpClient.fetch_text", autospec=True, side_effect=fetch):
                with redirect_stdout(out), redirect_stderr(err):
                    code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_runs_given_targets(self) -> None:
        def fetch(_self, url: str) -> FetchResult:
            return FetchResult(url=url, status_code=200, ok=True, text=_PAGE, error=None, elapsed_ms=1)

        code, out, err = self._run(
            ["--targets", "https://www.paddleshop.co.uk/products/a, https://unknown.test/x"],
            fetch,
        )

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Status for Boden Standard NX 6 is in stock"])
        self.assertIn("skipping target", err)
        self.assertIn("unknown.test", err)

    def test_all_failed_exits_nonzero(self) -> None:
        def fetch(_self, url: str) -> FetchResult:
            return FetchResult(url=url, status_code=None, ok=False, text=None, error="ConnectionError: refused", elapsed_ms=1)

        code, out, _err = self._run(["--targets", "https://www.vandsport.dk/produkt/a"], fetch)

        self.assertEqual(code, 1)
        self.assertIn("Error occurred while updating", out)

    def test_no_supported_targets_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run(["--targets", "https://unknown.test/x"], lambda _self, url: None)
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
