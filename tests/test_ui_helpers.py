import unittest

from tests._fixtures import make_asset
from ui.helpers import (
    detail_header_html,
    format_percentage,
    format_price,
    format_rate,
    format_usd,
    opportunity_text,
    tile_html,
    trend_arrow,
)


class UiHelpersTests(unittest.TestCase):
    def test_format_usd(self):
        self.assertEqual(format_usd(12_345_678), "$12.35M")
        self.assertEqual(format_usd(1_000_000), "$1.00M")
        self.assertEqual(format_usd(4_500), "$4.50K")
        self.assertEqual(format_usd(12), "$12.00")
        self.assertEqual(format_usd(0), "$0.00")
        self.assertEqual(format_usd(12_000_000, decimals=0), "$12M")

    def test_percent_and_rate(self):
        self.assertEqual(format_percentage(12.346), "+12.35%")
        self.assertEqual(format_percentage(0), "+0.00%")
        self.assertEqual(format_percentage(-3.2), "-3.20%")
        self.assertEqual(format_rate(0.000125), "0.0125%")
        self.assertEqual(format_price(1.5), "$1.5000")

    def test_opportunity_text(self):
        self.assertIn("Long positions", opportunity_text(make_asset("BTC", 12.5)))
        short = opportunity_text(make_asset("ETH", -40))
        self.assertIn("Short positions", short)
        self.assertIn("+40.00%", short)

    def test_tile_html(self):
        html = tile_html(make_asset("BTC", 60, 2_000_000))
        self.assertIn("rgb(34, 197, 94)", html)
        self.assertIn("border-color:white", html)
        self.assertIn("$2.00M", html)
        self.assertIn(trend_arrow(60), html)
        quiet = tile_html(make_asset("DOGE", -3))
        self.assertIn("border-color:transparent", quiet)
        self.assertIn("▼", quiet)

    def test_tile_html_escapes_asset_name(self):
        html = tile_html(make_asset("<img src=x onerror=alert(1)>", 10))
        self.assertNotIn("<img src=x", html)
        self.assertIn("&lt;img src=x onerror=alert(1)&gt;", html)

    def test_detail_header_escapes_name_and_shows_side(self):
        header = detail_header_html(make_asset("A'B<script>", -25), "#EF4444")
        self.assertNotIn("<script>", header)
        self.assertIn("A&#x27;B&lt;script&gt;", header)
        self.assertIn("Short", header)
        self.assertIn("background:#EF4444", header)


if __name__ == "__main__":
    unittest.main()
