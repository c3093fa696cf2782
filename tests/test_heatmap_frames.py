import unittest

try:
    from tabs.heatmap_tab import build_assets_frame, build_treemap
    DEPS_OK = True
except Exception:
    DEPS_OK = False

from tests._fixtures import make_asset


@unittest.skipUnless(DEPS_OK, "Missing dependencies for heatmap frame tests")
class HeatmapFrameTests(unittest.TestCase):
    def test_frame_columns_and_order(self):
        assets = [make_asset("BTC", 60, 3_000_000, premium=0.001), make_asset("ETH", -7, 1_000_000)]
        df = build_assets_frame(assets)
        self.assertEqual(list(df["Asset"]), ["BTC", "ETH"])
        self.assertEqual(list(df["Side"]), ["Long", "Short"])
        self.assertEqual(list(df["Bucket"]), ["strong_long", "modest_short"])
        self.assertAlmostEqual(df["Premium (%)"].iloc[0], 0.1)

    def test_empty_frame_keeps_columns(self):
        df = build_assets_frame([])
        self.assertTrue(df.empty)
        self.assertIn("Annualized Return (%)", df.columns)

    def test_treemap_builds(self):
        fig = build_treemap([make_asset("BTC", 60, 3_000_000), make_asset("ETH", -25, 1_000_000)], "#0F172A")
        self.assertEqual(fig.layout.paper_bgcolor, "#0F172A")
        self.assertGreaterEqual(len(fig.data), 1)


if __name__ == "__main__":
    unittest.main()
