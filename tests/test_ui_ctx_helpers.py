import unittest

from ui.ctx import get_ctx, get_ctx_callable, require_keys


class UiCtxHelpersTests(unittest.TestCase):
    def test_require_keys_raises_when_missing(self):
        with self.assertRaises(KeyError) as ctx:
            require_keys({"a": 1}, ["a", "c", "b"], scope="test")
        self.assertIn("b, c", str(ctx.exception))

    def test_get_ctx_returns_value(self):
        self.assertEqual(get_ctx({"x": 42}, "x", scope="test"), 42)

    def test_get_ctx_callable_rejects_non_callable(self):
        with self.assertRaises(TypeError):
            get_ctx_callable({"fn": 42}, "fn", scope="test")
        self.assertIs(get_ctx_callable({"fn": len}, "fn"), len)

    def test_get_ctx_missing_key(self):
        with self.assertRaises(KeyError):
            get_ctx({}, "missing", scope="test")


if __name__ == "__main__":
    unittest.main()
