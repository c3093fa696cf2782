import logging
import unittest

from core.logging_config import setup_logging


class LoggingConfigTests(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._level = root.level
        self._handlers = list(root.handlers)

    def tearDown(self):
        root = logging.getLogger()
        root.handlers = self._handlers
        root.setLevel(self._level)

    def test_sets_level(self):
        setup_logging("DEBUG")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_invalid_level_defaults_to_info(self):
        setup_logging("NONEXISTENT")
        self.assertEqual(logging.getLogger().level, logging.INFO)

    def test_handler_added_once(self):
        setup_logging("INFO")
        setup_logging("INFO")
        named = [h for h in logging.getLogger().handlers if h.get_name() == "funding-heatmap-console"]
        self.assertEqual(len(named), 1)

    def test_quiets_urllib3(self):
        setup_logging("DEBUG")
        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
