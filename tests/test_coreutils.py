import os
import sys
import logging
import tempfile

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from unittest.mock import patch
from src.coreutils.env import env_get, log_dir_from_env, log_level_from_env
from src.coreutils.logging import log_function_call, resolve_level, setup_logging


class TestEnv(unittest.TestCase):
    @patch.dict(os.environ, {"ARITHMETIC_TEST_KEY": "value"})
    def test_env_get(self):
        self.assertEqual(env_get("ARITHMETIC_TEST_KEY"), "value")
        self.assertEqual(env_get("ARITHMETIC_MISSING_KEY", "fallback"), "fallback")
        self.assertIsNone(env_get("ARITHMETIC_MISSING_KEY"))

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        self.assertEqual(log_level_from_env(), "INFO")
        self.assertEqual(log_dir_from_env(), "logs")

    @patch.dict(os.environ, {"ARITHMETIC_LOG_LEVEL": "debug", "ARITHMETIC_LOG_DIR": "/tmp/x"})
    def test_configured_values(self):
        self.assertEqual(log_level_from_env(), "DEBUG")
        self.assertEqual(log_dir_from_env(), "/tmp/x")


class TestLogging(unittest.TestCase):
    def test_resolve_level(self):
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level("ERROR"), logging.ERROR)
        self.assertEqual(resolve_level(logging.WARNING), logging.WARNING)

    def test_resolve_level_unknown(self):
        with self.assertRaises(ValueError):
            resolve_level("LOUD")

    @patch("src.coreutils.logging.logging.basicConfig")
    @patch("src.coreutils.logging.logging.FileHandler")
    def test_setup_logging_creates_log_dir(self, mock_file_handler, mock_basic_config):
        with tempfile.TemporaryDirectory() as tmp:
            log_dir = os.path.join(tmp, "nested", "logs")

            logger = setup_logging("DEBUG", log_dir=log_dir)

            self.assertTrue(os.path.isdir(log_dir))
            self.assertIsInstance(logger, logging.Logger)

        mock_basic_config.assert_called_once()
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], logging.DEBUG)
        log_file = mock_file_handler.call_args.args[0]
        self.assertTrue(log_file.name.startswith("arithmetic_"))

    def test_log_function_call(self):
        with self.assertLogs("src.coreutils.logging", level="INFO") as captured:
            log_function_call("add", a=3, b=4)
        self.assertIn("Calling add with params: {'a': 3, 'b': 4}", captured.output[0])


if __name__ == "__main__":
    unittest.main()
