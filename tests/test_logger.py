import os
import pathlib
import tempfile
import time
import unittest
from unittest import mock

from assetlint.lib.logger import (
    LogContext,
    cleanup_old_logs,
    get_current_log_file,
    get_logger,
    get_logs_dir,
    reset_session,
)


class LoggerSessionTests(unittest.TestCase):
    def setUp(self):
        self.home = tempfile.mkdtemp()
        patcher = mock.patch.dict(os.environ, {"ASSETLINT_HOME": self.home})
        patcher.start()
        self.addCleanup(patcher.stop)
        reset_session()
        self.addCleanup(reset_session)

    def test_session_log_file_lives_under_home(self):
        logger = get_logger("assetlint")
        logger.info("hello")

        log_file = pathlib.Path(get_current_log_file("assetlint"))
        self.assertEqual(log_file.parent, pathlib.Path(self.home) / "logs")
        self.assertTrue(log_file.name.startswith("assetlint_"))
        self.assertIn("hello", log_file.read_text(encoding="utf-8"))

    def test_loggers_share_session_timestamp(self):
        main_file = pathlib.Path(get_logger("assetlint").log_file).name
        renamer_file = pathlib.Path(get_logger("renamer").log_file).name
        self.assertEqual(main_file.split("_", 1)[1], renamer_file.split("_", 1)[1])

    def test_unknown_logger_has_no_file(self):
        self.assertIsNone(get_current_log_file("nonexistent"))

    def test_cleanup_removes_only_stale_logs(self):
        logs_dir = get_logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)
        stale = logs_dir / "assetlint_20000101_000000.log"
        fresh = logs_dir / "assetlint_recent.log"
        stale.write_text("old")
        fresh.write_text("new")
        old = time.time() - 30 * 86400
        os.utime(stale, (old, old))

        self.assertEqual(cleanup_old_logs(max_days=7), 1)
        self.assertFalse(stale.exists())
        self.assertTrue(fresh.exists())

    def test_cleanup_without_logs_dir(self):
        self.assertEqual(cleanup_old_logs(), 0)


class LogContextTests(unittest.TestCase):
    def setUp(self):
        self.logger = get_logger("assetlint")

    def test_records_phase_timing(self):
        timings = {}
        with LogContext(self.logger, "asset_discovery", timings) as ctx:
            pass
        self.assertIn("asset_discovery", timings)
        self.assertEqual(timings["asset_discovery"], ctx.elapsed)
        self.assertGreaterEqual(ctx.elapsed, 0.0)

    def test_failure_is_logged_and_propagated(self):
        timings = {}
        with self.assertLogs("assetlint.assetlint", level="ERROR") as logs:
            with self.assertRaises(RuntimeError):
                with LogContext(self.logger, "rename", timings):
                    raise RuntimeError("disk full")
        self.assertIn("[rename] failed", logs.output[0])
        self.assertIn("rename", timings)

    def test_log_timings_orders_slowest_first(self):
        with self.assertLogs("assetlint.assetlint", level="INFO") as logs:
            self.logger.log_timings({"config_loading": 0.01, "asset_name_check": 0.5})
        self.assertIn("asset_name_check", logs.output[1])
        self.assertIn("config_loading", logs.output[2])


if __name__ == "__main__":
    unittest.main()
