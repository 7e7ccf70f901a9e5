import unittest

from loguru import logger

from driveexport.util import log as log_module
from driveexport.util.log import get_logger, setup_logging


class TestLog(unittest.TestCase):
    def test_get_logger_binds_module(self) -> None:
        records = []
        sink_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
        try:
            get_logger("driveexport.tests").info("hello")
        finally:
            logger.remove(sink_id)

        self.assertEqual(records[-1]["extra"]["module"], "driveexport.tests")
        self.assertEqual(records[-1]["message"], "hello")

    def test_setup_logging_runs_once(self) -> None:
        log_module._configured = False
        setup_logging("WARNING")
        self.assertTrue(log_module._configured)
        setup_logging("DEBUG")
        self.assertTrue(log_module._configured)


if __name__ == "__main__":
    unittest.main()
