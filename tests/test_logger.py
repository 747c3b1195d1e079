# test_logger.py

import logging

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from treeline.logger import Logger


class TestLogger:

    def teardown_method(self):
        for name in ("treeline.test.file", "treeline.test.quiet"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_enabled_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "treeline.log"
        logger = Logger("treeline.test.file", logging_enabled=True, log_file=str(log_file))
        logger.info("rendering tree")
        assert "INFO - rendering tree" in log_file.read_text()

    def test_disabled_logger_has_null_handler(self):
        Logger("treeline.test.quiet")
        handlers = logging.getLogger("treeline.test.quiet").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
