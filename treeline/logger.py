# logger.py

import sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            # "-" keeps the log on stderr so it never mixes with a rendered tree
            if log_file in (None, "-"):
                handler = logging.StreamHandler(sys.stderr)
            else:
                handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
