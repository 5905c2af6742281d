# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self._handler: Optional[logging.Handler] = None
        if logging_enabled:
            self.enable(log_file)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def enable(self, log_file: Optional[str] = None) -> None:
        """
        Route DEBUG output to a file, or to stdout when log_file is "-".

        Replaces the output set up by any earlier call.

        Args:
            log_file: Path to log file. Defaults to logs/chalkee_debug.log
                      under the project root.
        """
        if log_file == "-":
            handler = logging.StreamHandler(sys.stdout)
        else:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                log_file = os.path.join(project_root, 'logs', 'chalkee_debug.log')
            handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._drop_handler()
        self._handler = handler
        self._logger.addHandler(handler)
        self._logger.setLevel(logging.DEBUG)

    def disable(self) -> None:
        """Detach and close the output added by enable()."""
        self._drop_handler()
        self._logger.setLevel(logging.NOTSET)

    def _drop_handler(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)


logger = Logger('chalkee')

def configure_logging(enabled: bool = True, log_file: Optional[str] = None) -> None:
    """Turn debug logging for the package on, or off again."""
    if enabled:
        logger.enable(log_file)
    else:
        logger.disable()
