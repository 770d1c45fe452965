# fsm_logic_designer/utils/logging_setup.py
"""
Logging configuration for the FSM Logic Designer.

The core modules only create module level loggers. A host application calls
`setup_global_logging` once; if it wants to show log output in its own
widgets it passes a `QtLogSignal` and connects to `log_received`.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

CONSOLE_FORMAT = '%(asctime)s.%(msecs)03d [%(levelname)-8s] [%(name)-20.20s] %(message)s'
CONSOLE_DATE_FORMAT = '%H:%M:%S'


class QtLogSignal(QObject):
    """Signal emitter for forwarding log records to the UI."""
    log_received = pyqtSignal(str, int)  # formatted message, level


class SignalLogHandler(logging.Handler):
    """Logging handler emitting every formatted record through a QtLogSignal."""

    def __init__(self, log_signal: QtLogSignal, level: int = logging.DEBUG):
        super().__init__(level)
        self.log_signal = log_signal
        self.setFormatter(logging.Formatter('[%(levelname)s] [%(name)s] %(message)s'))

    def emit(self, record: logging.LogRecord):
        try:
            msg = self.format(record)
            self.log_signal.log_received.emit(msg, record.levelno)
        except Exception:
            self.handleError(record)


def setup_global_logging(level: int = logging.INFO,
                         log_signal: Optional[QtLogSignal] = None) -> Optional[SignalLogHandler]:
    """
    Sets up the root logger with a console handler and, if `log_signal` is
    given, a handler forwarding records to it. Returns that handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    ui_handler = None
    if log_signal is not None:
        ui_handler = SignalLogHandler(log_signal)
        root_logger.addHandler(ui_handler)

    logging.info("Global logging system initialized.")
    return ui_handler
