"""Log output for interactive use.

trigm only emits records through ``logging.getLogger(__name__)`` loggers
below the ``trigm`` package logger. Applications that configure logging
themselves get those records as usual; `log` is a shortcut for everyone else.
"""

import io
import logging
import os
import sys

console_formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
file_formatter = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s@ L%(lineno)d\n  %(message)s"
)
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(console_formatter)

# open file handlers, keyed by absolute path
_file_handlers = {}


def log(debug=False, path=None):
    """Show trigm's log records on the console, or append them to a file.

    With ``debug`` the records include the layout used for each call, the
    chosen scaling and degree, the matrix powers formed and the norm
    estimates. Otherwise only warnings and errors are shown. Calling `log`
    again with the same ``path`` only changes the level.

    Returns the handler that was attached to the ``trigm`` logger.
    """
    level = logging.DEBUG if debug else logging.WARNING
    if path is None:
        handler = console_handler
    else:
        path = os.path.abspath(path)
        if path not in _file_handlers:
            _file_handlers[path] = logging.FileHandler(path, encoding="utf-8")
            _file_handlers[path].setFormatter(file_formatter)
        handler = _file_handlers[path]

    logger = logging.getLogger("trigm")
    logger.setLevel(level)
    handler.setLevel(level)
    if handler not in logger.handlers:
        logger.addHandler(handler)
    return handler


class CaptureLogHandler(logging.StreamHandler):
    """A logging handler that stores log records and the log text."""

    def __init__(self):
        super().__init__(io.StringIO())
        self.records = []

    def close(self):
        self.stream.close()
        super().close()

    def emit(self, record):
        self.records.append(record)
        super().emit(record)

    def getvalue(self):
        """Text of the records emitted so far."""
        return self.stream.getvalue()
