"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Logging levels are used for specific purposes:

- warnings are used in ``LOGGER`` for ignored arguments, unsupported color
  spaces, unknown draw operations and empty pages;
- infos are used in ``PROGRESS_LOGGER`` to advertise layout and PDF steps.

"""

import contextlib
import logging

LOGGER = logging.getLogger('shapebox')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('shapebox.progress')


class MessagesHandler(logging.Handler):
    """Handler keeping ``'LEVEL: message'`` strings, progress excluded."""
    def __init__(self, level=logging.INFO):
        super().__init__(level)
        self.messages = []
        self.addFilter(
            lambda record: not record.name.startswith(PROGRESS_LOGGER.name))

    def emit(self, record):
        self.messages.append(f'{record.levelname}: {record.getMessage()}')


@contextlib.contextmanager
def capture_logs(logger='shapebox', level=logging.INFO):
    """Replace the handlers of ``logger`` and yield the logged messages.

    Progress steps are not captured.

    """
    logger = logging.getLogger(logger)
    handler = MessagesHandler(level)
    previous_handlers, previous_level = logger.handlers, logger.level
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.messages
    finally:
        logger.handlers = previous_handlers
        logger.setLevel(previous_level)
