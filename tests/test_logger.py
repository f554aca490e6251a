"""Test the capture of logged messages."""

import logging

from shapebox.logger import LOGGER, PROGRESS_LOGGER, capture_logs


def test_capture_logs():
    handlers, level = LOGGER.handlers, LOGGER.level
    with capture_logs() as logs:
        LOGGER.warning('Ignored %s', 'value')
        PROGRESS_LOGGER.info('Step 1 - Resolving ellipse size')
        LOGGER.debug('Hidden')
    assert logs == ['WARNING: Ignored value']
    assert LOGGER.handlers is handlers
    assert LOGGER.level == level


def test_capture_logs_level():
    with capture_logs(level=logging.DEBUG) as logs:
        LOGGER.debug('Shown')
    assert logs == ['DEBUG: Shown']
