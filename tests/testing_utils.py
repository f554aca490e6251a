"""Helpers for tests."""

import functools
import sys
from math import isinf

from shapebox.logger import capture_logs


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function."""
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs() as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper


class FixedContent:
    """Content with a constant natural size, recording measures."""
    def __init__(self, width, height):
        self.size = width, height
        self.measures = []
        self.options = []

    def measure(self, available_width, available_height, options=None):
        self.measures.append((available_width, available_height))
        self.options.append(options)
        return self.size

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        return [('content', rect, alignment)]


class ReflowingContent:
    """Content keeping its area, getting taller when narrower."""
    def __init__(self, width, height):
        self.natural_width = width
        self.area = width * height
        self.measures = []

    def measure(self, available_width, available_height, options=None):
        self.measures.append((available_width, available_height))
        width = self.natural_width
        if not isinf(available_width):
            width = min(width, available_width)
        return width, self.area / width

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        return [('content', rect, alignment)]


class FailingContent:
    """Content that cannot be measured."""
    def __init__(self, exception):
        self.exception = exception

    def measure(self, available_width, available_height, options=None):
        raise self.exception

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        raise self.exception
