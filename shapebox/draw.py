"""Replay draw operations onto a pydyf stream."""

from contextlib import contextmanager

from tinycss2.color4 import parse_color

from .compositor import (
    DrawText,
    FillEllipse,
    FillRectangle,
    PaintContentAt,
    StrokeEllipse,
    StrokeRectangle,
)
from .logger import LOGGER

BLACK = parse_color('black')

#: Name of the font resource used for text.
FONT_NAME = 'F1'


@contextmanager
def stacked(stream):
    """Save and restore stream context when used with the ``with`` keyword."""
    stream.push_state()
    try:
        yield
    finally:
        stream.pop_state()


def draw_operations(stream, operations):
    """Draw ``operations`` on ``stream``, in order."""
    for operation in operations:
        draw_operation(stream, operation)


def draw_operation(stream, operation):
    if isinstance(operation, FillEllipse):
        with stacked(stream):
            stream.set_color(operation.color)
            stream.ellipse(operation.box)
            stream.fill()
    elif isinstance(operation, StrokeEllipse):
        with stacked(stream):
            stream.set_color(operation.color, stroke=True)
            stream.set_line_width(operation.width)
            stream.ellipse(operation.box)
            stream.stroke()
    elif isinstance(operation, PaintContentAt):
        with stacked(stream):
            draw_operations(stream, operation.operations)
    elif isinstance(operation, FillRectangle):
        with stacked(stream):
            stream.set_color(operation.color)
            stream.rectangle(*operation.rect)
            stream.fill()
    elif isinstance(operation, StrokeRectangle):
        with stacked(stream):
            stream.set_color(operation.color, stroke=True)
            stream.set_line_width(operation.width)
            stream.rectangle(*operation.rect)
            stream.stroke()
    elif isinstance(operation, DrawText):
        draw_text(stream, operation)
    else:
        LOGGER.warning('Ignored unknown draw operation: %r', operation)


def draw_text(stream, text):
    """Draw a line of text, ``text.y`` being the baseline."""
    if not text.text:
        return
    with stacked(stream):
        stream.set_color(BLACK if text.color is None else text.color)
        stream.begin_text()
        stream.set_font_size(FONT_NAME, text.font_size)
        # The page is flipped, flip text back.
        stream.set_text_matrix(1, 0, 0, -1, text.x, text.y)
        stream.show_text_string(text.text)
        stream.end_text()
