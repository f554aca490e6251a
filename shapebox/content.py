"""Content that can be put inside shapes.

Content nodes are not related by inheritance. Any object with these two
methods can be used:

``measure(available_width, available_height, options=None)``
    Return the natural ``(width, height)`` of the content when laid out in
    the available space, whose lengths can be infinite.

``paint_into(rect, alignment, containing_block=None, options=None)``
    Return the draw operations of the content laid out in ``rect``.
    ``containing_block`` is the ``(width, height)`` the content has been
    measured in.

``options`` are the layout options given to
:func:`shapebox.layout.layout_ellipse`, :obj:`None` for the defaults. Colors
are resolved with their palette.

Both methods must be side-effect free, as they can be called more than once
during a single layout.

"""

from math import inf, isinf

from . import DEFAULT_OPTIONS
from .color import DEFAULT_PALETTE
from .compositor import (
    DrawText,
    FillRectangle,
    Stroke,
    StrokeRectangle,
    align_offset,
    normalize_alignment,
)
from .layout import paint_ellipse, resolve_options_paint, resolve_shape_size
from .layout.geometry import Rect
from .layout.size import resolve_padding, resolve_size
from .units import Dimension, to_pixels

# Advance of a character relative to the font size, for an average font.
CHARACTER_RATIO = 0.5


class MeasurementError(ValueError):
    """Content cannot be measured in the given space."""


def _palette(options):
    palette = (options or DEFAULT_OPTIONS).get('palette')
    return DEFAULT_PALETTE if palette is None else palette


class TextContent:
    """Leaf text, wrapped at spaces when its width is constrained.

    Metrics are approximated with a constant advance per character, text
    shaping is left to the painting backend.

    """
    def __init__(self, text, font_size=Dimension(11, 'pt'), line_height=1.2,
                 character_ratio=CHARACTER_RATIO, color=None, align='start'):
        self.text = text
        self.font_size = to_pixels(font_size)
        self.line_height = line_height
        self.character_ratio = character_ratio
        self.color = color
        self.align = align

    def __repr__(self):
        return f'<{type(self).__name__} {self.text!r}>'

    def text_width(self, text):
        return len(text) * self.character_ratio * self.font_size

    def lines(self, available_width=inf):
        """Return the lines of text fitting in ``available_width``."""
        if self.font_size <= 0:
            raise MeasurementError(f'Invalid font size: {self.font_size}')
        if available_width < 0:
            raise MeasurementError(
                f'Cannot fit text in a negative width: {available_width}')
        lines = []
        for paragraph in self.text.split('\n'):
            words = paragraph.split(' ')
            line = words.pop(0)
            for word in words:
                candidate = f'{line} {word}'
                if self.text_width(candidate) <= available_width:
                    line = candidate
                else:
                    lines.append(line)
                    line = word
            lines.append(line)
        return lines

    def measure(self, available_width, available_height, options=None):
        lines = self.lines(available_width)
        width = max(self.text_width(line) for line in lines)
        height = len(lines) * self.line_height * self.font_size
        return width, height

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        color = _palette(options).resolve(self.color)
        horizontal = normalize_alignment(self.align)[0]
        line_height = self.line_height * self.font_size
        # Baseline of the first line, assuming an ascent of 80%.
        baseline = rect.y + (line_height - self.font_size) / 2 + (
            0.8 * self.font_size)
        operations = []
        for line in self.lines(rect.width):
            x = rect.x + align_offset(
                horizontal, rect.width, self.text_width(line))
            operations.append(
                DrawText(x, baseline, line, self.font_size, color))
            baseline += line_height
        return operations


class ShapeContent:
    """Nested shape, sized against the space available in its parent.

    Percentage paddings refer to the width of this space, both when the
    shape is measured and when it is painted.

    """
    def __init__(self, shape):
        self.shape = shape

    def __repr__(self):
        return f'<{type(self).__name__} {self.shape!r}>'

    def measure(self, available_width, available_height, options=None):
        return resolve_shape_size(
            self.shape, (available_width, available_height), options)

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        padding = None
        if containing_block is not None:
            padding = resolve_padding(self.shape.padding, containing_block[0])
        return paint_ellipse(
            self.shape, rect.width, rect.height, (rect.x, rect.y), padding,
            **(options or {}))


class BlockContent:
    """Rectangular block stacking its children vertically.

    Its ``width`` and ``height`` are ``'auto'`` to wrap the children, or
    lengths and percentages of the available space. ``fill`` and ``stroke``
    colors are resolved like the ones of ellipses.

    """
    def __init__(self, children=(), width='auto', height='auto', fill=None,
                 stroke=None):
        self.children = list(children)
        self.width = width
        self.height = height
        self.fill = fill
        if stroke is not None and not isinstance(stroke, Stroke):
            stroke = Stroke(stroke)
        self.stroke = stroke

    def __repr__(self):
        return f'<{type(self).__name__} {len(self.children)} children>'

    def measure(self, available_width, available_height, options=None):
        return resolve_size(
            self.width, self.height, (available_width, available_height),
            _Stack(self.children), options=options)

    def paint_into(self, rect, alignment, containing_block=None,
                   options=None):
        block_paint = resolve_options_paint(self, options)
        operations = []
        if block_paint.fill is not None:
            operations.append(FillRectangle(rect, block_paint.fill))
        stroke = block_paint.stroke
        if stroke is not None and stroke.color is not None:
            if stroke.width > 0:
                operations.append(
                    StrokeRectangle(rect, stroke.color, stroke.width))

        horizontal = normalize_alignment(alignment)[0]
        y = rect.y
        available_height = rect.height
        for child in self.children:
            child_block = rect.width, available_height
            child_width, child_height = child.measure(*child_block, options)
            x = rect.x + align_offset(horizontal, rect.width, child_width)
            child_rect = Rect(x, y, child_width, child_height)
            operations.extend(
                child.paint_into(child_rect, alignment, child_block, options))
            y += child_height
            available_height = max(0, available_height - child_height)
        return operations


class _Stack:
    """Children of a block, measured as a whole."""
    def __init__(self, children):
        self.children = children

    def measure(self, available_width, available_height, options=None):
        width = height = 0
        for child in self.children:
            child_width, child_height = child.measure(
                available_width, available_height, options)
            width = max(width, child_width)
            height += child_height
            if not isinf(available_height):
                available_height = max(0, available_height - child_height)
        return width, height
