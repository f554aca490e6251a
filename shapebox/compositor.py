"""Turn a resolved ellipse into an ordered list of draw operations.

Operations are plain data carrying resolved geometry and colors. Nothing is
drawn here: operations are given to a painting backend, such as
:func:`shapebox.draw.draw_operations`.

"""

from collections import namedtuple

from .layout.geometry import Rect

Paint = namedtuple('Paint', ('fill', 'stroke'), defaults=(None, None))
Stroke = namedtuple('Stroke', ('color', 'width'), defaults=(None,))

FillEllipse = namedtuple('FillEllipse', ('box', 'color'))
StrokeEllipse = namedtuple('StrokeEllipse', ('box', 'color', 'width'))
PaintContentAt = namedtuple(
    'PaintContentAt', ('rect', 'alignment', 'operations'))
FillRectangle = namedtuple('FillRectangle', ('rect', 'color'))
StrokeRectangle = namedtuple('StrokeRectangle', ('rect', 'color', 'width'))
DrawText = namedtuple('DrawText', ('x', 'y', 'text', 'font_size', 'color'))

DEFAULT_ALIGNMENT = ('center', 'horizon')

HORIZONTAL_ALIGNMENTS = {
    'start': 'start', 'left': 'start',
    'center': 'center',
    'end': 'end', 'right': 'end',
}
VERTICAL_ALIGNMENTS = {
    'start': 'start', 'top': 'start',
    'center': 'center', 'horizon': 'center',
    'end': 'end', 'bottom': 'end',
}


def normalize_alignment(alignment):
    """Return ``(horizontal, vertical)`` in ``start``, ``center``, ``end``.

    ``alignment`` is :obj:`None` for the default alignment, a single keyword
    or a ``(horizontal, vertical)`` pair. A single keyword sets the axis it
    belongs to, the other axis stays centered.

    """
    if alignment is None:
        alignment = DEFAULT_ALIGNMENT
    if isinstance(alignment, str):
        keyword = alignment.lower()
        if keyword in ('top', 'bottom', 'horizon'):
            alignment = ('center', keyword)
        else:
            alignment = (keyword, 'horizon')
    horizontal, vertical = alignment
    try:
        return (
            HORIZONTAL_ALIGNMENTS[horizontal.lower()],
            VERTICAL_ALIGNMENTS[vertical.lower()])
    except KeyError:
        raise ValueError(f'Invalid alignment: {alignment!r}') from None


def align_offset(alignment, available, size):
    """Return the offset of ``size`` in ``available`` for one axis."""
    if alignment == 'start':
        return 0
    elif alignment == 'end':
        return available - size
    else:
        assert alignment == 'center'
        return (available - size) / 2


def content_rect(inscribed, content_size, alignment):
    """Return where content of ``content_size`` goes in ``inscribed``."""
    horizontal, vertical = alignment
    width, height = content_size
    return Rect(
        inscribed.x + align_offset(horizontal, inscribed.width, width),
        inscribed.y + align_offset(vertical, inscribed.height, height),
        width, height)


def paint(box, inscribed, paint, content=None, alignment=None,
          content_size=None, options=None):
    """Return the draw operations of an ellipse.

    The order is fixed: fill, stroke, then content. ``content_size`` is the
    natural size of ``content`` when already measured, otherwise it is
    measured in ``inscribed``. Layout ``options`` are given to the content.

    """
    alignment = normalize_alignment(alignment)
    operations = []

    if paint.fill is not None and not box.is_empty:
        operations.append(FillEllipse(box, paint.fill))

    stroke = paint.stroke
    if stroke is not None and stroke.color is not None and not box.is_empty:
        width = box.stroke_width if stroke.width is None else stroke.width
        if width > 0:
            operations.append(StrokeEllipse(box, stroke.color, width))

    if content is not None:
        containing_block = inscribed.width, inscribed.height
        if content_size is None:
            content_size = content.measure(*containing_block, options)
        rect = content_rect(inscribed, content_size, alignment)
        content_operations = content.paint_into(
            rect, alignment, containing_block, options)
        operations.append(
            PaintContentAt(rect, alignment, tuple(content_operations)))

    return operations


def iter_operations(operations):
    """Yield operations in paint order, expanding nested content."""
    for operation in operations:
        yield operation
        if isinstance(operation, PaintContentAt):
            yield from iter_operations(operation.operations)
