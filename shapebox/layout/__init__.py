"""Lay out shapes and their content.

The layout of a shape is a straight pass with no state kept between calls:

1. resolve the width and the height, measuring the content if needed;
2. compute the ellipse and the rectangle reserved for the content;
3. list the draw operations: fill, stroke, then content.

Used values are in CSS pixels.

"""

from collections import namedtuple

from .. import DEFAULT_OPTIONS
from ..color import DEFAULT_PALETTE
from ..compositor import Paint, Stroke, paint
from ..logger import PROGRESS_LOGGER
from ..units import to_pixels
from .geometry import compute_geometry
from .size import resolve_padding, resolve_size

EllipseLayout = namedtuple(
    'EllipseLayout', ('width', 'height', 'box', 'inscribed', 'operations'))


def _options(options):
    new_options = DEFAULT_OPTIONS.copy()
    if options:
        new_options.update(options)
    return new_options


def resolve_paint(shape, palette=None, stroke_width=0):
    """Return the :class:`Paint` of ``shape`` with resolved colors."""
    if palette is None:
        palette = DEFAULT_PALETTE
    stroke = shape.stroke
    if stroke is not None:
        width = stroke_width if stroke.width is None else (
            to_pixels(stroke.width))
        stroke = Stroke(palette.resolve(stroke.color), width)
    return Paint(palette.resolve(shape.fill), stroke)


def resolve_options_paint(shape, options):
    """Return the :class:`Paint` of ``shape`` for the layout ``options``."""
    options = _options(options)
    return resolve_paint(
        shape, options['palette'], to_pixels(options['stroke_width']))


def resolve_shape_size(shape, containing_block, options=None):
    """Return the used ``(width, height)`` of ``shape``."""
    padding = resolve_padding(shape.padding, containing_block[0])
    return resolve_size(
        shape.width, shape.height, containing_block, shape.content, padding,
        _options(options))


def paint_ellipse(shape, width, height, position=(0, 0), padding=None,
                  **options):
    """Return the draw operations of ``shape`` with a resolved size.

    ``padding`` is the used padding, resolved against ``width`` when
    :obj:`None`. Nested content is measured and painted with ``options``.

    """
    return _lay_out(shape, width, height, position, padding, options)[2]


def _lay_out(shape, width, height, position, padding, options):
    options = _options(options)
    if padding is None:
        padding = resolve_padding(shape.padding, width)
    shape_paint = resolve_options_paint(shape, options)
    stroke_width = 0 if shape_paint.stroke is None else (
        shape_paint.stroke.width)

    PROGRESS_LOGGER.info('Step 2 - Computing ellipse geometry')
    x, y = position
    box, inscribed = compute_geometry(
        width, height, stroke_width, padding, x, y)

    PROGRESS_LOGGER.info('Step 3 - Listing draw operations')
    alignment = shape.alignment
    if alignment is None:
        alignment = options['alignment']
    operations = paint(
        box, inscribed, shape_paint, shape.content, alignment,
        options=options)
    return box, inscribed, operations


def layout_ellipse(shape, containing_block, position=(0, 0), **options):
    """Lay out an ellipse and list its draw operations.

    :param shape: An :class:`shapebox.shapes.Ellipse`.
    :param containing_block:
        The ``(width, height)`` of the parent. Unresolved lengths are
        :obj:`None`, ``'auto'`` or infinite.
    :param position: The top-left corner of the bounding box.
    :param options:
        The ``options`` parameter includes by default the
        :data:`shapebox.DEFAULT_OPTIONS` values. They are also used for
        nested content.
    :returns: An :class:`EllipseLayout`.

    """
    options = _options(options)
    PROGRESS_LOGGER.info('Step 1 - Resolving ellipse size')
    padding = resolve_padding(shape.padding, containing_block[0])
    width, height = resolve_size(
        shape.width, shape.height, containing_block, shape.content, padding,
        options)
    box, inscribed, operations = _lay_out(
        shape, width, height, position, padding, options)
    return EllipseLayout(width, height, box, inscribed, operations)
