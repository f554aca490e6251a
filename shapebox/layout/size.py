"""Resolve width and height specifications into used lengths.

Each axis is sized by ``'auto'``, a length :class:`Dimension` or a
percentage :class:`Dimension` of the parent. Automatic axes depend on the
content and are resolved in order: width first with an unconstrained
measure, then height with the width known.

"""

from math import inf

from ..units import Dimension, is_percentage, is_unresolved, to_pixels
from .geometry import DegenerateGeometryError


class UnresolvedParentError(ValueError):
    """Percentage sizing against a parent whose dimension is unknown."""


def fixed(value, unit='px'):
    """Return a size specification for a fixed length."""
    return Dimension(value, unit)


def relative(fraction):
    """Return a size specification for a fraction of the parent size."""
    return Dimension(fraction * 100, '%')


def resolve_length(spec, refer_to, name):
    """Return the used value of a non-automatic ``spec``.

    ``refer_to`` is the parent length for 100%.

    """
    if is_percentage(spec):
        if is_unresolved(refer_to):
            raise UnresolvedParentError(
                f'Cannot resolve {name} {spec.value}% against an '
                f'unresolved parent {name}')
        value = refer_to * spec.value / 100
    else:
        value = to_pixels(spec)
    if value < 0:
        raise DegenerateGeometryError(f'Negative {name}: {value}')
    return value


def resolve_padding(padding, parent_width):
    """Return the used padding.

    Percentages refer to the parent width, even vertically.

    """
    if padding is None:
        return 0
    return resolve_length(padding, parent_width, 'padding')


def _specified(spec, refer_to, name):
    if spec is None or spec == 'auto':
        return None
    return resolve_length(spec, refer_to, name)


def resolve_size(width_spec, height_spec, containing_block, content=None,
                 padding=0, options=None):
    """Return the used ``(width, height)`` of a shape.

    ``containing_block`` is the ``(width, height)`` of the parent, whose
    items can be unresolved. ``padding`` is a used length added on both
    sides of the content for automatic axes. ``content`` is only measured
    when an axis is ``'auto'``, the layout ``options`` are given
    to its ``measure`` method.

    """
    parent_width, parent_height = containing_block
    width = _specified(width_spec, parent_width, 'width')
    height = _specified(height_spec, parent_height, 'height')

    if content is None:
        return (0 if width is None else width, 0 if height is None else height)

    if width is None:
        if height is None:
            available_height = inf
        else:
            available_height = max(0, height - 2 * padding)
        content_width, _ = content.measure(inf, available_height, options)
        width = 2 * padding + content_width

    if height is None:
        available_width = max(0, width - 2 * padding)
        _, content_height = content.measure(available_width, inf, options)
        height = 2 * padding + content_height

    if width < 0 or height < 0:
        raise DegenerateGeometryError(
            f'Content measured a negative size: {width} × {height}')
    return width, height
