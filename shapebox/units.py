"""Constants and helpers for units."""

import collections
from math import isinf

import tinycss2

Dimension = collections.namedtuple('Dimension', ['value', 'unit'])

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1 / 0.75,
    'pc': 16,
    'in': 96,
    'cm': 96 / 2.54,
    'mm': 96 / 25.4,
    'q': 96 / 25.4 / 4,
}

LENGTH_UNITS = set(LENGTHS_TO_PIXELS)


def is_percentage(value):
    """Whether ``value`` is a percentage dimension."""
    return isinstance(value, Dimension) and value.unit == '%'


def is_unresolved(value):
    """Whether a reference length is unknown, such as an unconstrained one."""
    return value is None or value == 'auto' or (
        isinstance(value, (int, float)) and isinf(value))


def to_pixels(value):
    """Get number of pixels corresponding to a length.

    ``value`` is a :class:`Dimension` with an absolute unit, or a number
    that is already a length in pixels.

    """
    if isinstance(value, bool):
        raise ValueError(f'Invalid length: {value!r}')
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, Dimension):
        raise ValueError(f'Invalid length: {value!r}')
    if value.value == 0:
        return 0
    unit = (value.unit or 'px').lower()
    if unit not in LENGTHS_TO_PIXELS:
        raise ValueError(f'Unknown length unit: {value.unit!r}')
    return value.value * LENGTHS_TO_PIXELS[unit]


def percentage(value, refer_to):
    """Return the used length of ``value``.

    ``refer_to`` is the length for 100%.

    """
    if is_percentage(value):
        return refer_to * value.value / 100
    return to_pixels(value)


def get_length(token, negative=True, percentage=False):
    """Parse a <length> token."""
    if percentage and token.type == 'percentage':
        if negative or token.value >= 0:
            return Dimension(token.value, '%')
    if token.type == 'dimension' and token.unit.lower() in LENGTH_UNITS:
        if negative or token.value >= 0:
            return Dimension(token.value, token.unit.lower())
    if token.type == 'number' and token.value == 0:
        return Dimension(0, None)


def parse_length(string, negative=True, percentage=True):
    """Parse a length such as ``3cm`` or ``50%``.

    Return a :class:`Dimension`, or :obj:`None` if ``string`` is not a
    single length.

    """
    token = tinycss2.parse_one_component_value(string, skip_comments=True)
    if token.type == 'error':
        return None
    return get_length(token, negative, percentage)
