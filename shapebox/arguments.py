"""Arguments given to shape functions.

A call like ``ellipse("Hello", width: 3cm, fill: forest)`` is parsed
elsewhere into positional and keyword values. This module extracts these
values with the expected kinds and binds them to shapes.

Values are identifiers (:class:`Ident`), strings, numbers, booleans,
lengths (:class:`shapebox.units.Dimension`), colors and content nodes.

"""

import re
from collections import namedtuple

from . import DEFAULT_OPTIONS
from .color import DEFAULT_PALETTE, ColorError, is_color
from .compositor import HORIZONTAL_ALIGNMENTS, VERTICAL_ALIGNMENTS, Stroke
from .content import ShapeContent, TextContent
from .logger import LOGGER
from .shapes import Ellipse
from .units import LENGTH_UNITS, Dimension, is_percentage

IDENTIFIER_RE = re.compile(r'^[^\W\d][\w-]*$')

KeywordArgument = namedtuple('KeywordArgument', ('key', 'value'))

_MISSING = object()


class ArgumentError(ValueError):
    """Argument is missing or has an unexpected kind."""


class Ident(str):
    """An identifier."""
    def __new__(cls, string):
        if not is_identifier(string):
            raise ArgumentError(f'Invalid identifier: {string!r}')
        return super().__new__(cls, string)

    def __repr__(self):
        return f'Ident({str(self)!r})'


def is_identifier(string):
    return bool(IDENTIFIER_RE.match(string))


class ScaleSize(namedtuple('ScaleSize', ('value', 'scaled'))):
    """A size, absolute or scaled relatively to the parent size."""

    @classmethod
    def from_value(cls, value):
        if is_percentage(value):
            return cls(value.value / 100, True)
        elif isinstance(value, Dimension):
            return cls(value, False)
        return cls(value, True)

    def to_size_spec(self):
        """Return the equivalent width or height specification."""
        if self.scaled:
            return Dimension(self.value * 100, '%')
        return self.value


class Kind:
    """Kind of expected value, converting matching values."""
    def __init__(self, name, match, convert=None):
        self.name = name
        self.match = match
        self.convert = convert

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'

    def from_value(self, value):
        if not self.match(value):
            raise ArgumentError(f'expected {self.name}')
        return value if self.convert is None else self.convert(value)


class OptionalKind(Kind):
    """Kind whose value can be explicitly set to nothing.

    The ``none`` and ``default`` identifiers give :obj:`None`.

    """
    def __init__(self, kind):
        super().__init__(kind.name, kind.match, kind.convert)

    def from_value(self, value):
        if isinstance(value, Ident) and value in ('none', 'default'):
            return None
        return super().from_value(value)


def optional(kind):
    return OptionalKind(kind)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_size(value):
    return (
        isinstance(value, Dimension) and
        (value.unit in LENGTH_UNITS or
         (value.unit is None and value.value == 0)))


EXPRESSION = Kind('expression', lambda value: True)
IDENT = Kind('identifier', lambda value: isinstance(value, Ident))
STRING = Kind(
    'string',
    lambda value: isinstance(value, str) and not isinstance(value, Ident))
NUMBER = Kind('number', _is_number)
BOOLEAN = Kind('boolean', lambda value: isinstance(value, bool))
SIZE = Kind('size', _is_size)
SCALE_SIZE = Kind(
    'number or size',
    lambda value: _is_size(value) or _is_number(value) or is_percentage(value),
    ScaleSize.from_value)


def color_kind(palette):
    """Return the kind of colors given by value or by name in ``palette``."""
    def convert(value):
        try:
            if isinstance(value, Ident):
                value = str(value)
            return palette.resolve(value)
        except ColorError as exception:
            raise ArgumentError(str(exception)) from exception

    return Kind(
        'color', lambda value: is_color(value) or isinstance(value, str),
        convert)


class Arguments:
    """Positional and keyword arguments passed to a function."""
    def __init__(self, positional=(), keyword=()):
        self.positional = list(positional)
        if isinstance(keyword, dict):
            keyword = keyword.items()
        self.keyword = [KeywordArgument(*item) for item in keyword]

    def __repr__(self):
        return f'<{type(self).__name__} {self.positional} {self.keyword}>'

    @property
    def is_empty(self):
        """Whether both positional and keyword lists are empty."""
        return not self.positional and not self.keyword

    def add_positional(self, value):
        self.positional.append(value)

    def add_keyword(self, key, value):
        self.keyword.append(KeywordArgument(key, value))

    def get_positional(self, kind):
        """Extract the first positional argument, raise if missing."""
        return _expect(self.get_positional_opt(kind, _MISSING), kind)

    def get_positional_opt(self, kind, default=None):
        """Extract the first positional argument, or return ``default``."""
        if not self.positional:
            return default
        return kind.from_value(self.positional.pop(0))

    def positionals(self):
        """Iterate over positional arguments, removing them."""
        positional, self.positional = self.positional, []
        return iter(positional)

    def get_keyword(self, name, kind):
        """Extract the keyword argument called ``name``, raise if missing."""
        return _expect(self.get_keyword_opt(name, kind, _MISSING), kind)

    def get_keyword_opt(self, name, kind, default=None):
        """Extract the keyword argument called ``name``, or ``default``."""
        for index, argument in enumerate(self.keyword):
            if argument.key == name:
                return kind.from_value(self.keyword.pop(index).value)
        return default

    def next_keyword(self):
        """Extract any keyword argument, or return :obj:`None`."""
        if self.keyword:
            return self.keyword.pop()

    def keywords(self):
        """Iterate over keyword arguments, removing them."""
        keyword, self.keyword = self.keyword, []
        return iter(keyword)

    def clear(self):
        self.positional.clear()
        self.keyword.clear()


def _expect(value, kind):
    if value is _MISSING:
        raise ArgumentError(f'expected {kind.name}')
    return value


def _content(value, options):
    if value is None:
        return None
    elif isinstance(value, Ellipse):
        return ShapeContent(value)
    elif isinstance(value, str) and not isinstance(value, Ident):
        return TextContent(value, font_size=options['font_size'])
    elif hasattr(value, 'measure') and hasattr(value, 'paint_into'):
        return value
    raise ArgumentError('expected content')


def _alignment(keywords):
    horizontal, vertical = 'center', 'horizon'
    for keyword in keywords:
        if keyword in ('top', 'bottom', 'horizon'):
            vertical = keyword
        elif keyword in HORIZONTAL_ALIGNMENTS:
            horizontal = keyword
        elif keyword in VERTICAL_ALIGNMENTS:
            vertical = keyword
        else:
            raise ArgumentError(f'Invalid alignment: {keyword}')
    return horizontal, vertical


def ellipse_from_arguments(arguments, palette=None, **options):
    """Return the :class:`Ellipse` described by ``arguments``.

    Supported keywords are ``width``, ``height``, ``fill``, ``stroke``,
    ``stroke_width``, ``padding`` and ``align``, that can be given multiple
    times. The optional positional argument is the content. Other arguments
    are ignored with a warning.

    """
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    options = new_options
    if palette is None:
        palette = DEFAULT_PALETTE
    color = optional(color_kind(palette))

    content = _content(arguments.get_positional_opt(EXPRESSION), options)

    sizes = {}
    for name in ('width', 'height'):
        size = arguments.get_keyword_opt(name, optional(SCALE_SIZE))
        sizes[name] = 'auto' if size is None else size.to_size_spec()

    fill = arguments.get_keyword_opt('fill', color)
    stroke_color = arguments.get_keyword_opt('stroke', color)
    stroke_width = arguments.get_keyword_opt('stroke_width', optional(SIZE))
    stroke = None if stroke_color is None else Stroke(
        stroke_color, stroke_width)
    padding = arguments.get_keyword_opt('padding', optional(SIZE))

    alignment = []
    while (keyword := arguments.get_keyword_opt('align', IDENT)) is not None:
        alignment.append(keyword)

    for value in arguments.positionals():
        LOGGER.warning('Ignored extra positional argument: %r', value)
    for key, value in arguments.keywords():
        LOGGER.warning('Ignored unknown argument %r: %r', key, value)

    return Ellipse(
        sizes['width'], sizes['height'], fill=fill, stroke=stroke,
        padding=padding, content=content,
        alignment=_alignment(alignment) if alignment else None)
