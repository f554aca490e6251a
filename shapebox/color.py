"""Resolve color names and values.

Colors are :mod:`tinycss2.color4` colors. Named colors are looked up in an
explicit :class:`Palette` given to the caller, falling back to CSS named
colors, so that no global mutable table is involved during layout.

"""

from tinycss2.color4 import Color, parse_color


class ColorError(ValueError):
    """Color cannot be resolved."""


def rgb(hex_string):
    """Return the color for an hexadecimal string like ``'2a631a'``.

    The leading ``#`` is optional, 3, 4, 6 and 8 digits forms are accepted.

    """
    digits = hex_string.strip().removeprefix('#')
    if len(digits) not in (3, 4, 6, 8) or not all(
            digit in '0123456789abcdefABCDEF' for digit in digits):
        raise ColorError(f'Invalid hexadecimal color: {hex_string!r}')
    return parse_color(f'#{digits}')


def is_color(value):
    return isinstance(value, Color)


def to_rgba(color):
    """Return the ``(red, green, blue, alpha)`` sRGB channels of ``color``."""
    red, green, blue = color.to('srgb').coordinates
    return red, green, blue, color.alpha


class Palette:
    """Immutable table of named colors.

    ``colors`` maps names to colors, CSS color strings or hexadecimal
    strings.

    """
    def __init__(self, colors=None):
        self._colors = {}
        for name, value in (colors or {}).items():
            self._colors[name.lower()] = self._parse(value)

    def __contains__(self, name):
        return self.get(name) is not None

    def __iter__(self):
        return iter(self._colors)

    def __len__(self):
        return len(self._colors)

    @staticmethod
    def _parse(value):
        if is_color(value):
            return value
        color = parse_color(value)
        if color is None:
            try:
                color = rgb(value)
            except ColorError:
                raise ColorError(f'Invalid color: {value!r}') from None
        if not is_color(color):
            # currentcolor has no meaning outside of a cascade.
            raise ColorError(f'Invalid color: {value!r}')
        return color

    def get(self, name, default=None):
        """Return the color called ``name``, or ``default``."""
        key = name.lower()
        if key in self._colors:
            return self._colors[key]
        color = parse_color(key)
        return color if is_color(color) else default

    def __getitem__(self, name):
        color = self.get(name)
        if color is None:
            raise ColorError(f'Unknown color name: {name!r}')
        return color

    def updated(self, colors):
        """Return a new palette with extra or replaced ``colors``."""
        palette = Palette()
        palette._colors = {**self._colors, **Palette(colors)._colors}
        return palette

    def resolve(self, value):
        """Return the color corresponding to ``value``.

        ``value`` can be a color, :obj:`None`, a name defined in this
        palette or a CSS color string.

        """
        if value is None or is_color(value):
            return value
        if not isinstance(value, str):
            raise ColorError(f'Invalid color: {value!r}')
        if value.lower() in self._colors:
            return self._colors[value.lower()]
        return self._parse(value)


DEFAULT_PALETTE = Palette({
    'black': '#000000',
    'gray': '#aaaaaa',
    'silver': '#dddddd',
    'white': '#ffffff',
    'navy': '#001f3f',
    'blue': '#0074d9',
    'aqua': '#7fdbff',
    'teal': '#39cccc',
    'eastern': '#239dad',
    'purple': '#b10dc9',
    'fuchsia': '#f012be',
    'maroon': '#85144b',
    'red': '#ff4136',
    'orange': '#ff851b',
    'yellow': '#ffdc00',
    'olive': '#3d9970',
    'green': '#2ecc40',
    'lime': '#01ff70',
    'forest': '#43a127',
    'conifer': '#9feb52',
})
