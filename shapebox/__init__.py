"""Shape layout for documents.

Size ellipses containing text or other content, compute their geometry and
list the operations needed to paint them.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

from .units import Dimension

VERSION = __version__ = '0.3.0'

#: Default values for layout options.
#:
#: :param alignment:
#:     Position of the content in an ellipse when the shape doesn't set
#:     one, a ``(horizontal, vertical)`` pair.
#: :param stroke_width:
#:     Width of outlines whose stroke doesn't set one.
#: :param font_size:
#:     Font size of text content created from arguments.
#: :type palette: :class:`color.Palette`
#: :param palette:
#:     Colors available by name, :data:`color.DEFAULT_PALETTE` when
#:     :obj:`None`.
#: :param bool uncompressed_pdf:
#:     Whether PDF content should be left uncompressed.
DEFAULT_OPTIONS = {
    'alignment': ('center', 'horizon'),
    'stroke_width': Dimension(1, 'pt'),
    'font_size': Dimension(11, 'pt'),
    'palette': None,
    'uncompressed_pdf': False,
}

__all__ = [
    'DEFAULT_OPTIONS', 'DEFAULT_PALETTE', 'LOGGER', 'PROGRESS_LOGGER',
    'VERSION', 'ArgumentError', 'Arguments', 'BlockContent', 'ColorError',
    'DegenerateGeometryError', 'Dimension', 'Ellipse', 'MeasurementError',
    'Paint', 'Palette', 'ShapeContent', 'Stroke', 'TextContent',
    'UnresolvedParentError', '__version__', 'fixed', 'layout_ellipse',
    'relative', 'rgb']


# Import after setting the options, as they are used in other modules
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: I001, E402
from .color import DEFAULT_PALETTE, ColorError, Palette, rgb  # noqa: E402
from .layout import layout_ellipse  # noqa: E402
from .compositor import Paint, Stroke  # noqa: E402
from .layout.geometry import DegenerateGeometryError  # noqa: E402
from .layout.size import UnresolvedParentError, fixed, relative  # noqa: E402
from .content import (  # noqa: E402
    BlockContent, MeasurementError, ShapeContent, TextContent)
from .shapes import Ellipse  # noqa: E402
from .arguments import ArgumentError, Arguments  # noqa: E402
