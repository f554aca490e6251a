"""Shape descriptions, as given by the document before layout."""

from .compositor import Stroke


class Ellipse:
    """Ellipse containing optional content.

    :param width:
        ``'auto'``, a length or a percentage of the parent width, see
        :mod:`shapebox.layout.size`.
    :param height:
        ``'auto'``, a length or a percentage of the parent height.
    :param fill:
        Interior color, a color name or :obj:`None`.
    :param stroke:
        Outline color, a :class:`shapebox.compositor.Stroke` or :obj:`None`.
        A stroke without width uses the ``stroke_width`` option.
    :param padding:
        Distance between the bounding box and the content area, a length or
        a percentage of the parent width.
    :param alignment:
        Position of the content in its area, see
        :func:`shapebox.compositor.normalize_alignment`.
    :param content:
        Measurable and paintable node, see :mod:`shapebox.content`.

    """
    def __init__(self, width='auto', height='auto', fill=None, stroke=None,
                 padding=None, alignment=None, content=None):
        self.width = width
        self.height = height
        self.fill = fill
        if stroke is not None and not isinstance(stroke, Stroke):
            stroke = Stroke(stroke)
        self.stroke = stroke
        self.padding = padding
        self.alignment = alignment
        self.content = content

    def __repr__(self):
        return (
            f'<{type(self).__name__} {self.width!r} × {self.height!r}'
            f'{" with content" if self.content is not None else ""}>')
