"""Ellipse geometry.

The ellipse fills its bounding box. Its content area is the bounding box
shrunk by the padding on each side: an axis-aligned rectangle, not the
largest rectangle inscribed in the curve. Content corners may thus overflow
the outline when the padding is small.

"""

from collections import namedtuple

# Inspired by Cairo Cookbook
# http://cairographics.org/cookbook/roundedrectangles/
ARC_TO_BEZIER = 4 * (2 ** .5 - 1) / 3


class DegenerateGeometryError(ValueError):
    """The shape or its content area is empty or inverted."""


class Rect(namedtuple('Rect', ('x', 'y', 'width', 'height'))):
    """Axis-aligned rectangle."""

    def corners(self):
        right, bottom = self.x + self.width, self.y + self.height
        return (
            (self.x, self.y), (right, self.y),
            (right, bottom), (self.x, bottom))

    def contains_rect(self, other):
        return (
            self.x <= other.x and self.y <= other.y and
            other.x + other.width <= self.x + self.width and
            other.y + other.height <= self.y + self.height)

    def translated(self, dx, dy):
        return self._replace(x=self.x + dx, y=self.y + dy)


class EllipseBox(namedtuple('EllipseBox', (
        'center_x', 'center_y', 'semi_axis_x', 'semi_axis_y',
        'stroke_width'))):
    """Resolved ellipse, immutable and recomputed for each layout."""

    @property
    def is_empty(self):
        return self.semi_axis_x == 0 or self.semi_axis_y == 0

    def bounding_box(self):
        return Rect(
            self.center_x - self.semi_axis_x,
            self.center_y - self.semi_axis_y,
            2 * self.semi_axis_x, 2 * self.semi_axis_y)

    def visual_extent(self):
        """Return the bounding box grown by the outer half of the stroke."""
        half = self.stroke_width / 2
        x, y, width, height = self.bounding_box()
        return Rect(x - half, y - half, width + 2 * half, height + 2 * half)

    def contains(self, x, y):
        """Whether the point ``(x, y)`` is inside the ellipse or on it."""
        if self.is_empty:
            return False
        dx = (x - self.center_x) / self.semi_axis_x
        dy = (y - self.center_y) / self.semi_axis_y
        return dx * dx + dy * dy <= 1

    def bezier_curves(self):
        """Return the starting point and the four cubic Bézier segments.

        Each segment is a ``(x1, y1, x2, y2, x3, y3)`` tuple, in clockwise
        order starting from the rightmost point, with y pointing down.

        """
        cx, cy = self.center_x, self.center_y
        rx, ry = self.semi_axis_x, self.semi_axis_y
        kx, ky = ARC_TO_BEZIER * rx, ARC_TO_BEZIER * ry
        return (cx + rx, cy), (
            (cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry),
            (cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy),
            (cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry),
            (cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy))

    def translated(self, dx, dy):
        return self._replace(
            center_x=self.center_x + dx, center_y=self.center_y + dy)


def compute_geometry(width, height, stroke_width=0, padding=0, x=0, y=0):
    """Return the ellipse and its content rectangle.

    The bounding box is ``[x, x + width] × [y, y + height]``. The stroke is
    centered on the outline and doesn't change the reserved box.

    """
    if width < 0 or height < 0:
        raise DegenerateGeometryError(
            f'Negative ellipse size: {width} × {height}')
    if stroke_width < 0:
        raise DegenerateGeometryError(f'Negative stroke width: {stroke_width}')
    if padding < 0:
        raise DegenerateGeometryError(f'Negative padding: {padding}')
    if padding > 0 and (2 * padding >= width or 2 * padding >= height):
        raise DegenerateGeometryError(
            f'Padding {padding} leaves no room for content in a '
            f'{width} × {height} ellipse')

    box = EllipseBox(x + width / 2, y + height / 2, width / 2, height / 2,
                     stroke_width)
    inscribed = Rect(
        x + padding, y + padding, width - 2 * padding, height - 2 * padding)
    return box, inscribed
