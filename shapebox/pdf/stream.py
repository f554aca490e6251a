"""PDF stream."""

import pydyf

from ..logger import LOGGER


class Stream(pydyf.Stream):
    """PDF stream object with extra features."""
    def __init__(self, resources, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._resources = resources
        self._current_color = self._current_color_stroke = None
        self._current_alpha = self._current_alpha_stroke = None

    def pop_state(self):
        if self.stream and self.stream[-1] == b'q':
            self.stream.pop()
        else:
            super().pop_state()
        self._current_color = self._current_color_stroke = None
        self._current_alpha = self._current_alpha_stroke = None

    def transform(self, a=1, b=0, c=0, d=1, e=0, f=0):
        super().set_matrix(a, b, c, d, e, f)

    def set_color(self, color, stroke=False):
        """Set the fill or stroke color, including its opacity."""
        *channels, alpha = color
        self.set_alpha(alpha, stroke)

        attribute = '_current_color_stroke' if stroke else '_current_color'
        current = (color.space, *channels)
        if current == getattr(self, attribute):
            return
        setattr(self, attribute, current)

        if color.space in ('srgb', 'hsl', 'hwb'):
            self.set_color_rgb(*color.to('srgb').coordinates, stroke)
        else:
            LOGGER.warning(
                'Unsupported color space %s, use sRGB instead', color.space)
            self.set_color_rgb(*(*channels[:3], 0, 0)[:3], stroke)

    def set_alpha(self, alpha, stroke=False):
        """Set the fill or stroke opacity with an ExtGState resource."""
        key = f'{"A" if stroke else "a"}{alpha}'
        attribute = '_current_alpha_stroke' if stroke else '_current_alpha'
        if key == getattr(self, attribute):
            return
        setattr(self, attribute, key)
        states = self._resources['ExtGState']
        if key not in states:
            states[key] = pydyf.Dictionary({'CA' if stroke else 'ca': alpha})
        self.set_state(key)

    def ellipse(self, box):
        """Add the outline of ``box``, an ellipse, to the current path."""
        (x, y), curves = box.bezier_curves()
        self.move_to(x, y)
        for curve in curves:
            self.curve_to(*curve)
        self.close()
