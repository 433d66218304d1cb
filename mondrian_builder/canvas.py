"""
Canvas model for Mondrian painting.

A canvas is a mutable 2-D grid of RGB colours, indexed ``canvas[row][col]``.
Two representations are accepted everywhere in the package:

    list of rows  -- ``[[(r, g, b), ...], ...]``, one tuple per cell
    NumPy array   -- shape ``(height, width, 3)``, dtype ``uint8``

The NumPy layout is the same one Pillow uses for RGB images, so painted
arrays convert to images without copying channel data around.
"""

from collections import namedtuple

try:
    import numpy as np
except ImportError:
    raise ImportError(
        "NumPy is required for canvas handling.  Install with: pip install numpy"
    )

from .color_palettes import BLACK


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Smallest accepted width and height, in pixels.
MIN_PAINTING_SIZE = 300


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InvalidInputError(ValueError):
    """Raised when a canvas (or painting request) cannot be painted."""


# ---------------------------------------------------------------------------
# Region
# ---------------------------------------------------------------------------

class Region(namedtuple('Region', ['x1', 'x2', 'y1', 'y2'])):
    """
    Rectangle of canvas cells pending subdivision or fill.

    Bounds are half-open: columns ``x1 .. x2 - 1`` and rows ``y1 .. y2 - 1``.
    """

    __slots__ = ()

    @property
    def width(self):
        return self.x2 - self.x1

    @property
    def height(self):
        return self.y2 - self.y1

    def center(self, width, height):
        """
        Centre of the region normalised by the canvas size.

        Args:
            width:  Canvas width in pixels.
            height: Canvas height in pixels.

        Returns:
            (xc, yc) floats in [0, 1].
        """
        xc = (self.x1 + self.x2) / 2.0 / width
        yc = (self.y1 + self.y2) / 2.0 / height
        return (xc, yc)

    def interior(self, width, height):
        """
        Cell bounds that a fill writes to.

        The rectangle is inset by one pixel on every side and clipped to the
        canvas, leaving the region border as a grid line.

        Returns:
            (row_start, row_end, col_start, col_end), half-open.
        """
        return (
            max(self.y1 + 1, 0),
            min(self.y2 - 1, height),
            max(self.x1 + 1, 0),
            min(self.x2 - 1, width),
        )


# ---------------------------------------------------------------------------
# Size and validation
# ---------------------------------------------------------------------------

def canvas_size(canvas):
    """
    Return ``(width, height)`` of a canvas in either representation.
    """
    if isinstance(canvas, np.ndarray):
        if canvas.ndim != 3 or canvas.shape[2] != 3:
            raise InvalidInputError(
                "Canvas array must have shape (height, width, 3), got {}".format(
                    canvas.shape)
            )
        return (int(canvas.shape[1]), int(canvas.shape[0]))

    height = len(canvas)
    width = len(canvas[0]) if height else 0
    return (width, height)


def validate_canvas(canvas, min_size=MIN_PAINTING_SIZE):
    """
    Check that *canvas* exists and is at least *min_size* on both axes.

    Args:
        canvas:   Canvas to check (list of rows or NumPy array).
        min_size: Minimum accepted width and height.

    Returns:
        (width, height) of the canvas.

    Raises:
        InvalidInputError: If the canvas is None or too small.
    """
    if canvas is None:
        raise InvalidInputError("Canvas is required, got None")

    width, height = canvas_size(canvas)
    validate_size(width, height, min_size)
    return (width, height)


def validate_size(width, height, min_size=MIN_PAINTING_SIZE):
    """
    Check that a canvas of *width* x *height* is large enough to paint.

    Raises:
        InvalidInputError: If either dimension is below *min_size*.
    """
    if width < min_size or height < min_size:
        raise InvalidInputError(
            "Canvas must be at least {0}x{0} pixels, got {1}x{2}".format(
                min_size, width, height)
        )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def new_canvas(width, height, background=BLACK, as_array=True):
    """
    Create a blank canvas filled with *background*.

    Args:
        width:      Number of columns.
        height:     Number of rows.
        background: RGB tuple every cell starts with.
        as_array:   Return an ``(height, width, 3)`` uint8 NumPy array when
                    True, otherwise a list of row lists of tuples.

    Returns:
        The new canvas.

    Raises:
        InvalidInputError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise InvalidInputError(
            "Canvas dimensions must be positive, got {}x{}".format(width, height)
        )

    if as_array:
        canvas = np.empty((height, width, 3), dtype=np.uint8)
        canvas[:, :] = background
        return canvas

    background = tuple(background)
    return [[background] * width for _ in range(height)]


# ---------------------------------------------------------------------------
# Fill
# ---------------------------------------------------------------------------

def fill_region(canvas, region, color):
    """
    Paint the interior of *region* with a single colour, in place.

    Only cells strictly inside the region are written; the one-pixel border
    keeps whatever value it had.

    Args:
        canvas: Canvas to modify.
        region: :class:`Region` to fill.
        color:  RGB tuple.
    """
    width, height = canvas_size(canvas)
    row_start, row_end, col_start, col_end = region.interior(width, height)
    if row_start >= row_end or col_start >= col_end:
        return

    if isinstance(canvas, np.ndarray):
        canvas[row_start:row_end, col_start:col_end] = color
        return

    span = [color] * (col_end - col_start)
    for row in range(row_start, row_end):
        canvas[row][col_start:col_end] = span
