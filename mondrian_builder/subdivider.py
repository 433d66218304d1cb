"""
Recursive canvas subdivision.

A region is split while it is larger than a quarter of the canvas along an
axis:

    wide and tall  -> four quadrants around a random (rx, ry)
    wide only      -> left / right halves around a random rx
    tall only      -> top / bottom halves around a random ry
    otherwise      -> leaf, handed to the fill policy

Every split leaves at least ``smallest_subsection`` pixels on both sides.
Split points are drawn directly from the valid range, and an interval too
narrow to honour the minimum is cut at its midpoint instead.
"""

import logging

from .canvas import (InvalidInputError, Region, canvas_size,
                     validate_canvas, validate_size)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Minimum length, in pixels, of either side of a split.
SMALLEST_SUBSECTION = 10


# ---------------------------------------------------------------------------
# Subdivider
# ---------------------------------------------------------------------------

class Subdivider:
    """
    Splits canvas regions and hands the leaves to a fill policy.

    Args:
        rng:                 Random source exposing ``randint(a, b)``.
        smallest_subsection: Minimum side length produced by a split.
    """

    def __init__(self, rng, smallest_subsection=SMALLEST_SUBSECTION):
        if smallest_subsection < 1:
            raise InvalidInputError(
                "smallest_subsection must be at least 1, got {}".format(
                    smallest_subsection)
            )
        self.rng = rng
        self.smallest_subsection = smallest_subsection

    def split_point(self, lo, hi):
        """
        Choose a coordinate in ``[lo, hi]`` that cuts the interval in two.

        Draws uniformly from ``[lo + smallest_subsection,
        hi - smallest_subsection]``.  Falls back to ``(lo + hi) // 2`` when
        that range is empty, clamped so the result lies strictly inside
        ``(lo, hi)``.  Intervals shorter than 2 pixels cannot be split.
        """
        if hi - lo < 2:
            raise InvalidInputError(
                "Cannot split interval [{}, {}]".format(lo, hi)
            )
        low = lo + self.smallest_subsection
        high = hi - self.smallest_subsection
        if low > high:
            log.debug("Interval [%d, %d] too narrow, splitting at midpoint",
                      lo, hi)
            return max(lo + 1, min(hi - 1, (lo + hi) // 2))
        return self.rng.randint(low, high)

    def leaves(self, width, height, region=None):
        """
        Yield the leaf regions of one subdivision, in paint order.

        Draws split points from the random source exactly as
        :meth:`subdivide` does, without touching a canvas.

        Args:
            width:  Canvas width used for the quarter-size thresholds.
            height: Canvas height used for the quarter-size thresholds.
            region: Starting region.  Default: the whole canvas, which must
                    be at least 300x300.

        Raises:
            InvalidInputError: If the whole canvas is smaller than 300x300.
        """
        if region is None:
            validate_size(width, height)
            region = Region(0, width, 0, height)
        return self._walk(region, width // 4, height // 4)

    def subdivide(self, canvas, fill_policy, region=None):
        """
        Subdivide *region* of *canvas* and fill every leaf, in place.

        Args:
            canvas:      Canvas to paint (list of rows or NumPy array).
            fill_policy: Object with ``fill(canvas, region)``.
            region:      Starting region.  Default: the whole canvas.

        Returns:
            Number of leaf regions filled.

        Raises:
            InvalidInputError: If *region* is omitted and the canvas is None
                               or smaller than 300x300.
        """
        if region is None:
            width, height = validate_canvas(canvas)
        else:
            width, height = canvas_size(canvas)
        count = 0
        for leaf in self.leaves(width, height, region):
            fill_policy.fill(canvas, leaf)
            count += 1
        return count

    def _walk(self, region, max_w, max_h):
        x1, x2, y1, y2 = region
        wide = region.width > max_w and region.width >= 2
        tall = region.height > max_h and region.height >= 2

        if wide and tall:
            ry = self.split_point(y1, y2)
            rx = self.split_point(x1, x2)
            log.debug("Quad split %s at x=%d y=%d", tuple(region), rx, ry)
            quadrants = (
                Region(x1, rx, y1, ry),
                Region(x1, rx, ry, y2),
                Region(rx, x2, ry, y2),
                Region(rx, x2, y1, ry),
            )
            for quadrant in quadrants:
                yield from self._walk(quadrant, max_w, max_h)
        elif wide:
            rx = self.split_point(x1, x2)
            log.debug("Vertical split %s at x=%d", tuple(region), rx)
            yield from self._walk(Region(x1, rx, y1, y2), max_w, max_h)
            yield from self._walk(Region(rx, x2, y1, y2), max_w, max_h)
        elif tall:
            ry = self.split_point(y1, y2)
            log.debug("Horizontal split %s at y=%d", tuple(region), ry)
            yield from self._walk(Region(x1, x2, y1, ry), max_w, max_h)
            yield from self._walk(Region(x1, x2, ry, y2), max_w, max_h)
        else:
            yield region
