"""
Mondrian painting entry points.

Paints a caller-owned canvas in place by subdividing it into rectangles and
filling each leaf with a palette colour:

    paint_uniform   -- every hue equally likely
    paint_weighted  -- hue probabilities follow the region's position
    paint           -- either of the above by name, or a custom policy

Randomness comes from an injectable source.  Pass ``seed`` for a
reproducible painting or ``rng`` to share a generator across calls; the
same seed always produces the same layout and the same colours.

Usage:
    from mondrian_builder import new_canvas, paint_weighted

    canvas = new_canvas(600, 400)
    paint_weighted(canvas, seed=7)
"""

import logging
import random

from .canvas import (
    InvalidInputError,
    new_canvas,
    validate_canvas,
)
from .color_palettes import BLACK
from .fill_policies import FillPolicy, get_policy
from .rendering import canvas_to_image
from .subdivider import Subdivider

log = logging.getLogger(__name__)


def _resolve_rng(seed, rng):
    if rng is not None:
        return rng
    return random.Random(seed)


# ---------------------------------------------------------------------------
# Public API -- painting
# ---------------------------------------------------------------------------

def paint(canvas, policy='uniform', seed=None, rng=None):
    """
    Paint Mondrian-style art onto *canvas*, in place.

    Args:
        canvas: List of rows of RGB tuples, or an ``(H, W, 3)`` NumPy array.
        policy: Policy name (``'uniform'``, ``'weighted'`` or the aliases
                ``'basic'`` / ``'complex'``) or a :class:`FillPolicy`
                instance.  An instance brings its own random source, which
                is then also used for the split points unless *rng* is
                given.
        seed:   Optional seed for a fresh ``random.Random``.  Not allowed
                together with a policy instance.
        rng:    Optional random source; takes precedence over *seed*.

    Raises:
        InvalidInputError: If the canvas is None, smaller than 300x300, or
                           the policy name is unknown, or a seed is
                           given alongside a policy instance.
    """
    width, height = validate_canvas(canvas)

    if isinstance(policy, FillPolicy):
        if seed is not None:
            raise InvalidInputError(
                "seed cannot be combined with a FillPolicy instance; "
                "seed the policy's rng instead"
            )
        fill_policy = policy
        rng = rng if rng is not None else policy.rng
    else:
        rng = _resolve_rng(seed, rng)
        fill_policy = get_policy(policy, rng)

    subdivider = Subdivider(rng)
    count = subdivider.subdivide(canvas, fill_policy)

    log.info("Painted %dx%d canvas with %s policy (%d regions)",
             width, height, fill_policy.name or type(fill_policy).__name__,
             count)


def paint_uniform(canvas, seed=None, rng=None):
    """
    Paint *canvas* with every leaf colour drawn uniformly from the palette.

    Raises:
        InvalidInputError: If the canvas is None or smaller than 300x300.
    """
    paint(canvas, 'uniform', seed=seed, rng=rng)


def paint_weighted(canvas, seed=None, rng=None):
    """
    Paint *canvas* with leaf colours biased by position.

    Red gathers top-left, cyan bottom-right, yellow top-right and white
    bottom-left.

    Raises:
        InvalidInputError: If the canvas is None or smaller than 300x300.
    """
    paint(canvas, 'weighted', seed=seed, rng=rng)


# ---------------------------------------------------------------------------
# Public API -- layout and generation
# ---------------------------------------------------------------------------

def plan_regions(width, height, seed=None, rng=None):
    """
    Compute a subdivision layout without painting anything.

    Only split points are drawn, so for a given seed the layout matches a
    painting only if that painting draws no colours in between; use it to
    inspect how a canvas size breaks down.

    Returns:
        List of leaf :class:`~mondrian_builder.canvas.Region` in paint order.

    Raises:
        InvalidInputError: If either dimension is below 300.
    """
    subdivider = Subdivider(_resolve_rng(seed, rng))
    return list(subdivider.leaves(width, height))


def generate_mondrian(size=(600, 600), policy='uniform', seed=None,
                      background=BLACK):
    """
    Build a fresh canvas, paint it and return it as a Pillow image.

    Args:
        size:       (width, height) in pixels, each at least 300.
        policy:     Policy name or :class:`FillPolicy` instance.
        seed:       Optional random seed.
        background: RGB colour of the grid lines.

    Returns:
        PIL.Image.Image in RGB mode.
    """
    width, height = size
    canvas = new_canvas(width, height, background=background)
    paint(canvas, policy, seed=seed)
    return canvas_to_image(canvas)
