"""
Colour-selection policies applied to leaf regions.

    uniform  -- each palette hue with probability 1/4 (alias: basic)
    weighted -- hue probabilities follow the region's position on the
                canvas (alias: complex)

A policy owns its random source and exposes ``fill(canvas, region)``.
Subclasses only decide the colour; writing the interior is shared.
"""

from .canvas import InvalidInputError, canvas_size, fill_region
from .color_palettes import PALETTE, RED, YELLOW, CYAN, WHITE


class FillPolicy:
    """
    Base class for leaf fill strategies.

    Args:
        rng: Random source exposing ``randint(a, b)`` and ``random()``,
             e.g. ``random.Random``.
    """

    name = None

    def __init__(self, rng):
        self.rng = rng

    def choose_color(self, region, width, height):
        raise NotImplementedError

    def fill(self, canvas, region):
        """Pick a colour for *region* and paint its interior in place."""
        width, height = canvas_size(canvas)
        color = self.choose_color(region, width, height)
        fill_region(canvas, region, color)
        return color


class UniformPolicy(FillPolicy):
    """Pick any of the four palette colours with equal probability."""

    name = 'uniform'

    def choose_color(self, region, width, height):
        return PALETTE[self.rng.randint(0, len(PALETTE) - 1)]


def region_weights(region, width, height):
    """
    Position-based colour weights for a region.

    The normalised centre ``(xc, yc)`` splits unit probability into the four
    products of ``{xc, 1 - xc} x {yc, 1 - yc}``:

        red    = (1 - xc)(1 - yc)   top-left
        blue   = xc * yc            bottom-right (drawn as CYAN)
        yellow = (1 - yc) * xc      top-right
        white  = yc * (1 - xc)      bottom-left

    Args:
        region: :class:`~mondrian_builder.canvas.Region`.
        width:  Canvas width.
        height: Canvas height.

    Returns:
        List of ``(color, weight)`` pairs in draw order.  Weights sum to 1.
    """
    xc, yc = region.center(width, height)
    return [
        (RED, (1 - xc) * (1 - yc)),
        (CYAN, xc * yc),
        (YELLOW, (1 - yc) * xc),
        (WHITE, yc * (1 - xc)),
    ]


class WeightedPolicy(FillPolicy):
    """
    Pick colours with probabilities tied to the region centre.

    Produces spatially coherent zones: red gathers top-left, cyan
    bottom-right, yellow top-right and white bottom-left.
    """

    name = 'weighted'

    def choose_color(self, region, width, height):
        weights = region_weights(region, width, height)
        u = self.rng.random()
        cumulative = 0.0
        for color, weight in weights[:-1]:
            cumulative += weight
            if u < cumulative:
                return color
        return weights[-1][0]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

POLICIES = {
    'uniform': UniformPolicy,
    'basic': UniformPolicy,
    'weighted': WeightedPolicy,
    'complex': WeightedPolicy,
}


def get_policy(name, rng):
    """
    Instantiate the fill policy registered under *name*.

    Raises:
        InvalidInputError: If *name* is not a known policy.
    """
    policy_cls = POLICIES.get(name)
    if policy_cls is None:
        raise InvalidInputError(
            "Unknown fill policy: {!r} (expected one of {})".format(
                name, ', '.join(sorted(POLICIES)))
        )
    return policy_cls(rng)
