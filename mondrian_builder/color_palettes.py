"""
Fixed colour palette for Mondrian-style artwork.

Every filled region receives exactly one of four hues.  Colours are RGB
tuples (0-255) so they can be written straight into a list-of-rows canvas
or broadcast into an ``(H, W, 3)`` NumPy array.

Palette (in draw order):
    RED     -- (255, 0, 0)
    YELLOW  -- (255, 255, 0)
    CYAN    -- (0, 255, 255)
    WHITE   -- (255, 255, 255)

BLACK is the default background of a fresh canvas.  It is what shows
through as the grid lines between regions and is never picked by a fill
policy.
"""


# ---------------------------------------------------------------------------
# Palette colours
# ---------------------------------------------------------------------------

RED = (255, 0, 0)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
WHITE = (255, 255, 255)

BLACK = (0, 0, 0)

# Index order matters: the uniform policy draws an index into this tuple.
PALETTE = (RED, YELLOW, CYAN, WHITE)

COLOR_NAMES = {
    RED: 'red',
    YELLOW: 'yellow',
    CYAN: 'cyan',
    WHITE: 'white',
    BLACK: 'black',
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------

def normalize_color(color):
    """
    Coerce a canvas cell value to a plain ``(r, g, b)`` tuple of ints.

    Accepts tuples, lists and NumPy pixel rows alike.
    """
    return (int(color[0]), int(color[1]), int(color[2]))


def is_palette_color(color):
    """Return True if *color* is one of the four fill hues."""
    return normalize_color(color) in PALETTE


def color_name(color):
    """
    Human-readable name for a canvas colour.

    Args:
        color: RGB triple (any sequence of three ints).

    Returns:
        Name string, or ``'#rrggbb'`` for colours outside the palette.
    """
    rgb = normalize_color(color)
    name = COLOR_NAMES.get(rgb)
    if name is None:
        return '#{:02x}{:02x}{:02x}'.format(*rgb)
    return name
