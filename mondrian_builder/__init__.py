"""
Mondrian Builder - procedural Mondrian-style artwork.

Recursively subdivides a rectangular pixel canvas into regions and fills
each region with one of four fixed hues, leaving one-pixel grid lines
between them.  Two colouring modes are provided: uniform (every hue equally
likely) and weighted (hues gather in the canvas corners).

Canvases are plain lists of RGB rows or ``(H, W, 3)`` NumPy arrays and are
painted in place; :func:`canvas_to_image` wraps a result in a Pillow image.
"""

from .canvas import (MIN_PAINTING_SIZE, InvalidInputError, Region,
                     canvas_size, validate_canvas, validate_size, new_canvas,
                     fill_region)
from .color_palettes import (RED, YELLOW, CYAN, WHITE, BLACK, PALETTE,
                             color_name, is_palette_color)
from .fill_policies import (FillPolicy, UniformPolicy, WeightedPolicy,
                            POLICIES, get_policy, region_weights)
from .subdivider import SMALLEST_SUBSECTION, Subdivider
from .rendering import canvas_to_array, canvas_to_image
from .painter import (paint, paint_uniform, paint_weighted, plan_regions,
                      generate_mondrian)

__version__ = '0.1.0'
