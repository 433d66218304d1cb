"""
In-memory rendering of painted canvases.

Converts either canvas representation to an ``(H, W, 3)`` uint8 NumPy
array or a Pillow RGB image.  Nothing here touches the filesystem; callers
that want a file can call ``Image.save`` themselves.
"""

try:
    from PIL import Image
except ImportError:
    raise ImportError(
        "Pillow is required for canvas rendering.  Install with: pip install Pillow"
    )

try:
    import numpy as np
except ImportError:
    raise ImportError(
        "NumPy is required for canvas rendering.  Install with: pip install numpy"
    )

from .canvas import InvalidInputError, canvas_size


def canvas_to_array(canvas):
    """
    Return the canvas as a ``(height, width, 3)`` uint8 array.

    NumPy canvases are returned as a uint8 view/copy of themselves; list
    canvases are packed row by row.

    Raises:
        InvalidInputError: If the canvas is None or empty.
    """
    if canvas is None:
        raise InvalidInputError("Canvas is required, got None")

    width, height = canvas_size(canvas)
    if width == 0 or height == 0:
        raise InvalidInputError(
            "Cannot render an empty canvas ({}x{})".format(width, height)
        )

    if isinstance(canvas, np.ndarray):
        return canvas.astype(np.uint8, copy=False)

    return np.array(canvas, dtype=np.uint8).reshape((height, width, 3))


def canvas_to_image(canvas):
    """
    Wrap a painted canvas in a Pillow RGB image.

    Returns:
        PIL.Image.Image of size ``(width, height)``.
    """
    arr = canvas_to_array(canvas)
    return Image.fromarray(np.ascontiguousarray(arr))
