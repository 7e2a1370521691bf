# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

PPM_MAX_COLOUR = 255

@njit
def quantize_kernel(linear_image, output_image, max_colour):
    """
    Scales each channel from [0, 1] to [0, max_colour], rounding half up and
    clamping out-of-range intensities.
    """
    for x in range(linear_image.shape[0]):
        for y in range(linear_image.shape[1]):
            for c in range(linear_image.shape[2]):
                value = int(math.floor(linear_image[x, y, c] * max_colour + 0.5))
                output_image[x, y, c] = min(max_colour, max(0, value))

def quantize(linear_image, max_colour=PPM_MAX_COLOUR):
    """
    Convert a linear float image of shape (width, height, 3) to integer channels.
    """
    output = np.empty(linear_image.shape, dtype=np.int64)
    quantize_kernel(np.ascontiguousarray(linear_image, dtype=np.float64), output, max_colour)
    return output
