# renderer/canvas.py
import logging
import os
import numpy as np
import pygame
from PIL import Image
from core.colour import Colour
from core.utils import is_within_range
from renderer.tone_mapping import PPM_MAX_COLOUR, quantize

logger = logging.getLogger(__name__)

PPM_MAX_LINE_LENGTH = 70

def is_supported_format(extension: str) -> bool:
    """
    True if save() can write files with this extension: ppm, or any format
    Pillow has a writer for.
    """
    extension = "." + extension.lower().lstrip(".")
    if extension == ".ppm":
        return True
    image_format = Image.registered_extensions().get(extension)
    return image_format is not None and image_format in Image.SAVE

class Canvas:
    """
    A width x height grid of colours, black until written. Pixels are stored
    in a (width, height, 3) float array, the layout pygame.surfarray expects.
    """
    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions cannot be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not is_within_range(0, self.width - 1, x) or not is_within_range(0, self.height - 1, y):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def get_pixel(self, x: int, y: int) -> Colour:
        self._check_bounds(x, y)
        r, g, b = self.pixels[x, y]
        return Colour(r, g, b)

    def set_pixel(self, x: int, y: int, colour: Colour):
        self._check_bounds(x, y)
        self.pixels[x, y] = (colour.red, colour.green, colour.blue)

    def to_ppm(self) -> str:
        """
        Serialises the canvas as plain-text PPM (P3). Each canvas row starts a
        new line and no line exceeds PPM_MAX_LINE_LENGTH characters.
        """
        lines = ["P3", f"{self.width} {self.height}", str(PPM_MAX_COLOUR)]
        channels = quantize(self.pixels)
        for y in range(self.height):
            line = ""
            for x in range(self.width):
                for value in channels[x, y]:
                    token = str(int(value))
                    if not line:
                        line = token
                    elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                        lines.append(line)
                        line = token
                    else:
                        line += " " + token
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        # PIL expects (height, width, channels).
        channels = quantize(self.pixels).astype(np.uint8)
        return Image.fromarray(np.ascontiguousarray(channels.transpose(1, 0, 2)), "RGB")

    def to_surface(self) -> pygame.Surface:
        return pygame.surfarray.make_surface(quantize(self.pixels).astype(np.uint8))

    def save(self, path: str):
        """
        Writes the canvas to path; .ppm files are written as P3 text, any
        other extension is handed to Pillow.
        """
        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w", newline="\n") as f:
                f.write(self.to_ppm())
        else:
            self.to_image().save(path)
        logger.debug(f"Wrote {self.width}x{self.height} canvas to {path}")
