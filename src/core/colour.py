# core/colour.py
from core.utils import float_is_equal

class Colour:
    """
    Red, green and blue intensities, nominally in [0, 1].
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name, value):
        raise AttributeError(f"Colour is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Colour is immutable, cannot delete {name!r}")

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __add__(self, other: "Colour") -> "Colour":
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Colour") -> "Colour":
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scale by a scalar.
        if isinstance(other, (int, float)):
            return Colour(self.red * other, self.green * other, self.blue * other)
        # Hadamard product.
        if isinstance(other, Colour):
            return self.hadamard_product(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Colour":
        return self.__mul__(other)

    def hadamard_product(self, other: "Colour") -> "Colour":
        return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def is_equal(self, other: "Colour") -> bool:
        return (float_is_equal(self.red, other.red) and
                float_is_equal(self.green, other.green) and
                float_is_equal(self.blue, other.blue))

    def __repr__(self) -> str:
        return f"Colour({self.red}, {self.green}, {self.blue})"


BLACK = Colour(0, 0, 0)
