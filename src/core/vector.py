# core/vector.py
import math
from enum import Enum
from core.utils import float_is_equal

class Kind(Enum):
    """
    Discriminates what a homogeneous tuple represents, derived from its w value.
    """
    POINT = "point"
    VECTOR = "vector"
    RAW = "raw"

    @classmethod
    def from_w(cls, w: float) -> "Kind":
        if w == 0:
            return cls.VECTOR
        if w == 1:
            return cls.POINT
        return cls.RAW


class Tuple4:
    """
    A homogeneous (x, y, z, w) tuple. Points have w == 1, vectors have w == 0,
    anything else is a raw intermediate value. Every operation returns a new
    tuple whose kind is recomputed from the resulting w.
    """
    __slots__ = ("x", "y", "z", "w", "kind")

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))
        object.__setattr__(self, "kind", Kind.from_w(self.w))

    def __setattr__(self, name, value):
        raise AttributeError(f"Tuple4 is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Tuple4 is immutable, cannot delete {name!r}")

    @property
    def is_point(self) -> bool:
        return self.kind is Kind.POINT

    @property
    def is_vector(self) -> bool:
        return self.kind is Kind.VECTOR

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def _combine(self, other: "Tuple4", x, y, z, w, op: str) -> "Tuple4":
        # point + point and vector - point leave the point/vector algebra
        result = Tuple4(x, y, z, w)
        if (result.kind is Kind.RAW
                and self.kind is not Kind.RAW
                and other.kind is not Kind.RAW):
            raise ValueError(
                f"Cannot {op} a {self.kind.value} and a {other.kind.value}: "
                f"result w={result.w} is neither a point nor a vector"
            )
        return result

    def __add__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self._combine(other,
                             self.x + other.x, self.y + other.y,
                             self.z + other.z, self.w + other.w, "add")

    def __sub__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self._combine(other,
                             self.x - other.x, self.y - other.y,
                             self.z - other.z, self.w - other.w, "subtract")

    def __neg__(self) -> "Tuple4":
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> "Tuple4":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> "Tuple4":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple4":
        return Tuple4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def _require_vector(self, operation: str):
        if not self.is_vector:
            raise ValueError(f"{operation} is only defined for vectors, not a {self.kind.value}")

    def magnitude(self) -> float:
        self._require_vector("magnitude")
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Tuple4":
        self._require_vector("normalize")
        return self / self.magnitude()

    def dot(self, other: "Tuple4") -> float:
        self._require_vector("dot product")
        other._require_vector("dot product")
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple4") -> "Tuple4":
        self._require_vector("cross product")
        other._require_vector("cross product")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def is_equal(self, other: "Tuple4") -> bool:
        """
        Positions are compared within EPSILON, w must match exactly.
        """
        return (self.w == other.w and
                float_is_equal(self.x, other.x) and
                float_is_equal(self.y, other.y) and
                float_is_equal(self.z, other.z))

    def __repr__(self) -> str:
        if self.kind is Kind.RAW:
            return f"Tuple4({self.x}, {self.y}, {self.z}, {self.w})"
        return f"{self.kind.value}({self.x}, {self.y}, {self.z})"


def point(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 1.0)

def vector(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 0.0)
