# core/ray.py
from core.vector import Tuple4

class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction vector.
    """
    def __init__(self, origin: Tuple4, direction: Tuple4):
        if not origin.is_point:
            raise ValueError(f"Ray origin must be a point, got {origin!r}")
        if not direction.is_vector:
            raise ValueError(f"Ray direction must be a vector, got {direction!r}")
        self.origin = origin
        self.direction = direction

    def position_at(self, t: float) -> Tuple4:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        """
        Returns a new ray with both origin and direction multiplied by matrix.
        Translation has no effect on the direction since its w is 0.
        """
        return Ray(matrix.multiply(self.origin), matrix.multiply(self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
