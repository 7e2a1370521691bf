# geometry/sphere.py
import math
from typing import List, Optional
from core.matrix import Matrix, identity
from core.ray import Ray
from core.transformation import TRANSFORMATION_MATRIX_SIZE
from core.vector import Tuple4, point, vector
from geometry.hittable import WorldObject
from geometry.intersection import Intersection

class Sphere(WorldObject):
    """
    A unit sphere centred on the object-space origin. Its transform maps
    object space into world space and may be replaced at any time.
    """
    def __init__(self, transform: Optional[Matrix] = None):
        super().__init__()
        self.center = point(0, 0, 0)
        self.radius = 1.0
        self.transform = transform if transform is not None else identity(TRANSFORMATION_MATRIX_SIZE)

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self.transform.inverse())
        sphere_to_ray = local_ray.origin - self.center

        a = local_ray.direction.dot(local_ray.direction)
        b = 2 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - self.radius ** 2
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        # A tangent ray still yields two (equal) intersections.
        return [
            Intersection((-b - sqrt_disc) / (2 * a), self),
            Intersection((-b + sqrt_disc) / (2 * a), self),
        ]

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        inverse = self.transform.inverse()
        object_point = inverse.multiply(world_point)
        object_normal = object_point - self.center
        world_normal = inverse.transpose().multiply(object_normal)
        # The transposed inverse can disturb w; the normal is always a vector.
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def __repr__(self) -> str:
        return f"Sphere(id={self.id}, transform={self.transform!r})"
