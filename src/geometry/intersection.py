# geometry/intersection.py
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
from geometry.hittable import WorldObject

@dataclass(frozen=True)
class Intersection:
    """
    A ray parameter t at which a ray meets object.
    """
    t: float
    object: WorldObject


def aggregate(*intersections: Intersection) -> Tuple[Intersection, ...]:
    """
    Collects intersections in the order given; no sorting is done.
    """
    return intersections

def get_hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the intersection with the smallest strictly positive t,
    or None if there is no such intersection.
    """
    hit = None
    for intersection in intersections:
        if intersection.t > 0 and (hit is None or intersection.t < hit.t):
            hit = intersection
    return hit
