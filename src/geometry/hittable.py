# geometry/hittable.py
import uuid
from typing import List, TYPE_CHECKING
from core.ray import Ray

if TYPE_CHECKING:
    from geometry.intersection import Intersection

class WorldObject:
    """
    Abstract base for objects a ray can intersect. Each instance carries a
    unique id; two objects are equal only if they are the same instance.
    """
    def __init__(self):
        self.id = uuid.uuid4()

    def intersect(self, ray: Ray) -> List["Intersection"]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
