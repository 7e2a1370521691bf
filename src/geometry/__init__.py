from geometry.hittable import WorldObject
from geometry.intersection import Intersection, aggregate, get_hit
from geometry.sphere import Sphere
