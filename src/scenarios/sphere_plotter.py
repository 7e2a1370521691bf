# scenarios/sphere_plotter.py
from typing import Optional
from core.matrix import Matrix
from core.ray import Ray
from core.vector import point
from geometry.intersection import get_hit
from geometry.sphere import Sphere
from renderer.canvas import Canvas
from scenarios.config import ScenarioConfig
from scenarios.scenario import Scenario

class SpherePlotter(Scenario):
    """
    Casts one ray per pixel from a fixed eye point through a wall behind the
    sphere and colours each pixel whose ray hits the sphere, producing its
    silhouette.
    """
    name = "sphere"
    description = "Sphere Silhouette"

    def __init__(self, transform: Optional[Matrix] = None,
                 wall_z: float = 10.0, wall_size: float = 10.0):
        self.ray_origin = point(0, 0, -3)
        self.transform = transform
        self.wall_z = wall_z
        self.wall_size = wall_size

    def render(self, config: ScenarioConfig) -> Canvas:
        size = config.sphere_size
        canvas = Canvas(size, size)
        sphere = Sphere(self.transform)

        pixel_size = self.wall_size / size
        half = self.wall_size / 2

        for y in range(size):
            world_y = half - pixel_size * y
            for x in range(size):
                world_x = -half + pixel_size * x
                wall_point = point(world_x, world_y, self.wall_z)
                ray = Ray(self.ray_origin, (wall_point - self.ray_origin).normalize())
                if get_hit(sphere.intersect(ray)) is not None:
                    canvas.set_pixel(x, y, config.sphere_colour)
        return canvas
