# scenarios/projectile.py
from dataclasses import dataclass
from core.utils import is_within_range
from core.vector import Tuple4, point, vector
from renderer.canvas import Canvas
from scenarios.config import ScenarioConfig
from scenarios.scenario import Scenario

@dataclass(frozen=True)
class Projectile:
    position: Tuple4
    velocity: Tuple4


@dataclass(frozen=True)
class Environment:
    gravity: Tuple4
    wind: Tuple4


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """
    Advances the projectile by one time step.
    """
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position, velocity)


class ProjectilePlotter(Scenario):
    name = "projectile"
    description = "Projectile Plotter"

    def __init__(self, start: Tuple4 = None, velocity: Tuple4 = None,
                 environment: Environment = None):
        self.start = start if start is not None else point(0, 1, 0)
        self.velocity = velocity if velocity is not None else vector(1, 1.8, 0).normalize() * 11.25
        self.environment = environment if environment is not None else Environment(
            gravity=vector(0, -0.1, 0),
            wind=vector(-0.01, 0, 0)
        )

    def trajectory(self):
        """
        Yields each position until the projectile drops below the ground.
        """
        projectile = Projectile(self.start, self.velocity)
        while True:
            projectile = tick(self.environment, projectile)
            if projectile.position.y < 0:
                return
            yield projectile.position

    def render(self, config: ScenarioConfig) -> Canvas:
        canvas = Canvas(config.projectile_width, config.projectile_height)
        for position in self.trajectory():
            x = round(position.x)
            y = round(canvas.height - position.y)
            # Positions that fly off the canvas are not plotted.
            if is_within_range(0, canvas.width - 1, x) and is_within_range(0, canvas.height - 1, y):
                canvas.set_pixel(x, y, config.plot_colour)
        return canvas
