# scenarios/config.py
from dataclasses import dataclass, field, replace
from core.colour import Colour

@dataclass
class ScenarioConfig:
    """Settings shared by the demonstration scenarios."""
    output_dir: str = "."
    image_format: str = "ppm"
    preview: bool = False

    projectile_width: int = 900
    projectile_height: int = 550
    clock_size: int = 500
    # Every pixel casts a ray against a freshly inverted transform, so the
    # sphere scenario is kept small by default.
    sphere_size: int = 100

    plot_colour: Colour = field(default_factory=lambda: Colour(1, 0, 0))
    sphere_colour: Colour = field(default_factory=lambda: Colour(0, 0, 1))

    def with_size(self, size: int) -> "ScenarioConfig":
        """Returns a copy with every square canvas set to size x size."""
        return replace(self, clock_size=size, sphere_size=size)
