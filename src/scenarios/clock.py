# scenarios/clock.py
import math
from typing import List
from core.transformation import RotationAxis, rotation
from core.utils import clamp
from core.vector import Tuple4, point
from renderer.canvas import Canvas
from scenarios.config import ScenarioConfig
from scenarios.scenario import Scenario

HOURS = 12

def hour_marks() -> List[Tuple4]:
    """
    Twelve points on the unit circle in the xz-plane, starting at twelve
    o'clock (0, 0, 1) and stepping by a twelfth of a turn about the y axis.
    """
    hour_rotation = rotation(RotationAxis.Y, math.pi / 6)
    hours = [point(0, 0, 1)]
    while len(hours) < HOURS:
        hours.append(hour_rotation.multiply(hours[-1]))
    return hours


class ClockPlotter(Scenario):
    name = "clock"
    description = "Clock Plotter"

    def render(self, config: ScenarioConfig) -> Canvas:
        canvas = Canvas(config.clock_size, config.clock_size)
        midpoint = canvas.width // 2
        clock_radius = 3 / 8 * canvas.width

        for hour in hour_marks():
            # Rounding can land one past the last pixel on tiny canvases.
            x = clamp(0, canvas.width - 1, round(hour.x * clock_radius + midpoint))
            y = clamp(0, canvas.height - 1, round(hour.z * clock_radius + midpoint))
            canvas.set_pixel(x, y, config.plot_colour)
        return canvas
