from scenarios.clock import ClockPlotter
from scenarios.config import ScenarioConfig
from scenarios.projectile import ProjectilePlotter
from scenarios.scenario import Scenario
from scenarios.sphere_plotter import SpherePlotter

SCENARIOS = {
    scenario.name: scenario
    for scenario in (ProjectilePlotter(), ClockPlotter(), SpherePlotter())
}
