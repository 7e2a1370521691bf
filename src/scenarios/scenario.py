# scenarios/scenario.py
from renderer.canvas import Canvas
from scenarios.config import ScenarioConfig

class Scenario:
    """
    Abstract demonstration that draws onto a canvas.
    """
    name = ""
    description = ""

    def render(self, config: ScenarioConfig) -> Canvas:
        raise NotImplementedError("render() must be implemented by subclasses.")

    def output_filename(self, config: ScenarioConfig) -> str:
        return f"{self.name}.{config.image_format}"
