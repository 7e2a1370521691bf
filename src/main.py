# main.py
import argparse
import logging
import os
import sys
import time
import pygame
from renderer.canvas import Canvas, is_supported_format
from scenarios import SCENARIOS, ScenarioConfig

PREVIEW_MAX_SIZE = 800

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render the ray tracer demonstration scenarios to image files."
    )
    parser.add_argument("scenario", nargs="?", default="list",
                        help="Scenario to run: one of "
                             f"{', '.join(SCENARIOS)}, 'all' or 'list' (default: list)")
    parser.add_argument("--output-dir", default=".",
                        help="Directory the rendered images are written to (default: .)")
    parser.add_argument("--format", dest="image_format", default="ppm",
                        help="Output file extension; ppm is written as P3 text, "
                             "anything else goes through Pillow (default: ppm)")
    parser.add_argument("--size", type=int, default=None,
                        help="Override the edge length of the square clock and sphere canvases")
    parser.add_argument("--preview", action="store_true",
                        help="Show each rendered canvas in a window")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser

def preview(canvas: Canvas, title: str):
    """
    Shows the canvas in a pygame window until it is closed.
    """
    pygame.init()
    scale = max(1, PREVIEW_MAX_SIZE // max(canvas.width, canvas.height, 1))
    window_size = (canvas.width * scale, canvas.height * scale)
    screen = pygame.display.set_mode(window_size)
    pygame.display.set_caption(title)

    surf = pygame.transform.scale(canvas.to_surface(), window_size)
    clock = pygame.time.Clock()
    running = True
    while running:
        clock.tick(30)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        screen.blit(surf, (0, 0))
        pygame.display.flip()
    pygame.quit()

def run_scenario(name: str, config: ScenarioConfig) -> str:
    """
    Renders one scenario and writes it into config.output_dir.
    Returns the path written.
    """
    scenario = SCENARIOS[name]
    print(f"\nRunning scenario: {scenario.description}")
    start = time.perf_counter()
    canvas = scenario.render(config)
    print(f"Rendered {canvas.width}x{canvas.height} canvas in {time.perf_counter() - start:.2f}s")

    os.makedirs(config.output_dir, exist_ok=True)
    path = os.path.join(config.output_dir, scenario.output_filename(config))
    canvas.save(path)
    print(f"Saved {path}")

    if config.preview:
        preview(canvas, scenario.description)
    return path

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("RayTracer Scenarios\n")
    if args.scenario == "list":
        print("Name - Description\n")
        for name, scenario in SCENARIOS.items():
            print(f"{name} - {scenario.description}")
        return 0

    names = list(SCENARIOS) if args.scenario == "all" else [args.scenario]
    unknown = [name for name in names if name not in SCENARIOS]
    if unknown:
        print(f"\nScenario not found: {', '.join(unknown)}")
        return 1

    if not is_supported_format(args.image_format):
        print(f"\nUnsupported image format: {args.image_format}")
        return 1

    config = ScenarioConfig(output_dir=args.output_dir,
                            image_format=args.image_format.lstrip("."),
                            preview=args.preview)
    if args.size is not None:
        if args.size <= 0:
            print(f"\nCanvas size must be positive, got {args.size}")
            return 1
        config = config.with_size(args.size)

    for name in names:
        run_scenario(name, config)
    print("\nDone")
    return 0

if __name__ == "__main__":
    sys.exit(main())
