import argparse
import csv
import logging

import numpy as np

import config
from Console import InputThread
from Simulation import Simulation

logger = logging.getLogger("creatures")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Neural creature ecosystem")
    parser.add_argument("--width", type=int, default=config.SIZE_X, help="world width in pixels")
    parser.add_argument("--height", type=int, default=config.SIZE_Y, help="world height in pixels")
    parser.add_argument("--tile-size", type=int, default=config.TILE_SIZE, help="tile edge in pixels")
    parser.add_argument("--floor", type=int, default=config.POPULATION_FLOOR, help="minimum population")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--fps", type=int, default=config.UPDATE_RATE, help="ticks per second")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=1000, help="ticks to run in headless mode")
    parser.add_argument("--no-console", action="store_true", help="do not read commands from stdin")
    parser.add_argument("--log-path", default=None, help="CSV file for the population log")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


class PopulationLog:
    def __init__(self, path) -> None:
        self.path = path
        with open(path, mode="w", newline="") as f:
            csv.writer(f).writerow(["tick", "population"])

    def record(self, simulation):
        tick = simulation.tick
        if tick > 0 and tick % config.LOG_INTERVAL == 0:
            with open(self.path, mode="a", newline="") as f:
                csv.writer(f).writerow([tick, len(simulation.creatures)])


def caption(simulation):
    s = simulation.stats()
    return (f"Simulation Population: {s['population']} "
            f"Births: {s['births']} "
            f"Deaths: {s['deaths']} "
            f"Max Generation: {s['max_generation']} "
            f"Avg Age: {s['avg_age']} "
            f"Tick: {s['tick']}"
            + (" [PAUSED]" if s['paused'] else ""))


def run_headless(simulation, ticks, log):
    for _ in range(ticks):
        simulation.update()
        if log:
            log.record(simulation)
    print(caption(simulation))


def run_window(simulation, fps, log):
    import pygame
    from Renderer import Renderer

    pygame.init()
    screen = pygame.display.set_mode((simulation.grid.size_x, simulation.grid.size_y))
    pygame.display.set_caption("Simulation")
    renderer = Renderer(simulation, screen)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if not renderer.handle_event(event):
                running = False
        if simulation.update() and log:
            log.record(simulation)
        renderer.render()
        pygame.display.flip()
        pygame.display.set_caption(caption(simulation))
        clock.tick(fps)
    pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")
    if args.verbose:
        config.print_config()

    simulation = Simulation(population_floor=args.floor, rng=np.random.default_rng(args.seed),
                            size_x=args.width, size_y=args.height, tile_size=args.tile_size)
    logger.info("Simulation started with %d creatures on a %dx%d world",
                len(simulation.creatures), simulation.grid.size_x, simulation.grid.size_y)
    if simulation.creatures:
        network = simulation.creatures[0].network
        logger.info("Creature networks: layers %s, %d edges", network.layer_sizes, network.get_size())
    log = PopulationLog(args.log_path) if args.log_path else None

    if args.headless:
        run_headless(simulation, args.ticks, log)
        return
    if not args.no_console:
        InputThread(simulation).start()
        print("Console commands: pause, step, close")
    run_window(simulation, args.fps, log)


if __name__ == "__main__":
    main()
