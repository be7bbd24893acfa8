import argparse
import dataclasses as dc
import itertools
import sys

from tqdm import tqdm

from sweepers.config import CFG
from sweepers.controller import Controller
from sweepers.charts import final_charts
from sweepers.errors import ConfigurationError, MalformedOutputError
from sweepers.frame import Renderer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Smart Sweepers - neuroevolution of mine-collecting vehicles")
    parser.add_argument("--generations", "-g", type=int, help="generations to run (0 = until stopped)")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--sweepers", type=int, help="population size (even)")
    parser.add_argument("--mines", type=int, help="number of mines")
    parser.add_argument("--ticks", type=int, help="ticks per generation")
    parser.add_argument("--fast", action="store_true", help="start in accelerated mode")
    parser.add_argument("--headless", action="store_true", help="no window, run generations back-to-back")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every collected mine")
    return parser.parse_args(argv)


def build_config(args) -> CFG:
    overrides = {
        "N_GENERATIONS": args.generations,
        "SEED": args.seed,
        "SWEEPER_COUNT": args.sweepers,
        "MINE_COUNT": args.mines,
        "TICKS_PER_GENERATION": args.ticks,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.fast:
        overrides["START_FAST"] = True
    if args.verbose:
        overrides["LOG_EVENTS"] = True
    return dc.replace(CFG(), **overrides).validate()


def run_headless(controller: Controller):
    cfg = controller.cfg
    controller.log = tqdm.write
    generations = range(cfg.N_GENERATIONS) if cfg.N_GENERATIONS > 0 else itertools.count()
    try:
        for _ in tqdm(generations, desc="generations"):
            controller.run_generation()
    except KeyboardInterrupt:
        print("Simulation stopped by user")


def run_monitor(controller: Controller):
    from visualization.pygame.monitor import PygameMonitor

    cfg = controller.cfg
    monitor: Renderer = PygameMonitor(controller, cfg)
    try:
        while not controller.should_stop and not controller.finished:
            if monitor.is_paused:
                if not monitor.render(controller.frame_state()):
                    break
                continue

            # accelerated mode runs many ticks back-to-back per presented frame
            steps = cfg.FAST_TICKS_PER_FRAME if controller.fast_mode else 1
            for _ in range(steps):
                controller.update()
                if controller.finished:
                    break

            if not monitor.render(controller.frame_state()):
                break

        if controller.should_stop:
            print("Simulation stopped by user")
    finally:
        monitor.cleanup()


def run(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = build_config(args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 2

    controller = Controller(cfg)
    try:
        if args.headless:
            run_headless(controller)
        else:
            run_monitor(controller)
    except MalformedOutputError as e:
        print(f"[gen {controller.generation} tick {controller.ticks}] ERROR {e}")
        final_charts(controller)
        return 1

    if controller.finished:
        print("Simulation completed normally")
    final_charts(controller)
    return 0


if __name__ == "__main__":
    sys.exit(run())
