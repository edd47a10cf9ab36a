"""
Run the predator-prey simulation from the command line.

$ python -m predpreysim                       # 500 steps, headless, log every 10
$ python -m predpreysim --steps 200 --seed 7 --render
$ python -m predpreysim --config my_run.json --plot-path /tmp/population.png
"""
from __future__ import annotations

import argparse
import logging

from predpreysim.config import DEFAULT_DEPTH, DEFAULT_WIDTH, build_config
from predpreysim.simulator import Simulator
from predpreysim.view import HistoryView

logger = logging.getLogger("predpreysim")


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Predator-prey simulation on a rectangular field.")
    parser.add_argument("--steps", type=int, default=None, help="number of steps (default: config long_run_steps)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--depth", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--config", type=str, default=None, help="JSON file with SimulationConfig fields")
    parser.add_argument("--log-every", type=int, default=10)
    parser.add_argument("--render", action="store_true", help="show a pygame window")
    parser.add_argument("--cell-size", type=int, default=12)
    parser.add_argument("--fps", type=int, default=20)
    parser.add_argument("--plot-path", type=str, default=None, help="save a population plot (requires matplotlib)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    setup_logging()

    overrides = {
        key: value
        for key, value in (("seed", args.seed), ("depth", args.depth), ("width", args.width))
        if value is not None
    }
    cfg = build_config(overrides, path=args.config)
    steps = args.steps if args.steps is not None else cfg.long_run_steps

    depth, width = cfg.depth, cfg.width
    if depth <= 0 or width <= 0:
        depth, width = DEFAULT_DEPTH, DEFAULT_WIDTH

    history_view = None
    if args.render:
        from predpreysim.pygame_renderer import PyGameView

        view = PyGameView(depth, width, cell_size=args.cell_size, fps=args.fps)
    else:
        history_view = HistoryView(depth, width, log_every=args.log_every)
        view = history_view

    simulator = Simulator(cfg, view=view)
    ran = simulator.simulate(steps)
    counts = simulator.snapshot().counts()
    logger.info(
        "Simulation finished after %d of %d steps: prey=%d pred=%d",
        ran,
        steps,
        counts["prey"],
        counts["predator"],
    )

    if args.render:
        view.close()
    if args.plot_path and history_view is None:
        logger.warning("--plot-path is ignored together with --render")
    elif args.plot_path:
        from predpreysim.plotting import plot_history

        plot_history(history_view.history, args.plot_path)
        logger.info("Population plot saved to %s", args.plot_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
