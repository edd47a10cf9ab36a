import logging

import pytest

from predpreysim.__main__ import main, parse_arguments
from predpreysim.location import Location
from predpreysim.simulator import Simulator
from predpreysim.config import SimulationConfig


def test_parse_arguments_defaults():
    args = parse_arguments([])
    assert args.steps is None
    assert args.render is False
    assert args.log_every == 10


def test_main_runs_headless(caplog):
    with caplog.at_level(logging.INFO):
        assert main(["--steps", "3", "--depth", "15", "--width", "15", "--seed", "4"]) == 0
    assert "Simulation finished" in caplog.text


def test_main_writes_population_plot(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    out = tmp_path / "population.png"
    assert main(["--steps", "5", "--depth", "10", "--width", "10", "--plot-path", str(out)]) == 0
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_history_saves_file(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    from predpreysim.plotting import plot_history

    out = tmp_path / "history.png"
    plot_history({"tick": [0, 1, 2], "prey_count": [5, 7, 6], "predator_count": [1, 1, 2]}, str(out))
    assert out.exists()


def test_pygame_view_draws_and_closes(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pytest.importorskip("pygame")
    from predpreysim.pygame_renderer import PyGameView

    cfg = SimulationConfig(depth=8, width=8, predator_creation_probability=0.0, prey_creation_probability=0.0)
    view = PyGameView(cfg.depth, cfg.width, cell_size=8, fps=1000)
    try:
        board = 8 * 8
        assert view.screen.get_size() == (
            board + 2 * view.style.margin + view.style.panel_width,
            board + 2 * view.style.margin + 24,
        )
        sim = Simulator(cfg, view=view)
        assert view.colors["prey"] != view.colors["predator"]
        sim.spawn("prey", Location(0, 0))
        sim.spawn("predator", Location(7, 7), hunger=50)
        assert sim.simulate(3) == 3
        assert view.history_steps[-1] == 3
        # grid lines are drawn over the cells
        assert tuple(view.screen.get_at((view.style.margin, view.style.margin + 3)))[:3] == view.style.grid_color
    finally:
        view.close()
    assert view.closed
    assert view.is_viable(sim.snapshot()) is False
