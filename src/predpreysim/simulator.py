"""
Predator-prey simulator on a rectangular field.

A `Simulator` owns the field, the population registry, the tick counter, the
random source and the view. Each tick every animal that is alive at its turn
acts once; newborns join the registry only after the whole pass.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from predpreysim.animals import Animal, Predator, Prey
from predpreysim.config import DEFAULT_DEPTH, DEFAULT_WIDTH, SimulationConfig
from predpreysim.errors import ConfigurationError
from predpreysim.field import Field, FieldSnapshot
from predpreysim.location import Location
from predpreysim.view import HistoryView, SimulatorView

logger = logging.getLogger(__name__)

PREY_COLOR = (255, 165, 0)  # orange
PREDATOR_COLOR = (0, 0, 255)  # blue


class Simulator:
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        view: Optional[SimulatorView] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or SimulationConfig()
        self.config_error: Optional[ConfigurationError] = None
        try:
            self.field = Field(self.config.depth, self.config.width)
        except ConfigurationError as exc:
            logger.warning(
                "%s Using default values %dx%d.", exc, DEFAULT_DEPTH, DEFAULT_WIDTH
            )
            self.config_error = exc
            self.field = Field(DEFAULT_DEPTH, DEFAULT_WIDTH)

        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.animals: List[Animal] = []
        self.step = 0

        if view is None:
            view = HistoryView(self.field.depth, self.field.width)
        self.view = view
        self.view.set_color("prey", PREY_COLOR)
        self.view.set_color("predator", PREDATOR_COLOR)

        self.reset()

    @property
    def depth(self) -> int:
        return self.field.depth

    @property
    def width(self) -> int:
        return self.field.width

    def snapshot(self) -> FieldSnapshot:
        return self.field.snapshot()

    def run_long_simulation(self) -> int:
        return self.simulate(self.config.long_run_steps)

    def simulate(self, num_steps: int) -> int:
        """
        Run up to `num_steps` steps, stopping before a step once the view
        reports the population as no longer viable. Returns the steps run.
        """
        done = 0
        for _ in range(num_steps):
            if not self.view.is_viable(self.snapshot()):
                logger.info("Population no longer viable at step %d.", self.step)
                break
            self.simulate_one_step()
            done += 1
        return done

    def simulate_one_step(self) -> Dict[str, int]:
        self.step += 1

        newborns: List[Animal] = []
        for animal in self.animals:
            # an animal eaten earlier in this pass must not act
            if animal.alive:
                animal.act(newborns)

        survivors = [animal for animal in self.animals if animal.alive]
        deaths = len(self.animals) - len(survivors)
        self.animals = survivors + newborns

        self.view.show_status(self.step, self.snapshot())
        return {"births": len(newborns), "deaths": deaths}

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.step = 0
        self.animals = []
        self.populate()
        self.view.show_status(self.step, self.snapshot())

    def populate(self) -> None:
        cfg = self.config
        self.field.clear()
        for location in self.field.locations():
            if self.rng.random() <= cfg.predator_creation_probability:
                self.animals.append(
                    Predator(
                        self.field,
                        location,
                        cfg.predator,
                        self.rng,
                        random_age=cfg.random_initial_age,
                    )
                )
            elif self.rng.random() <= cfg.prey_creation_probability:
                self.animals.append(
                    Prey(
                        self.field,
                        location,
                        cfg.prey,
                        self.rng,
                        random_age=cfg.random_initial_age,
                    )
                )
            # else leave the location empty

    def add_animal(self, animal: Animal) -> None:
        """Register an animal already placed on this simulator's field."""
        if animal.field is not self.field:
            raise ValueError("Animal belongs to a different field")
        if animal.location is None or self.field.get_object_at(animal.location) is not animal:
            raise ValueError(f"{animal!r} is not placed on the field")
        self.animals.append(animal)

    def spawn(self, kind: str, location: Location, **kwargs) -> Animal:
        """Create, place and register a new animal of `kind` at `location`."""
        if self.field.get_object_at(location) is not None:
            raise ValueError(f"Location {location} is already occupied")
        if kind == "prey":
            animal: Animal = Prey(self.field, location, self.config.prey, self.rng, **kwargs)
        elif kind == "predator":
            animal = Predator(self.field, location, self.config.predator, self.rng, **kwargs)
        else:
            raise ValueError(f"Unknown animal kind: {kind}")
        self.animals.append(animal)
        return animal
