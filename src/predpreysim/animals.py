"""
Prey and predator behaviour.

Both kinds share one tick routine (`Animal.act`): age, (predators) burn food
and hunt, breed, then move or die from overcrowding. Kind-specific numbers
live in a `KindConfig` rather than on the classes.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from predpreysim.field import Field
from predpreysim.location import Location


@dataclass(frozen=True)
class KindConfig:
    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    food_value: int = 0  # hunger restored by eating one prey
    metabolic_cost: int = 1  # hunger lost per tick


PREY_DEFAULTS = KindConfig(
    breeding_age=5,
    max_age=40,
    breeding_probability=0.12,
    max_litter_size=4,
)

PREDATOR_DEFAULTS = KindConfig(
    breeding_age=15,
    max_age=150,
    breeding_probability=0.08,
    max_litter_size=2,
    food_value=9,
    metabolic_cost=1,
)


class Animal:
    kind = "animal"

    def __init__(
        self,
        field: Field,
        location: Location,
        params: KindConfig,
        rng: random.Random,
        random_age: bool = False,
    ):
        self.field = field
        self.params = params
        self.rng = rng
        self.alive = True
        self.age = rng.randrange(params.max_age) if random_age else 0
        self.cause_of_death: Optional[str] = None
        self.location: Optional[Location] = None
        self.set_location(location)

    def __repr__(self) -> str:
        state = "alive" if self.alive else f"dead:{self.cause_of_death}"
        return f"{self.__class__.__name__}(age={self.age}, at={self.location}, {state})"

    # ---- field bookkeeping ----

    def set_location(self, new_location: Location) -> None:
        if self.location is not None:
            self.field.clear_location(self.location)
        self.location = new_location
        self.field.place(self, new_location)

    def set_dead(self, cause: str) -> None:
        self.alive = False
        self.cause_of_death = cause
        if self.location is not None:
            self.field.clear_location(self.location)
            self.location = None

    # ---- tick ----

    def act(self, newborns: List["Animal"]) -> None:
        if not self.alive:
            return
        self.increment_age()
        if not self.alive:
            return
        self.metabolise()
        if not self.alive:
            return
        destination = self.find_food()
        self.give_birth(newborns, reserved=destination)
        if destination is None:
            destination = self.field.free_adjacent_location(self.location, self.rng)
        if destination is None:
            self.set_dead("overcrowding")
            return
        self.set_location(destination)

    def increment_age(self) -> None:
        self.age += 1
        if self.age > self.params.max_age:
            self.set_dead("old_age")

    def metabolise(self) -> None:
        pass

    def find_food(self) -> Optional[Location]:
        return None

    def can_breed(self) -> bool:
        return self.age >= self.params.breeding_age

    def give_birth(
        self, newborns: List["Animal"], reserved: Optional[Location] = None
    ) -> int:
        """
        Draw once for breeding and, on success, fill free neighbouring cells
        with up to a litter of offspring. Returns the number of offspring.
        """
        draw = self.rng.random()
        if draw > self.params.breeding_probability or not self.can_breed():
            return 0
        free = [
            loc
            for loc in self.field.free_adjacent_locations(self.location, self.rng)
            if loc != reserved
        ]
        if not free:
            return 0
        litter = self.rng.randrange(self.params.max_litter_size) + 1
        born = 0
        for loc in free[:litter]:
            newborns.append(self.spawn(loc))
            born += 1
        return born

    def spawn(self, location: Location) -> "Animal":
        return type(self)(self.field, location, self.params, self.rng)


class Prey(Animal):
    kind = "prey"


class Predator(Animal):
    kind = "predator"

    def __init__(
        self,
        field: Field,
        location: Location,
        params: KindConfig,
        rng: random.Random,
        random_age: bool = False,
        hunger: Optional[int] = None,
    ):
        super().__init__(field, location, params, rng, random_age=random_age)
        if hunger is not None:
            self.hunger = hunger
        elif random_age:
            self.hunger = rng.randrange(params.food_value)
        else:
            self.hunger = params.food_value

    def __repr__(self) -> str:
        return super().__repr__()[:-1] + f", hunger={self.hunger})"

    def metabolise(self) -> None:
        self.hunger -= self.params.metabolic_cost
        if self.hunger <= 0:
            self.set_dead("starvation")

    def find_food(self) -> Optional[Location]:
        for loc in self.field.adjacent_locations(self.location, self.rng):
            occupant = self.field.get_object_at(loc)
            if isinstance(occupant, Prey) and occupant.alive:
                occupant.set_dead("eaten")
                self.hunger = self.params.food_value
                return loc
        return None
