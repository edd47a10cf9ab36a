"""
Simulation settings.

`SimulationConfig` holds the defaults; `load_config` seeds it from a JSON file
and `build_config` applies keyword overrides on top.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Optional

from predpreysim.animals import PREDATOR_DEFAULTS, PREY_DEFAULTS, KindConfig

DEFAULT_DEPTH = 50
DEFAULT_WIDTH = 50


@dataclass
class SimulationConfig:
    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH
    # probability that a predator / prey is created in any given cell
    predator_creation_probability: float = 0.02
    prey_creation_probability: float = 0.08
    # seeded animals start at a random age (and, for predators, hunger)
    random_initial_age: bool = True
    seed: Optional[int] = 1111
    long_run_steps: int = 500
    prey: KindConfig = field(default_factory=lambda: PREY_DEFAULTS)
    predator: KindConfig = field(default_factory=lambda: PREDATOR_DEFAULTS)


_KIND_FIELDS = ("prey", "predator")


def _check_kind(name: str, params: KindConfig) -> KindConfig:
    if params.max_age <= 0:
        raise ValueError(f"{name}.max_age must be positive: {params.max_age}")
    if params.max_litter_size <= 0:
        raise ValueError(f"{name}.max_litter_size must be positive: {params.max_litter_size}")
    if params.breeding_age < 0:
        raise ValueError(f"{name}.breeding_age must not be negative: {params.breeding_age}")
    if not 0.0 <= params.breeding_probability <= 1.0:
        raise ValueError(
            f"{name}.breeding_probability must be within [0, 1]: {params.breeding_probability}"
        )
    # predators draw their initial hunger from [0, food_value)
    if name == "predator" and params.food_value <= 0:
        raise ValueError(f"predator.food_value must be positive: {params.food_value}")
    if params.metabolic_cost < 0:
        raise ValueError(f"{name}.metabolic_cost must not be negative: {params.metabolic_cost}")
    return params


def _kind_config(name: str, value: object, base: KindConfig) -> KindConfig:
    if isinstance(value, KindConfig):
        return _check_kind(name, value)
    if not isinstance(value, dict):
        raise ValueError(f"Invalid {name} settings: {value!r}")
    known = {f.name for f in fields(KindConfig)}
    unknown = set(value) - known
    if unknown:
        raise ValueError(f"Unknown {name} field(s): {', '.join(sorted(unknown))}")
    return _check_kind(name, replace(base, **value))


def load_config(path: str | Path) -> SimulationConfig:
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    cfg = SimulationConfig()
    for field_info in fields(SimulationConfig):
        name = field_info.name
        if name not in data:
            continue
        value = data[name]
        if name in _KIND_FIELDS:
            value = _kind_config(name, value, getattr(cfg, name))
        setattr(cfg, name, value)
    return cfg


def build_config(
    overrides: Optional[Dict[str, object]] = None, path: str | Path | None = None
) -> SimulationConfig:
    cfg = load_config(path) if path is not None else SimulationConfig()
    if overrides:
        for key, value in overrides.items():
            if not hasattr(cfg, key):
                raise ValueError(f"Unknown SimulationConfig field: {key}")
            if key in _KIND_FIELDS:
                value = _kind_config(key, value, getattr(cfg, key))
            setattr(cfg, key, value)
    return cfg
