from predpreysim.animals import PREDATOR_DEFAULTS, PREY_DEFAULTS, Animal, KindConfig, Predator, Prey
from predpreysim.config import SimulationConfig, build_config, load_config
from predpreysim.errors import ConfigurationError, OutOfBoundsError
from predpreysim.field import Field, FieldSnapshot
from predpreysim.location import Location
from predpreysim.simulator import Simulator
from predpreysim.view import FieldStats, HistoryView, SimulatorView

__all__ = [
    "Animal",
    "ConfigurationError",
    "Field",
    "FieldSnapshot",
    "FieldStats",
    "HistoryView",
    "KindConfig",
    "Location",
    "OutOfBoundsError",
    "PREDATOR_DEFAULTS",
    "PREY_DEFAULTS",
    "Predator",
    "Prey",
    "SimulationConfig",
    "Simulator",
    "SimulatorView",
    "build_config",
    "load_config",
]
