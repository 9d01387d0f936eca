"""Selection strategies, the repeat engine and the public entry points."""

from .builder import SelectionBuilder
from .commands import WORD_BOUNDARY_FORMAT, CjkMotion
from .repeat import RepeatMovementEngine, absorb
from .steppers import CjkWordStepper, GenericThingStepper
from .strategies import CjkSegmentStrategy, GenericThingStrategy, SelectionStrategy, StrategyDispatcher

__all__ = [
    "CjkMotion",
    "CjkSegmentStrategy",
    "CjkWordStepper",
    "GenericThingStepper",
    "GenericThingStrategy",
    "RepeatMovementEngine",
    "SelectionBuilder",
    "SelectionStrategy",
    "StrategyDispatcher",
    "WORD_BOUNDARY_FORMAT",
    "absorb",
]
