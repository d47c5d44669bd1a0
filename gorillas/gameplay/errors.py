"""
Gameplay errors.
NO UI DEPENDENCIES.
"""


class GorillasError(Exception):
    """Base class for all gameplay errors."""


class CityGenerationError(GorillasError, ValueError):
    """The canvas is too small to hold a city."""


class PlacementError(GorillasError, ValueError):
    """The city has too few buildings to seat two gorillas apart."""


class SimulationStateError(GorillasError, RuntimeError):
    """A clock transition is not allowed from the current state."""


class SimulationNotStartedError(SimulationStateError):
    """A clock transition was requested before start()."""
