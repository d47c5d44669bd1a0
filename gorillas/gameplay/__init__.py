"""
Gameplay core for Gorillas.
NO UI DEPENDENCIES.
"""

from gorillas.gameplay.simulation import ClockState, Simulation
from gorillas.gameplay.world import World, WorldSnapshot

__all__ = ["ClockState", "Simulation", "World", "WorldSnapshot"]
