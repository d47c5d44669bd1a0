"""
Pytest fixtures for Gorillas tests.
"""

import random

import pytest

from gorillas.config import Settings
from gorillas.gameplay.entities import Building
from gorillas.gameplay.city import generate_city


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source so generation is reproducible."""
    return random.Random(1234)


@pytest.fixture
def city(rng):
    """A city on the default 640x350 canvas."""
    return generate_city(640, 350, rng)


@pytest.fixture
def flat_city():
    """Ten identical buildings, 48 px wide, 2 px apart."""
    return [Building(2 + i * 50, 200, 48, 140, "#aaaaaa") for i in range(10)]


@pytest.fixture
def settings() -> Settings:
    """Fast, calm settings for clock tests."""
    return Settings(
        frames_per_second=100,
        wind_speed=0.0,
        gravity=9.8,
        number_of_bananas=2,
        launch_velocity=40.0,
        launch_angle_dg=60.0,
        random_seed=42,
    )
