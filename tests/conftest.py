"""pytest shared fixtures.

Small hand-written mazes keep scenario tests readable; ``seeded_rng`` makes
ghost choices reproducible.
"""

import random

import pytest

from pac_game import PacGame


CORRIDOR = [
    "#######",
    "#P....#",
    "#######",
]

CHASE = [
    "#######",
    "#P..G.#",
    "#######",
]

JUNCTION = [
    "#####",
    "#.###",
    "#P..#",
    "#####",
]


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def game(seeded_rng):
    """Default maze, seeded ghosts, fixed clock."""
    return PacGame(rng=seeded_rng, clock=lambda: 0.0)


@pytest.fixture
def corridor_game():
    """One-cell-per-tick player in a five-cell corridor."""
    return PacGame(
        config={"tick_rate": 1, "pacman_speed": 1.0, "ghost_speed": 1.0}, maze=CORRIDOR, clock=lambda: 0.0
    )


@pytest.fixture
def chase_game(seeded_rng):
    return PacGame(maze=CHASE, rng=seeded_rng, clock=lambda: 0.0)
