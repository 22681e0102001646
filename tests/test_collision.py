"""Unit tests for pac_collision: consumption and ghost contact.

Run with:
    pytest tests/test_collision.py -v
"""

from pac_board import CellKind, Direction, parse_maze
from pac_collision import CollisionSystem
from pac_entities import Ghost, Player


MAZE = [
    "######",
    "#P..o#",
    "######",
]


def _system():
    return CollisionSystem(0.35, 0.35)


def test_reach_is_sum_of_radii():
    assert CollisionSystem(0.25, 0.5).reach == 0.75


def test_consumes_floor_and_ceiling_cells_while_crossing():
    board, spawn, _ = parse_maze(MAZE)
    player = Player(*spawn)
    player.col = 2.5
    eaten = _system().consume(board, player)
    assert eaten == [(CellKind.PELLET, 1, 2), (CellKind.PELLET, 1, 3)]
    assert board.pellets() == []


def test_same_cell_is_consumed_once():
    board, spawn, _ = parse_maze(MAZE)
    player = Player(*spawn)
    player.col = 2.0
    assert _system().consume(board, player) == [(CellKind.PELLET, 1, 2)]
    assert _system().consume(board, player) == []


def test_power_up_is_reported():
    board, spawn, _ = parse_maze(MAZE)
    player = Player(*spawn)
    player.col = 4.0
    assert _system().consume(board, player) == [(CellKind.POWER_UP, 1, 4)]


def test_hits_within_reach():
    player = Player(1, 1)
    near = Ghost(1, 1.69, Direction.LEFT)
    far = Ghost(1, 1.71, Direction.LEFT)
    assert _system().hits(player, [far, near]) == [1]


def test_touching_exactly_counts():
    player = Player(1, 1)
    ghost = Ghost(1, 1.5, Direction.LEFT)
    assert CollisionSystem(0.25, 0.25).hits(player, [ghost]) == [0]


def test_jumping_over_a_ghost_avoids_it():
    player = Player(1, 1)
    player.height = 1.0
    ghost = Ghost(1, 1, Direction.LEFT)
    assert _system().hits(player, [ghost]) == []
    player.height = 0.5
    assert _system().hits(player, [ghost]) == [0]


def test_no_ghosts_no_hits():
    assert _system().hits(Player(1, 1), []) == []


def test_reset_all_restores_spawn_state():
    player = Player(1, 1)
    player.row, player.col, player.height = 3.0, 4.5, 0.7
    player.direction = Direction.RIGHT
    player.intended_direction = Direction.UP
    player.vertical_velocity = 2.0
    player.facing_angle = 1.0
    player.power_up_active_until = 9.0
    ghosts = [Ghost(5, 5, Direction.LEFT), Ghost(5, 6, Direction.RIGHT)]
    for ghost in ghosts:
        ghost.row, ghost.col = 2.0, 2.5
        ghost.direction = Direction.DOWN
        ghost.facing_angle = 0.3

    _system().reset_all(player, ghosts)

    assert player.position == (1.0, 1.0, 0.0)
    assert player.direction is Direction.NONE
    assert player.intended_direction is Direction.NONE
    assert player.vertical_velocity == 0.0
    assert player.facing_angle == 0.0
    assert player.power_up_active_until is None
    assert [g.position for g in ghosts] == [(5.0, 5.0, 0.0), (5.0, 6.0, 0.0)]
    assert [g.direction for g in ghosts] == [Direction.LEFT, Direction.RIGHT]
    assert ghosts[0].facing_angle == Direction.LEFT.angle
