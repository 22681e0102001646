import math
import random

from pac_board import ALL_DIRECTIONS, Direction
from pac_errors import PolicyContractError


TAU = 2 * math.pi


class CrossroadPolicy:
    """Picks the direction an entity takes when it reaches a cell centre.

    ``choose`` must return a member of ``options``.
    """

    def choose(self, entity, options):
        raise NotImplementedError


class PlayerCrossroads(CrossroadPolicy):
    def choose(self, entity, options):
        if entity.intended_direction in options:
            return entity.intended_direction
        if entity.direction in options:
            return entity.direction
        return Direction.NONE


class GhostCrossroads(CrossroadPolicy):
    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def choose(self, entity, options):
        if len(options) == 2 and Direction.NONE in options:
            return next(d for d in options if d is not Direction.NONE)
        reverse = None if entity.direction is Direction.NONE else entity.direction.opposite()
        candidates = [d for d in options if d is not Direction.NONE and d is not reverse]
        if not candidates:
            return Direction.NONE if Direction.NONE in options else options[0]
        if len(candidates) == 1:
            return candidates[0]
        return self.rng.choice(candidates)


def open_directions(board, row, col):
    return [d for d in ALL_DIRECTIONS if not board.is_wall(row + d.di, col + d.dj)]


def crosses_boundary(before, after):
    return math.floor(before) != math.floor(after) or math.ceil(before) != math.ceil(after)


def entry_coordinate(value, step):
    # first cell centre reached along the axis
    if step > 0:
        return math.ceil(value)
    if step < 0:
        return math.floor(value)
    return int(round(value))


def resolve_movement(board, entity, amount, policy):
    """Advance ``entity`` by ``amount`` cells along its direction.

    Returns (row, col, direction) without touching the entity. When the
    step reaches a cell centre the policy decides the way out and the
    rest of ``amount`` is spent in that direction. ``amount`` must not
    exceed one cell.
    """
    direction = entity.direction
    row, col = entity.row, entity.col
    next_row = row + direction.di * amount
    next_col = col + direction.dj * amount
    if not (crosses_boundary(row, next_row) or crosses_boundary(col, next_col)):
        return next_row, next_col, direction

    cell_row = entry_coordinate(row, direction.di)
    cell_col = entry_coordinate(col, direction.dj)
    used = abs(row - cell_row) + abs(col - cell_col)
    remaining = max(0.0, amount - used)

    options = open_directions(board, cell_row, cell_col)
    chosen = policy.choose(entity, options)
    if chosen not in options:
        raise PolicyContractError(
            f"{type(policy).__name__} chose {chosen!r} at ({cell_row}, {cell_col}); "
            f"open: {[d.name for d in options]}"
        )
    return (
        float(cell_row + chosen.di * remaining),
        float(cell_col + chosen.dj * remaining),
        chosen,
    )


def anneal_angle(current, target, rate):
    """Blend ``current`` toward ``target`` the short way round the circle."""
    if target - current > math.pi:
        current += TAU
    elif current - target > math.pi:
        target += TAU
    value = (rate * target + (1.0 - rate) * current) % TAU
    if value >= TAU:
        value = 0.0
    return value


def facing_toward(current, direction, rate):
    if direction.angle is None:
        return current
    return anneal_angle(current, direction.angle, rate)
