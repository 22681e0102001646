import itertools
import logging
import math
import random
import time

from pac_board import BASE_MAZE, CellKind, Direction, parse_maze
from pac_collision import CollisionSystem
from pac_config import validate_config
from pac_entities import Ghost, Player
from pac_errors import ConfigError, ReentrantTickError
from pac_motion import GhostCrossroads, PlayerCrossroads, facing_toward, resolve_movement
from pac_physics import integrate_vertical, try_jump


logger = logging.getLogger(__name__)

GHOST_DIRECTION_CYCLE = [Direction.LEFT, Direction.RIGHT]


def bob_offset(now, row, col, period, amplitude):
    return amplitude * math.sin(2 * math.pi * now / period + row + col)


class PacGame:
    """Fixed-rate simulation of the maze, the player and the ghosts.

    The host calls ``tick()`` at ``tick_rate`` and reads state back through
    the ``get_*`` queries, which always return fresh copies.
    """

    def __init__(self, config=None, maze=None, ghost_directions=None, rng=None, clock=None):
        self.config = validate_config(config)
        self.dt = 1.0 / self.config["tick_rate"]
        self.pacman_step = self.config["pacman_speed"] * self.dt
        self.ghost_step = self.config["ghost_speed"] * self.dt

        self.maze = list(maze or BASE_MAZE)
        self.initial_board, player_spawn, ghost_spawns = parse_maze(self.maze)

        if ghost_directions is None:
            directions = list(itertools.islice(itertools.cycle(GHOST_DIRECTION_CYCLE), len(ghost_spawns)))
        else:
            directions = [Direction.coerce(d) for d in ghost_directions]
            if len(directions) != len(ghost_spawns):
                raise ConfigError(f"got {len(directions)} ghost directions for {len(ghost_spawns)} ghosts")

        self.rng = rng or random.Random()
        self.clock = clock or time.monotonic
        self.player_policy = PlayerCrossroads()
        self.ghost_policy = GhostCrossroads(self.rng)
        self.collision = CollisionSystem(self.config["pacman_radius"], self.config["ghost_radius"])

        self.player = Player(*player_spawn)
        self.ghosts = [Ghost(r, c, d) for (r, c), d in zip(ghost_spawns, directions)]
        self._barriers = self.initial_board.barriers()
        self._in_tick = False
        self.reset()

    def reset(self):
        self.board = self.initial_board.copy()
        self.collision.reset_all(self.player, self.ghosts)
        self.running = False
        self.time = 0.0
        self.tick_count = 0
        self.score = 0
        self.collisions = 0
        self._events = []

    # -- commands ---------------------------------------------------------

    def start(self):
        if self.running:
            return
        self.running = True
        logger.info(f"Simulation started at tick {self.tick_count}")

    def pause(self):
        if not self.running:
            return
        self.running = False
        logger.info(f"Simulation paused at tick {self.tick_count}")

    def change_intended_direction(self, direction):
        direction = Direction.coerce(direction)
        self.player.set_intended_direction(direction)
        return direction

    def request_jump(self):
        accepted = try_jump(self.player, self.config["jump_impulse"])
        logger.debug(f"Jump {'accepted' if accepted else 'rejected'} at height {self.player.height:.3f}")
        return accepted

    # -- simulation -------------------------------------------------------

    def tick(self):
        if not self.running:
            return []
        if self._in_tick:
            raise ReentrantTickError("tick() called while a tick is in progress")
        self._in_tick = True
        try:
            self._events = self._advance()
        finally:
            self._in_tick = False
        return list(self._events)

    def _advance(self):
        rate = self.config["angle_anneal_rate"]

        # Plan every move before committing so a failing policy leaves state intact.
        player_move = resolve_movement(self.board, self.player, self.pacman_step, self.player_policy)
        ghost_moves = [resolve_movement(self.board, g, self.ghost_step, self.ghost_policy) for g in self.ghosts]

        self.time += self.dt
        self.tick_count += 1

        player = self.player
        player.row, player.col, player.direction = player_move
        player.facing_angle = facing_toward(player.facing_angle, player.direction, rate)
        player.height, player.vertical_velocity = integrate_vertical(
            player.height, player.vertical_velocity, self.config["gravity"], self.dt
        )

        for ghost, move in zip(self.ghosts, ghost_moves):
            ghost.row, ghost.col, ghost.direction = move
            ghost.facing_angle = facing_toward(ghost.facing_angle, ghost.direction, rate)

        events = self._consume()
        events.extend(self._collide())
        return events

    def _consume(self):
        events = []
        eaten = self.collision.consume(self.board, self.player)
        for kind, row, col in eaten:
            if kind == CellKind.PELLET:
                self.score += self.config["pellet_score"]
                events.append({"type": "pellet", "row": row, "col": col})
            else:
                self.score += self.config["power_up_score"]
                self.player.power_up_active_until = self.time + self.config["power_up_duration"]
                events.append({"type": "power_up", "row": row, "col": col})
                logger.debug(f"Power-up at ({row}, {col}) active until t={self.player.power_up_active_until:.2f}")
        if eaten and self.board.remaining() == 0:
            logger.info(f"Board cleared at tick {self.tick_count} with score {self.score}")
        return events

    def _collide(self):
        hits = self.collision.hits(self.player, self.ghosts)
        if not hits:
            return []
        self.collision.reset_all(self.player, self.ghosts)
        self.collisions += 1
        logger.info(f"Ghost {hits[0]} caught the player at tick {self.tick_count}; entities reset")
        return [{"type": "collision", "ghost": hits[0]}]

    # -- queries ----------------------------------------------------------

    def get_player(self):
        return self.player.snapshot(self.time)

    def get_ghosts(self):
        return [g.snapshot() for g in self.ghosts]

    def get_barriers(self):
        return [dict(b) for b in self._barriers]

    def _bobbing(self, cells, now):
        if now is None:
            now = self.clock()
        period = self.config["bob_period"]
        amplitude = self.config["bob_amplitude"]
        return [(float(r), float(c), bob_offset(now, r, c, period, amplitude)) for r, c in cells]

    def get_pellets(self, now=None):
        return self._bobbing(self.board.pellets(), now)

    def get_power_ups(self, now=None):
        return self._bobbing(self.board.power_ups(), now)

    def get_board_center(self):
        row, col = self.board.center()
        return (row, col, 0.0)

    def is_powered(self):
        return self.player.is_powered(self.time)

    def is_cleared(self):
        return self.board.remaining() == 0

    def last_events(self):
        return list(self._events)

    def get_state(self):
        return {
            "rows": self.board.rows,
            "cols": self.board.cols,
            "time": self.time,
            "tick_count": self.tick_count,
            "running": self.running,
            "score": self.score,
            "collisions": self.collisions,
            "player": self.get_player(),
            "ghosts": self.get_ghosts(),
            "pellets": self.board.pellets(),
            "power_ups": self.board.power_ups(),
            "cleared": self.is_cleared(),
        }
