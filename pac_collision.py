import math

import numpy as np

from pac_board import CellKind


class CollisionSystem:
    def __init__(self, player_radius, ghost_radius):
        self.player_radius = float(player_radius)
        self.ghost_radius = float(ghost_radius)

    @property
    def reach(self):
        return self.player_radius + self.ghost_radius

    def consume(self, board, player):
        """Eat whatever lies under the player's floor and ceiling cells.

        Returns a list of (kind, row, col) for each cell actually emptied.
        """
        eaten = []
        cells = [
            (math.floor(player.row), math.floor(player.col)),
            (math.ceil(player.row), math.ceil(player.col)),
        ]
        for row, col in cells:
            kind = board.consume(row, col)
            if kind != CellKind.EMPTY:
                eaten.append((kind, row, col))
        return eaten

    def hits(self, player, ghosts):
        """Indices of ghosts within hitbox reach of the player."""
        if not ghosts:
            return []
        offsets = np.array([g.position for g in ghosts], dtype=float) - np.array(player.position, dtype=float)
        distances = np.linalg.norm(offsets, axis=1)
        return [int(i) for i in np.flatnonzero(distances <= self.reach)]

    def reset_all(self, player, ghosts):
        player.reset()
        for ghost in ghosts:
            ghost.reset()
