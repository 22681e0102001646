from pac_board import Direction


class Player:
    def __init__(self, row, col, facing_angle=0.0):
        self.spawn = (float(row), float(col))
        self.spawn_angle = float(facing_angle)
        self.reset()

    def reset(self):
        self.row, self.col = self.spawn
        self.height = 0.0
        self.direction = Direction.NONE
        self.intended_direction = Direction.NONE
        self.vertical_velocity = 0.0
        self.facing_angle = self.spawn_angle
        self.power_up_active_until = None

    @property
    def position(self):
        return (self.row, self.col, self.height)

    def is_grounded(self):
        return self.height == 0.0

    def set_intended_direction(self, direction):
        """Record a new intent; reversals and starts from rest apply at once."""
        self.intended_direction = direction
        if self.direction is Direction.NONE:
            self.direction = direction
        elif direction is not Direction.NONE and direction is self.direction.opposite():
            self.direction = direction

    def is_powered(self, now):
        return self.power_up_active_until is not None and now < self.power_up_active_until

    def snapshot(self, now):
        return {
            "position": self.position,
            "direction": self.direction,
            "intended_direction": self.intended_direction,
            "vertical_velocity": self.vertical_velocity,
            "facing_angle": self.facing_angle,
            "power_up_active_until": self.power_up_active_until,
            "powered": self.is_powered(now),
        }


class Ghost:
    def __init__(self, row, col, direction):
        self.spawn = (float(row), float(col))
        self.spawn_direction = direction
        self.spawn_angle = direction.angle if direction.angle is not None else 0.0
        self.reset()

    def reset(self):
        self.row, self.col = self.spawn
        self.height = 0.0
        self.direction = self.spawn_direction
        self.facing_angle = self.spawn_angle

    @property
    def position(self):
        return (self.row, self.col, self.height)

    def snapshot(self):
        return {
            "position": self.position,
            "direction": self.direction,
            "facing_angle": self.facing_angle,
        }
