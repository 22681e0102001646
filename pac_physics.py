def integrate_vertical(height, velocity, gravity, dt):
    """One trapezoidal step of jump height; landing clamps to the floor.

    Returns (height, velocity).
    """
    new_velocity = velocity + gravity * dt
    new_height = height + (velocity + new_velocity) / 2.0 * dt
    if new_height <= 0.0:
        return 0.0, 0.0
    return new_height, new_velocity


def try_jump(player, impulse):
    if not player.is_grounded():
        return False
    player.vertical_velocity = float(impulse)
    return True
