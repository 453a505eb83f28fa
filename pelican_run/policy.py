from .config import OBSTACLE_WIDTH, PLAYER_LEFT, PLAYER_SIZE

# Ticks of warning before impact; at speed 4 that is 56 units of lead
LEAD_TICKS = 14


def policy(env):
    # Strategy: find the nearest obstacle whose right edge is still ahead of the
    # pelican's left edge. If it will reach the pelican within LEAD_TICKS at the
    # current scroll speed, jump now so the arc's apex lines up with it.
    # Jumping only from the ground keeps us from wasting the press mid-air.
    state = env.game.state
    if state.player.is_airborne:
        return [0, 0, 0]

    ahead = [
        obs.horizontal_position
        for obs in state.obstacles
        if obs.horizontal_position + OBSTACLE_WIDTH > PLAYER_LEFT
    ]
    if not ahead:
        return [0, 0, 0]

    distance = min(ahead) - (PLAYER_LEFT + PLAYER_SIZE)
    if distance <= state.speed * LEAD_TICKS:
        return [1, 0, 0]  # Jump
    return [0, 0, 0]
