"""Constants for path planning and path scoring."""


class PlannerConstants:
    """Tuning numbers shared by the difficulty mapper, predictor and scorer."""

    # --- Arena ---
    WORLD_HALF = 9.0  # Arena spans [-WORLD_HALF, WORLD_HALF] on x and z
    BOUNDS_MARGIN = 1.0  # Paths ending closer than this to the wall are penalized
    PLAYER_HEIGHT = 1.0  # y of the agent's center

    # --- Internal movement model ---
    # Speed assumed when simulating a candidate path. The host applies its own
    # speed to the returned direction; this value only drives scoring.
    PLAYER_SPEED = 12.0
    PATH_SAMPLES = 8
    HOLE_SAMPLES = 10

    # --- Difficulty mapping ---
    # path_duration = PATH_DURATION_MAX - skill * PATH_DURATION_RANGE
    # Level 1: 0.75s, level 10: 0.3s
    PATH_DURATION_MAX = 0.8
    PATH_DURATION_RANGE = 0.5
    LOOKAHEAD_MIN = 0.3
    LOOKAHEAD_RANGE = 0.6
    # Must match the host's own meteor speed ramp or predictions drift.
    METEOR_BASE_SPEED = 8.0
    METEOR_SPEED_PER_POINT = 0.15
    # Thinking pause: THINK_BASE_MS - level * THINK_PER_LEVEL_MS, floored at 0
    THINK_BASE_MS = 500
    THINK_PER_LEVEL_MS = 50

    # --- Enemy prediction ---
    ENEMY_PURSUIT_SPEED = 2.6
    ENEMY_COINCIDENT_EPSILON = 1e-3

    # --- Meteor risk ---
    METEOR_HEIGHT_BAND = 4.0  # Meteors further than this from player height are ignored
    METEOR_HEIGHT_FADE = 2.0  # Height factor reaches 0 this far above/below
    METEOR_COLLISION_RADIUS = 1.6
    METEOR_DANGER_RADIUS = 3.5
    METEOR_WARNING_RADIUS = 5.0
    METEOR_COLLISION_PENALTY = 1000.0
    METEOR_DANGER_PENALTY = 200.0
    METEOR_WARNING_PENALTY = 30.0
    METEOR_MIN_DANGER_DIST = 0.5
    METEOR_CLEARANCE_WEIGHT = 5.0
    METEOR_CLEARANCE_CAP = 50.0

    # --- Enemy risk ---
    ENEMY_CONTACT_RADIUS = 2.0
    ENEMY_DANGER_RADIUS = 4.0
    ENEMY_WARNING_RADIUS = 6.0
    ENEMY_AWARE_RADIUS = 8.0
    ENEMY_CONTACT_PENALTY = 1500.0
    ENEMY_DANGER_PENALTY = 400.0
    ENEMY_WARNING_PENALTY = 50.0
    ENEMY_AWARE_PENALTY = 10.0
    ENEMY_MIN_DANGER_DIST = 0.5
    # Safety floor (below MIN_ENEMY_DISTANCE)
    ENEMY_UNSAFE_PENALTY = 300.0
    ENEMY_FLEE_BONUS = 150.0
    ENEMY_APPROACH_PENALTY = 200.0
    # Safety floor (at or above MIN_ENEMY_DISTANCE)
    ENEMY_SAFE_BONUS = 40.0
    ENEMY_SAFE_EXCESS_CAP = 5.0
    ENEMY_COMFORT_EXCESS = 2.0
    ENEMY_COMFORT_BONUS = 30.0
    ENEMY_WIDEN_BONUS = 20.0
    ENEMY_WIDEN_CAP = 3.0

    # --- Positional terms ---
    MOVEMENT_BONUS = 30.0
    CENTER_WEIGHT = 2.0
    EDGE_CLEARANCE = 2.0
    EDGE_PENALTY = 150.0
    BOUNDS_PENALTY = 500.0

    # --- Stillness ---
    STILL_THREAT_RADIUS = 6.0
    STILL_THREAT_HEIGHT = 5.0
    STILL_THREAT_PENALTY = 50.0
    STILL_THREAT_CAP = 5
    STILL_IDLE_PENALTY = 10.0

    # --- Holes ---
    HOLE_PENALTY_PER_LEVEL = 20.0
