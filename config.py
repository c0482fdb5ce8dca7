"""
Simulation tuning knobs.
"""

import math

# Network shape
INPUT_COUNT = 2   # bearing to nearest mob, time survived
OUTPUT_COUNT = 1  # aim bearing
SEED_HIDDEN_NEURONS = 3
SEED_WEIGHT = 0.01

# Mutation
MUT_CONNECT_RATE = 0.1
MUT_WEIGHT_RATE = 1.0
MUT_ACTIVATION_RATE = 0.25
MUT_WEIGHT_DEVIATION = 0.5

# Gene pool
EDEN_FITNESS = 10.0  # high rate of initial breeding to Adam/Eve
EDEN_GENERATION_SIZE = 3
SPAWN_MUTATION_STRENGTH = 0.15

# Arena
ARENA_W, ARENA_H = 640.0, 640.0
TICK_SECONDS = 1 / 60
MAX_ROUND_SECONDS = 600.0

# Borg (the AI shooter)
START_LIFE = 3
BORG_RADIUS = 5.0
BORG_SPEED = 30.0
BORG_ROTATION_SPEED = math.tau
WEAPON_REPEAT_SECONDS = 0.5

# Mobs
MOB_RADIUS = 3.0
MOB_SPEED = 30.0
MOB_ROTATION_SPEED = math.tau / 4
MOB_DAMAGE = 1
MOB_BASE_SPAWN_RATE = 0.5     # mobs per second at round start
MOB_DOUBLING_SECONDS = 30.0   # spawn rate doubles this often
SPAWN_CLEAR_ZONE = 0.25       # fraction of the arena kept free around the centre

# Diagnostics
DOT_EXPORT_PATH = "shooter.dot"
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
