"""Gameplay and tuning constants.

All timings are in frames (the game steps at a fixed 60 FPS) and all
distances in arena pixels. ``rockblast.config`` builds its validated
defaults from these values.
"""

FPS = 60

# Arena
ARENA_WIDTH = 800
ARENA_HEIGHT = 600
GROUND_OFFSET = 30  # ground line sits this far above the bottom edge

# Cannon
CANNON_WIDTH = 50
CANNON_HEIGHT = 50
CANNON_BOTTOM_MARGIN = 20  # gap between cannon bottom and arena bottom

# Projectiles
PROJECTILE_WIDTH = 16
PROJECTILE_HEIGHT = 16
PROJECTILE_SPEED = 50
FIRE_COOLDOWN_FRAMES = 3

# Rocks
ROCK_MIN_SIZE = 30
ROCK_MAX_SIZE = 60
ROCK_BASE_SPEED = 0.8
ROCK_SPEED_VARIATION = 0.3
ROCK_GRAVITY = 0.15  # added to vy every frame
ROCK_RESTITUTION = 1.0  # 1.0 = perfectly elastic bounce
ROCK_BOUNCE_JITTER = 0.15  # horizontal nudge range on ground bounce
ROCK_TIER_SCALES = (2.0, 1.0, 0.5)  # size multiplier per fragment tier
ROCK_ELITE_SCALE_FACTOR = 2.0
ROCK_ELITE_GRAVITY_FACTOR = 0.7  # elite tier-0 rocks fall heavier but slower
ROCK_ELITE_HEALTH_FACTOR = 1.5
ROCK_BASE_HEALTH_MIN = 10
ROCK_BASE_HEALTH_MAX = 29
ROCK_SPLIT_FRAMES = 10
ROCK_IMPACT_DECAY = 0.85
ROCK_HIT_FLASH_FRAMES = 6
ROCK_HEAVY_IMPACT_SPEED = 3  # elite ground impacts above this shake the ground
ROCK_DUST_TRAIL_SPEED = 2
ROCK_DUST_TRAIL_CHANCE = 0.3

# Fragmentation
CHILD_SPEED_FACTOR = 0.7
CHILD_OFFSET_X = 10
CHILD_SEPARATION = 4
CHILD_SEPARATION_ELITE = 6
CHILD_LAUNCH_SPEED = 4

# Waves
ROCKS_PER_WAVE = 3
WAVE_STAGGER_FRAMES = 12  # ~200 ms between rocks of one wave
ELITE_BASE_CHANCE = 0.15
ELITE_CHANCE_PER_WAVE = 0.02
ELITE_MAX_CHANCE = 0.35

# Difficulty
DIFFICULTY_INTERVAL_FRAMES = 600
SPAWN_INTERVAL_START = 90
SPAWN_INTERVAL_MIN = 30
SPAWN_INTERVAL_STEP = 5
SPEED_BONUS_STEP = 0.2
SPEED_BONUS_MAX = 3.0
SCORE_PER_LEVEL = 50

# Collectibles
COLLECTIBLE_SIZE = 30
COLLECTIBLE_SPEED = 3
COLLECTIBLE_SPAWN_FRAMES = 600
COLLECTIBLE_SPAWN_CHANCE = 0.5
COLLECTIBLE_FLOAT_SPEED = 0.1
COLLECTIBLE_FLOAT_AMPLITUDE = 3
DOUBLE_FIRE_FRAMES = 600
PICKUP_BONUS = 5

# Particles
PARTICLE_DEFAULT_GRAVITY = 0.1
PARTICLE_AIR_DRAG = 0.98
SMOKE_EXPANSION = 0.15
MAX_PARTICLES = 2000

__all__ = [name for name in globals().keys() if name.isupper()]
