from dataclasses import dataclass

# CONFIGURATION
RESOLUTION = (800, 600)
SCREEN_WIDTH, SCREEN_HEIGHT = RESOLUTION

FPS = 60
SUBSTEPS = 3

DEFAULT_LEVELS = 8
DEFAULT_BALLS = 100
MIN_LEVELS = 1
MAX_LEVELS = 20
MAX_BALLS = 500

BALL_RADIUS = 5
PEG_RADIUS = 4

GRAVITY = (0, 900)
SPACE_DAMPING = 0.99
SPACE_ITERATIONS = 30

# Layout
MAX_PEG_SPACING = 8 * BALL_RADIUS
PEG_START_FRACTION = 0.2
PEG_FIELD_FRACTION = 0.6
WALL_THICKNESS = 10
BIN_WALL_WIDTH = 4
FLOOR_THICKNESS = 4
GUIDE_THICKNESS = 4
# clearance between a side guide and the outermost peg of each row, in peg spacings
GUIDE_OFFSET = 0.75

FUNNEL_Y = 80
FUNNEL_LENGTH = 250
FUNNEL_THICKNESS = 10
FUNNEL_ANGLE = 0.2
FUNNEL_GAP = 4 * BALL_RADIUS

# Spawning
SPAWN_Y = 20
SPAWN_INTERVAL = 0.05
SPAWN_JITTER = 2

# Dragging
DRAG_MAX_FORCE = 5000
# fraction of joint error left uncorrected after one second
DRAG_ERROR_BIAS = (1 - 0.15) ** 60

# Materials
PEG_ELASTICITY = 0.3
PEG_FRICTION = 0.1
WALL_ELASTICITY = 0.2
WALL_FRICTION = 0.1

BALL_ELASTICITY = 0.4
BALL_FRICTION = 0.1
BALL_STATIC_FRICTION = 0.05
BALL_AIR_DRAG = 0.1
BALL_DENSITY = 0.005

# Colors
BACKGROUND_COLOR = (0x2C, 0x3E, 0x50)
PEG_COLOR = (0x95, 0xA5, 0xA6)
FUNNEL_COLOR = (0x95, 0xA5, 0xA6)
BIN_COLOR = (0xEC, 0xF0, 0xF1)
BALL_STROKE = (0x1B, 0x26, 0x31)
HUD_COLOR = (0xEC, 0xF0, 0xF1)
HUD_ACCENT = (0x4F, 0xC3, 0xF7)

PALETTE = (
    (0xF0, 0x62, 0x92),
    (0x4F, 0xC3, 0xF7),
    (0xAE, 0xD5, 0x81),
    (0xFF, 0xD5, 0x4F),
    (0xFF, 0xFF, 0xFF),
)
NEUTRAL_COLOR_INDEX = 4

# Collision types
BALL_COLLISION_TYPE = 1
PEG_COLLISION_TYPE = 2

# Tick sound parameters
SAMPLE_RATE = 44100
TICK_SOUND_FREQ = 500
TICK_SOUND_DURATION = 0.01
VELOCITY_THRESHOLD = 50

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class BoardConfig:
    level_count: int = DEFAULT_LEVELS
    ball_count: int = DEFAULT_BALLS

    def __post_init__(self):
        if self.level_count < 1:
            raise ConfigError(f"level_count must be at least 1, got {self.level_count}")
        if self.ball_count < 0:
            raise ConfigError(f"ball_count cannot be negative, got {self.ball_count}")

    @classmethod
    def clamped(cls, levels, balls):
        """Build a config from raw UI values, clamping them into range."""
        return cls(
            level_count=max(MIN_LEVELS, min(MAX_LEVELS, int(levels))),
            ball_count=max(0, min(MAX_BALLS, int(balls))),
        )
