"""Constants and tunable settings for Notefall."""


# =============================================================================
# SCREEN
# =============================================================================
SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 700
FPS = 60
PHYSICS_SUBSTEPS = 3


# =============================================================================
# PHYSICS
# =============================================================================
# 0.35x of a 1000 px/s^2 "normal" gravity
GRAVITY = (0, 1000 * 0.35)

# Accelerator forces are given per ms^2 and applied for one frame.
FORCE_TO_IMPULSE = (1000.0 / FPS) ** 2 * FPS


# =============================================================================
# BODIES
# =============================================================================
BALL_MASS = 1
BALL_RADIUS = 15
BALL_ELASTICITY = 0.7
BALL_FRICTION = 0.1
BALL_AIR_FRICTION = 0.01   # fraction of velocity lost per frame
BALL_SPAWN_JITTER = 25
OFFSCREEN_MARGIN = BALL_RADIUS * 4

PLATFORM_THICKNESS = 10
PLATFORM_FRICTION = 0.3
MIN_PLATFORM_LENGTH = 5

TARGET_RADIUS = 25
TARGET_POINTS = 10
TARGET_HIT_NOTE = 880.00   # A5
TARGET_BAND_TOP = 0.6      # fraction of height
TARGET_BAND_BOTTOM_OFFSET = 100

GROUND_HEIGHT = 50
GROUND_ELASTICITY = 0.7
GROUND_FRICTION = 0.5


# =============================================================================
# SCORING
# =============================================================================
PLATFORM_HIT_POINTS = 1
PLATFORM_DELETE_PENALTY = 5


# =============================================================================
# AUDIO
# =============================================================================
SAMPLE_RATE = 44100

PLATFORM_NOTE_DURATION = 0.1
MIN_IMPACT_VOLUME = 0.2
MAX_IMPACT_VOLUME = 0.8
MAX_IMPACT_SPEED = 20 * FPS   # px/s, 20 px per frame

TARGET_NOTE_DURATION = 0.15
TARGET_NOTE_VOLUME = 0.6

GROUND_NOTE = 392.00          # G4
GROUND_NOTE_DURATION = 0.1
GROUND_NOTE_VOLUME = 0.3

DELETE_NOTE = 110.00          # A2
DELETE_NOTE_DURATION = 0.1
DELETE_NOTE_VOLUME = 0.4

ACCELERATOR_FORCE_SCALE = 0.005

TEMPORARY_BASE_OPACITY = 0.7
TEMPORARY_OPACITY_SPAN = 0.5
MIN_OPACITY = 0.1
MAX_OPACITY = 1.0


# =============================================================================
# STARFIELD
# =============================================================================
STAR_AREA_PER_STAR = 10000
STAR_MAX_RADIUS = 1.5
STAR_MAX_SHIMMER = 0.01


# =============================================================================
# COLORS
# =============================================================================
COLOR_BG = (0, 0, 0)
COLOR_BALL = (255, 255, 255)
COLOR_GROUND = (51, 51, 51)
COLOR_TARGET = (255, 255, 0)
COLOR_OUTLINE = (85, 85, 85)
COLOR_TEXT = (255, 255, 255)
COLOR_INDICATOR = (255, 255, 0)
COLOR_DEFAULT_BODY = (211, 211, 211)


# =============================================================================
# SETTINGS
# =============================================================================
class GameSettings:
    """Tunable parameters for one game session."""

    def __init__(self, **kwargs):
        self.width = kwargs.get('width', SCREEN_WIDTH)
        self.height = kwargs.get('height', SCREEN_HEIGHT)
        self.gravity = kwargs.get('gravity', GRAVITY)
        # Seconds
        self.ball_spawn_interval = kwargs.get('ball_spawn_interval', 1.0)
        self.target_respawn_delay = kwargs.get('target_respawn_delay', 0.5)
        self.substeps = kwargs.get('substeps', PHYSICS_SUBSTEPS)
        self.starting_platform_type = kwargs.get('starting_platform_type', '1')
