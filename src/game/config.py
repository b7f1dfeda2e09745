# --- Display ---
WIDTH = 800
HEIGHT = 480
FPS = 60

# --- Player ---
PLAYER_START_X = 64
PLAYER_START_Y = 250
PLAYER_W = 60
PLAYER_H = 96
GRAVITY = 1                 # px/frame^2 added to dy while airborne
JUMP_DY = -10               # jump impulse (px/frame)
JUMP_HOLD_FRAMES = 12       # frames a held jump keeps re-applying the impulse
START_SPEED = 6             # world scroll speed at run start (px/frame)
MAX_SPEED = 15
MAX_DY = 24.0               # only used to normalise observations
PLAYER_SHEET_COLS = 4       # frames per row in the avatar sprite sheet
ANIM_FRAME_SPEED = 4        # updates per animation frame

# --- Terrain ---
PLATFORM_WIDTH = 32         # every scenery tile is PLATFORM_WIDTH x PLATFORM_WIDTH
PLATFORM_BASE = HEIGHT - PLATFORM_WIDTH
PLATFORM_SPACER = 64        # vertical distance between two height tiers
MAX_PLATFORM_HEIGHT = 4
START_PLATFORM_HEIGHT = 2
START_PLATFORM_LENGTH = 15
START_GAP_LENGTH = 0
START_PLATFORM_COUNT = 30   # grass tiles laid under the player at run start
START_PLATFORM_STEP = PLATFORM_WIDTH - 3

# --- Spawning ---
ENV_MIN_SCORE = 40          # decorations only after this many spawns
ENV_ROLL = 20               # 1 in (ENV_ROLL + 1) chance per terrain tile
ENEMY_MIN_SCORE = 100
ENEMY_CHANCE = 0.96         # random() must exceed this
MAX_ENEMIES = 3
ENEMY_MIN_RUN = 5           # remaining terrain tiles needed before a hazard
SPEEDUP_FACTOR = 20         # speed escalation cadence = interval * speed * SPEEDUP_FACTOR

# --- Collision ---
LANDING_ANGLE_MIN = -130.0  # degrees, approach angle from platform to player
LANDING_ANGLE_MAX = -50.0
LANDING_SINK = 5            # player rests slightly inside the tile top

# --- Background ---
PARALLAX_SPEEDS = (("sky", 0.2), ("backdrop", 0.4), ("backdrop2", 0.6))

# --- HUD ---
SCORE_TEXT_X = WIDTH - 140
SCORE_TEXT_Y = 30

SEED_DEFAULT = 12345
DEBUG_LOG = False           # print game-over / speed-up events to stdout

# --- Colors (RGB) ---
COLOR_BG = (9, 14, 28)
COLOR_FG = (220, 232, 255)
COLOR_ACCENT = (120, 200, 255)
COLOR_DANGER = (255, 86, 110)

# placeholder tints used when no image files are provided
SPRITE_COLORS = {
    "bg": (20, 32, 58),
    "sky": (44, 70, 110),
    "backdrop": (52, 84, 96),
    "backdrop2": (60, 96, 72),
    "water": (40, 110, 200),
    "grass": (76, 160, 72),
    "grass1": (88, 172, 80),
    "grass2": (70, 150, 66),
    "bridge": (150, 110, 70),
    "box": (210, 170, 60),
    "cliff": (100, 130, 70),
    "plant": (60, 200, 110),
    "bush1": (40, 140, 60),
    "bush2": (40, 140, 60),
    "spikes": (200, 200, 210),
    "slime": (230, 90, 140),
    "avatar_normal": COLOR_ACCENT,
}
