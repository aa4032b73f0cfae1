"""Game constants."""

GRID_W, GRID_H = 10, 10
CELL_SIZE = 63
FRAME_PERIOD_MS = 190
LEVEL_SPEEDUP_MS = 20
MIN_FRAME_PERIOD_MS = 40
SWIPE_THRESHOLD = 30

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

KEY_BINDINGS = {
    "ArrowUp": "up", "k": "up", "w": "up",
    "ArrowDown": "down", "j": "down", "s": "down",
    "ArrowLeft": "left", "h": "left", "a": "left",
    "ArrowRight": "right", "l": "right", "d": "right",
}
PAUSE_KEYS = {" ", "Escape"}

SNAKE_COLOR = "green"
SNAKE_HEAD_COLOR = "DarkGreen"
FOOD_COLOR = "red"

# Body / head colour pairs handed out on each level-up, in order.
LEVEL_COLORS = [
    ("Salmon", "OrangeRed"),
    ("Orange", "DarkOrange"),
    ("LightYellow", "Yellow"),
    ("LawnGreen", "Lime"),
    ("Blue", "DarkBlue"),
    ("MediumPurple", "Purple"),
    ("Cornsilk", "Black"),
]

GLYPHS_HTML = {
    "head": "&#128165;",
    "trail": "&#129001;",
    "food": "&#127822;",
    "empty": "&#11036;",
    "border": "&#11035;",
}
GLYPHS_TEXT = {
    "head": "💥",
    "trail": "🟩",
    "food": "🍎",
    "empty": "⬜",
    "border": "⬛",
}

HIGHSCORE_KEY = "highscore"
