API_URL = "https://rithm-jeopardy.herokuapp.com/api"
NUM_CATEGORIES = 6
NUM_CLUES_PER_CAT = 5
# How many candidate categories are requested before sampling the board's columns.
CATEGORY_POOL_SIZE = 100
REQUEST_TIMEOUT = 10.0

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Jeopardy!"

# Board footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.94
BOARD_MAX_HEIGHT_PCT = 0.80
# Space kept free under the board for the start/restart button.
BOTTOM_MARGIN = 110
# Header row (category titles) is this many body rows tall.
HEADER_ROW_SCALE = 1.2
MIN_CELL_SIZE = 24
CELL_GAP = 4

START_BUTTON_WIDTH = 240.0
START_BUTTON_HEIGHT = 56.0
START_BUTTON_Y = 50.0

HIDDEN_PLACEHOLDER = "?"

# Palette
BOARD_BACKGROUND = (6, 12, 233)
CELL_COLOR = (17, 28, 162)
CELL_DISABLED_COLOR = (40, 44, 96)
HEADER_COLOR = (10, 18, 120)
CELL_TEXT_COLOR = (255, 255, 255)
CELL_DISABLED_TEXT_COLOR = (170, 170, 200)
PLACEHOLDER_COLOR = (214, 159, 76)
