from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else holds alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                      # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"                    # payload: category_index=int, clue_index=int


# ============================================================================
# BOARD LIFECYCLE
# ============================================================================
EVENT_GAME_START_REQUEST = "game_start_request"    # payload: source=str
EVENT_BOARD_LOADING = "board_loading"              # payload: category_count=int, clues_per_category=int
EVENT_BOARD_READY = "board_ready"                  # payload: board_entity=int, titles=list[str]
EVENT_BOARD_BUILD_FAILED = "board_build_failed"    # payload: reason=str


# ============================================================================
# CLUES
# ============================================================================
EVENT_CLUE_REVEALED = "clue_revealed"              # payload: category_index=int, clue_index=int, state=RevealState, text=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
