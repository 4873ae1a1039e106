from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, /, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def event_names(self) -> list[str]:
        return sorted(self._signals.keys())


# ============================================================================
# INPUT
# ============================================================================
EVENT_TILE_CLICK = "tile_click"                # payload: col, row
EVENT_TILE_DESELECT = "tile_deselect"          # payload: None
EVENT_RESTART_REQUEST = "restart_request"      # payload: reason=str|None


# ============================================================================
# BALLS & BOARD
# ============================================================================
EVENT_BALL_SELECTED = "ball_selected"          # payload: coordinate=Coordinate
EVENT_BALL_DESELECTED = "ball_deselected"      # payload: coordinate=Coordinate
EVENT_BALL_PLACED = "ball_placed"              # payload: coordinate=Coordinate, color=BallColor, handle=int
EVENT_BALL_MOVED = "ball_moved"                # payload: handle=int, origin=Coordinate, target=Coordinate, path=list[Coordinate]
EVENT_BALL_REMOVED = "ball_removed"            # payload: handle=int, coordinate=Coordinate
EVENT_RUNS_CLEARED = "runs_cleared"            # payload: runs=list[list[Coordinate]], points=int
EVENT_PREVIEW_CHANGED = "preview_changed"      # payload: colors=tuple[BallColor, ...]


# ============================================================================
# SCORE & LEADER BOARD
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"                      # payload: score=int
EVENT_BEST_SCORE_CHANGED = "best_score_changed"            # payload: best=int
EVENT_LEADER_BOARD_QUALIFIED = "leader_board_qualified"    # payload: score=int, rank=int
EVENT_LEADER_BOARD_SHOW = "leader_board_show"              # payload: players=list[tuple[str|None, int]]
EVENT_LEADER_NAME_SUBMITTED = "leader_name_submitted"      # payload: name=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_OVER = "game_over"                          # payload: score=int
EVENT_GAME_RESET = "game_reset"                        # payload: reason=str|None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
