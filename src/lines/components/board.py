from dataclasses import dataclass

from lines.constants import BOARD_SIZE, MIN_RUN_LENGTH, POINTS_PER_BALL, PREVIEW_SIZE


@dataclass(frozen=True, slots=True)
class BoardOptions:
    """Static board configuration shared by the grid, matcher and spawner."""
    size: int = BOARD_SIZE
    min_run_length: int = MIN_RUN_LENGTH
    preview_size: int = PREVIEW_SIZE
    points_per_ball: int = POINTS_PER_BALL

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if self.min_run_length < 1:
            raise ValueError(f"Minimum run length must be positive, got {self.min_run_length}")
        if self.preview_size < 1:
            raise ValueError(f"Preview size must be positive, got {self.preview_size}")


@dataclass(slots=True)
class Board:
    """Singleton component marking the board entity and exposing its options."""
    options: BoardOptions
