from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from lines.constants import LEADER_BOARD_SIZE

Player = Tuple[Optional[str], int]


def _default_players() -> List[Player]:
    return [(f"Player {rank}", rank * 100) for rank in range(1, LEADER_BOARD_SIZE + 1)]


@dataclass(slots=True)
class LeaderBoard:
    """Ranking of the best finished rounds, highest score first.

    An entry with name None is a fresh result still waiting for the player's name.
    Storing the table between sessions is left to the host application.
    """
    players: List[Player] = field(default_factory=_default_players)
    max_players: int = LEADER_BOARD_SIZE

    def __post_init__(self) -> None:
        self._sort()

    def _sort(self) -> None:
        # Stable sort keeps older entries ahead of equal newer scores.
        self.players.sort(key=lambda player: player[1], reverse=True)
        del self.players[self.max_players:]

    def best_score(self) -> Optional[int]:
        return max((score for _, score in self.players), default=None)

    def lowest_score(self) -> Optional[int]:
        return min((score for _, score in self.players), default=None)

    def best_player(self) -> Optional[str]:
        if not self.players:
            return None
        return self.players[0][0]

    def qualifies(self, score: int) -> bool:
        """True when score beats the current minimum (or the table still has room)."""
        if len(self.players) < self.max_players:
            return True
        lowest = self.lowest_score()
        return lowest is not None and score > lowest

    def add_player(self, score: int) -> int:
        """Insert an unnamed result and return its zero-based rank."""
        entry: Player = (None, score)
        self.players.append(entry)
        self._sort()
        for index, player in enumerate(self.players):
            if player is entry:
                return index
        return -1

    def set_name(self, name: str) -> None:
        self.players = [(name if player_name is None else player_name, score) for player_name, score in self.players]

    def pending_entry(self) -> bool:
        return any(player_name is None for player_name, _ in self.players)

    def discard_pending(self) -> None:
        """Forget results whose name was never entered."""
        self.players = [player for player in self.players if player[0] is not None]
