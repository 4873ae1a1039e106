from dataclasses import dataclass


@dataclass(slots=True)
class GameScore:
    """Singleton score component. best survives restarts, current does not."""
    current: int = 0
    best: int = 0

    def update(self, score: int) -> bool:
        """Store the new current score; return True when it raised the best score."""
        self.current = score
        if score > self.best:
            self.best = score
            return True
        return False
