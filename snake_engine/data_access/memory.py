"""
In-process high-score store with the same get/set surface as the
SQLite repository.
"""


class InMemoryHighScoreStore:
    def __init__(self, score: int = 0):
        self.score = score

    def get(self) -> int:
        return self.score

    def set(self, score: int) -> None:
        self.score = max(self.score, score)

    def reset(self) -> None:
        self.score = 0
