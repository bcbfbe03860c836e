"""Score and player selection state."""


class GameState:
    def __init__(self, selected_platform_type: str = '1'):
        self.score: int = 0
        self.selected_platform_type: str = selected_platform_type

    def award(self, points: int):
        self.score += points

    def penalize(self, points: int):
        self.score = max(0, self.score - points)

