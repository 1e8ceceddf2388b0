from pingpong.settings import PlayerSlot


class ScoreBoard:
    def __init__(self, win_score=7):
        self.win_score = win_score
        self.reset()

    @property
    def winner(self):
        if self.player_one_score >= self.win_score:
            return PlayerSlot.ONE
        if self.player_two_score >= self.win_score:
            return PlayerSlot.TWO
        return None

    def score_of(self, slot):
        return self.player_one_score if slot == PlayerSlot.ONE else self.player_two_score

    def add_point(self, slot):
        if slot == PlayerSlot.ONE:
            self.player_one_score += 1
        else:
            self.player_two_score += 1

    def reset(self):
        self.player_one_score = 0
        self.player_two_score = 0
        self.round = 0
