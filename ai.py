from config import AI_SPEED, AI_DEAD_ZONE, H
from core import Ball, Paddle, keep_paddle_in_field

class OpponentAI:
    """Follows the ball vertically, one fixed step per tick.

    No interception forecast: the only input is where the ball is right now,
    so the paddle lags a fast ball and the match stays winnable.
    """

    def __init__(self, speed=AI_SPEED, dead_zone=AI_DEAD_ZONE):
        self.speed = speed
        self.dead_zone = dead_zone

    def decide(self, paddle: Paddle, ball: Ball) -> int:
        if paddle.center_y < ball.pos.y - self.dead_zone:
            return 1
        if paddle.center_y > ball.pos.y + self.dead_zone:
            return -1
        return 0

    def update(self, paddle: Paddle, ball: Ball, field_h=H):
        move = self.decide(paddle, ball)
        paddle.y += move * self.speed
        keep_paddle_in_field(paddle, field_h)
        return move
