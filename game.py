"""Match state and the per-tick simulation step.

Everything the frame loop needs to advance a rally lives on a ``Match``:
both paddles, the ball, the score pair, the phase and the pending-serve
countdown. ``step`` moves it on by one display refresh.
"""

import logging
import math
import random
from enum import Enum
from typing import Optional

from config import (
    W, H, PADDLE_MARGIN, PADDLE_W, PADDLE_H, PLAYER_SPEED, AI_SPEED, SERVE_DELAY_SEC,
)
from core import (
    Ball, Paddle, clamp, keep_paddle_in_field, serve_ball, reflect_from_paddle,
    wall_collide_ball, hit_left_paddle, hit_right_paddle, check_score,
)
from ai import OpponentAI
from controls import InputIntent

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = "playing"
    SERVING = "serving"


class Side(str, Enum):
    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"

    @property
    def other(self):
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Match:
    def __init__(self, seed: Optional[int] = None, field_w=W, field_h=H):
        self.field_w = field_w
        self.field_h = field_h
        self.rng = random.Random(seed)

        self.player = Paddle(PADDLE_MARGIN, (field_h - PADDLE_H) / 2, PLAYER_SPEED)
        self.opponent = Paddle(field_w - PADDLE_MARGIN - PADDLE_W, (field_h - PADDLE_H) / 2, AI_SPEED)
        self.ball = Ball()
        self.ai = OpponentAI()

        self.score_player = 0
        self.score_opponent = 0

        self.phase = Phase.PLAYING
        self.serve_timer = 0.0
        self.serve_to = Side.OPPONENT
        self.paused = False
        self.ticks = 0

    @property
    def scores(self):
        return self.score_player, self.score_opponent

    def serve(self, toward: Side):
        angle = serve_ball(self.ball, toward is Side.OPPONENT, self.rng, self.field_w, self.field_h)
        self.phase = Phase.PLAYING
        self.serve_timer = 0.0
        logger.debug("serve toward %s angle=%.1fdeg vel=%r", toward.value, math.degrees(angle), self.ball.vel)

    def award_point(self, scorer: Side):
        if scorer is Side.PLAYER:
            self.score_player += 1
        else:
            self.score_opponent += 1
        # the side that conceded receives the next serve
        self.serve_to = scorer.other
        self.phase = Phase.SERVING
        self.serve_timer = SERVE_DELAY_SEC
        logger.info("%s scores, %d - %d", scorer.value.lower(), self.score_player, self.score_opponent)


def new_match(seed: Optional[int] = None) -> Match:
    match = Match(seed)
    match.serve(Side.OPPONENT if match.rng.random() < 0.5 else Side.PLAYER)
    logger.info("match started")
    return match


def restart(match: Match, serve_to: Side = Side.OPPONENT):
    """Zero the scores, recentre both paddles and serve at once.

    Overwrites any pending serve countdown, so a restart landing mid-delay
    cannot be followed by a second, late serve.
    """
    match.score_player = 0
    match.score_opponent = 0
    match.player.recenter(match.field_h)
    match.opponent.recenter(match.field_h)
    match.paused = False
    match.serve(serve_to)
    logger.info("match restarted")


def toggle_pause(match: Match) -> bool:
    match.paused = not match.paused
    logger.debug("paused=%s", match.paused)
    return match.paused


def move_player(match: Match, intent: InputIntent):
    p = match.player
    if intent.up:
        p.y -= p.speed
    if intent.down:
        p.y += p.speed
    target = intent.take_pointer()
    if target is not None:
        p.y = clamp(target - p.h / 2, 0, match.field_h - p.h)


def _tick_serve(match: Match, dt: float):
    match.serve_timer -= dt
    if match.serve_timer <= 0:
        match.serve(match.serve_to)


def step(match: Match, intent: InputIntent, dt: float):
    """Advance the match by one frame.

    Physics is per call, not per second: ``dt`` only drains the serve delay.
    Returns the side that scored on this tick, if any.
    """
    if match.paused:
        return None

    if match.phase is Phase.SERVING:
        _tick_serve(match, dt)
        return None

    match.ticks += 1
    ball = match.ball

    move_player(match, intent)
    keep_paddle_in_field(match.player, match.field_h)
    keep_paddle_in_field(match.opponent, match.field_h)

    match.ai.update(match.opponent, ball, match.field_h)

    ball.pos = ball.pos + ball.vel

    wall_collide_ball(ball, match.field_h)

    if hit_left_paddle(ball, match.player):
        reflect_from_paddle(ball, match.player, 1, intent.key_kick())
        logger.debug("player return, speed=%.2f", ball.speed)

    if hit_right_paddle(ball, match.opponent):
        reflect_from_paddle(ball, match.opponent, -1)
        logger.debug("opponent return, speed=%.2f", ball.speed)

    scored = check_score(ball, match.field_w)
    if scored is None:
        return None
    scorer = Side(scored)
    match.award_point(scorer)
    return scorer
