import math
from dataclasses import dataclass, field
from config import (
    W, H, PADDLE_W, PADDLE_H, BALL_R, BALL_BASE_SPEED, BALL_SPEEDUP, BALL_MAX_SPEED,
    MAX_BOUNCE_DEG, SERVE_ANGLE_DEG, KEY_KICK,
)

class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __repr__(self): return f"Vec2({self.x:.3f}, {self.y:.3f})"
    def length(self): return math.hypot(self.x, self.y)

    @classmethod
    def polar(cls, length, angle):
        return cls(length * math.cos(angle), length * math.sin(angle))

@dataclass
class Paddle:
    x: float
    y: float
    speed: float
    w: float = PADDLE_W
    h: float = PADDLE_H

    @property
    def center_y(self):
        return self.y + self.h / 2

    def recenter(self, field_h=H):
        self.y = (field_h - self.h) / 2

@dataclass
class Ball:
    pos: Vec2 = field(default_factory=lambda: Vec2(W / 2, H / 2))
    r: float = BALL_R
    speed: float = BALL_BASE_SPEED
    vel: Vec2 = field(default_factory=Vec2)

def clamp(v, a, b):
    return max(a, min(b, v))

def limit_speed(speed: float, max_speed) -> float:
    if max_speed is None:
        return speed
    return min(speed, max_speed)

def keep_paddle_in_field(p: Paddle, field_h=H):
    p.y = clamp(p.y, 0, field_h - p.h)

def serve_ball(ball: Ball, to_right: bool, rng, field_w=W, field_h=H):
    """Put the ball back on the centre spot and launch it.

    The launch angle is drawn uniformly from +-SERVE_ANGLE_DEG around the
    horizontal; ``to_right`` picks the horizontal sign.
    """
    ball.pos = Vec2(field_w / 2, field_h / 2)
    ball.speed = BALL_BASE_SPEED
    spread = math.radians(SERVE_ANGLE_DEG)
    angle = rng.uniform(-spread, spread)
    ball.vel = Vec2.polar(ball.speed, angle)
    if not to_right:
        ball.vel.x = -ball.vel.x
    return angle

def bounce_angle(ball: Ball, p: Paddle) -> float:
    """Map where the ball met the paddle onto an outgoing angle.

    Centre contact gives 0, the paddle ends give +-MAX_BOUNCE_DEG. Contact
    slightly past an end is held at the limit.
    """
    relative = (ball.pos.y - p.center_y) / (p.h / 2)
    max_bounce = math.radians(MAX_BOUNCE_DEG)
    return clamp(relative * max_bounce, -max_bounce, max_bounce)

def reflect_from_paddle(ball: Ball, p: Paddle, direction: int, kick: int = 0):
    """Send the ball back off ``p``.

    ``direction`` is +1 for the left paddle (ball leaves rightwards) and -1
    for the right one. ``kick`` is -1/0/+1 and nudges vy by KEY_KICK when the
    striking paddle was being driven by a held key.
    """
    ball.speed = limit_speed(ball.speed * BALL_SPEEDUP, BALL_MAX_SPEED)
    angle = bounce_angle(ball, p)
    ball.vel = Vec2(direction * abs(ball.speed * math.cos(angle)), ball.speed * math.sin(angle))
    if kick:
        ball.vel.y += kick * KEY_KICK
    return angle

def wall_collide_ball(ball: Ball, field_h=H):
    if ball.pos.y - ball.r <= 0:
        ball.pos.y = ball.r
        ball.vel.y = -ball.vel.y
        return True
    if ball.pos.y + ball.r >= field_h:
        ball.pos.y = field_h - ball.r
        ball.vel.y = -ball.vel.y
        return True
    return False

def _in_paddle_span(ball: Ball, p: Paddle):
    return p.y <= ball.pos.y <= p.y + p.h

def hit_left_paddle(ball: Ball, p: Paddle):
    # half-space test: anything behind the front face counts
    if ball.pos.x - ball.r <= p.x + p.w and _in_paddle_span(ball, p):
        ball.pos.x = p.x + p.w + ball.r
        return True
    return False

def hit_right_paddle(ball: Ball, p: Paddle):
    if ball.pos.x + ball.r >= p.x and _in_paddle_span(ball, p):
        ball.pos.x = p.x - ball.r
        return True
    return False

def check_score(ball: Ball, field_w=W):
    """Return which side won the point, or None while the ball is in play.

    "OPPONENT" once the ball is fully past the left edge, "PLAYER" once it is
    fully past the right edge.
    """
    if ball.pos.x < -ball.r:
        return "OPPONENT"
    if ball.pos.x > field_w + ball.r:
        return "PLAYER"
    return None
