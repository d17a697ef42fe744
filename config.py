W, H = 800, 500

BG = (11, 14, 20)
WHITE = (255, 255, 255)
GRAY = (130, 130, 130)
DIM = (60, 64, 72)
MINT = (0, 230, 163)
YELLOW = (245, 220, 80)

PADDLE_W = 12
PADDLE_H = 100
PADDLE_MARGIN = 12

PLAYER_SPEED = 6.0
AI_SPEED = 4.2
AI_DEAD_ZONE = 6.0

BALL_R = 8
BALL_BASE_SPEED = 5.0
BALL_SPEEDUP = 1.03
# None keeps rally acceleration unbounded
BALL_MAX_SPEED = None

MAX_BOUNCE_DEG = 75.0
SERVE_ANGLE_DEG = 30.0
KEY_KICK = 0.6

SERVE_DELAY_SEC = 0.7

FPS_DEFAULT = 60
FRAME_DT_CAP = 0.05

RESTART_BTN = (W // 2 - 55, H - 46, 110, 32)
