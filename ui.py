import math
import pygame
from config import W, H, BG, WHITE, GRAY, DIM, MINT, YELLOW, RESTART_BTN, SERVE_DELAY_SEC
from game import Phase

def draw_field(surf):
    surf.fill(BG)
    dash, gap = 10, 12
    x = W // 2
    y = 10
    while y < H - 10:
        pygame.draw.line(surf, DIM, (x, y), (x, min(y + dash, H - 10)), 2)
        y += dash + gap

def draw_entities(surf, match):
    for p in (match.player, match.opponent):
        pygame.draw.rect(surf, WHITE, pygame.Rect(int(p.x), int(p.y), int(p.w), int(p.h)))
    b = match.ball
    pygame.draw.circle(surf, MINT, (int(b.pos.x), int(b.pos.y)), int(b.r))

def draw_scores(surf, font, match):
    left = font.render(str(match.score_player), True, WHITE)
    right = font.render(str(match.score_opponent), True, WHITE)
    surf.blit(left, left.get_rect(center=(W // 2 - 60, 36)))
    surf.blit(right, right.get_rect(center=(W // 2 + 60, 36)))

def draw_hints(surf, small):
    left = small.render("Left: You", True, DIM)
    right = small.render("Right: Computer", True, DIM)
    surf.blit(left, (10, H - 10 - left.get_height()))
    surf.blit(right, (W - 10 - right.get_width(), H - 10 - right.get_height()))

def draw_button(surf, small, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    surf.blit(bg, rect.topleft)
    pygame.draw.rect(surf, WHITE if active else GRAY, rect, 2, border_radius=8)
    t = small.render(text, True, WHITE if active else (210, 210, 210))
    surf.blit(t, t.get_rect(center=rect.center))

def restart_button_rect():
    return pygame.Rect(*RESTART_BTN)

def draw_overlay(surf, big, msg, color):
    panel = pygame.Surface((W, H), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 110))
    surf.blit(panel, (0, 0))
    if msg:
        t = big.render(msg, True, color)
        surf.blit(t, t.get_rect(center=(W // 2, H // 2 - 40)))

def draw_serve_countdown(surf, t_left):
    # bar shrinks to nothing as the serve comes due
    frac = max(0.0, min(1.0, t_left / SERVE_DELAY_SEC))
    w = int(160 * frac)
    if w > 0:
        pygame.draw.rect(surf, YELLOW, pygame.Rect(W // 2 - w // 2, H // 2 + 24, w, 4), border_radius=2)

def draw_debug(surf, small, match, fps):
    b = match.ball
    lines = [
        f"FPS: {fps:5.1f}   phase: {match.phase.value}   tick: {match.ticks}",
        f"BALL  x={b.pos.x:7.1f} y={b.pos.y:7.1f}",
        f"      vx={b.vel.x:6.2f} vy={b.vel.y:6.2f} speed={b.speed:5.2f} |v|={math.hypot(b.vel.x, b.vel.y):5.2f}",
        f"PLYR  y={match.player.y:7.1f}   OPP y={match.opponent.y:7.1f}",
    ]
    y = 70
    for text in lines:
        s = small.render(text, True, GRAY)
        surf.blit(s, (14, y))
        y += 18

def render(surf, fonts, match, fps=0.0, show_debug=False, hover_restart=False):
    """Paint one frame of ``match``. Reads state only."""
    font, small, big = fonts
    draw_field(surf)
    draw_entities(surf, match)
    draw_scores(surf, font, match)
    draw_hints(surf, small)
    draw_button(surf, small, restart_button_rect(), "Restart", active=hover_restart)

    if match.paused:
        draw_overlay(surf, big, "PAUSED", WHITE)
    elif match.phase is Phase.SERVING:
        draw_serve_countdown(surf, match.serve_timer)

    if show_debug:
        draw_debug(surf, small, match, fps)

def make_fonts():
    return (
        pygame.font.Font(None, 48),
        pygame.font.Font(None, 20),
        pygame.font.Font(None, 72),
    )
