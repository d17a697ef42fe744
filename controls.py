from dataclasses import dataclass
from typing import Optional
import pygame

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)


@dataclass
class InputIntent:
    """Last known state of the player's controls.

    ``pointer_y`` holds a fresh pointer position until the next step consumes
    it, so pointer and keys resolve as last writer wins.
    """

    up: bool = False
    down: bool = False
    pointer_y: Optional[float] = None
    pointer_active: bool = False

    @property
    def key_held(self) -> bool:
        return self.up or self.down

    def key_kick(self) -> int:
        """Sign of the spin added to a player return; up wins if both are held."""
        if self.up:
            return -1
        if self.down:
            return 1
        return 0

    def take_pointer(self) -> Optional[float]:
        y = self.pointer_y
        self.pointer_y = None
        return y


def press(intent: InputIntent, direction: str):
    if direction == "up":
        intent.up = True
    elif direction == "down":
        intent.down = True


def release(intent: InputIntent, direction: str):
    if direction == "up":
        intent.up = False
    elif direction == "down":
        intent.down = False


def pointer_move(intent: InputIntent, y: float):
    intent.pointer_y = float(y)
    intent.pointer_active = True


def pointer_leave(intent: InputIntent):
    intent.pointer_y = None
    intent.pointer_active = False


def _key_direction(key) -> Optional[str]:
    if key in UP_KEYS:
        return "up"
    if key in DOWN_KEYS:
        return "down"
    return None


def handle_event(intent: InputIntent, e) -> bool:
    """Route one pygame event into ``intent``. Returns True if it was used."""
    if e.type in (pygame.KEYDOWN, pygame.KEYUP):
        direction = _key_direction(e.key)
        if direction is None:
            return False
        if e.type == pygame.KEYDOWN:
            press(intent, direction)
        else:
            release(intent, direction)
        return True

    if e.type == pygame.MOUSEMOTION:
        pointer_move(intent, e.pos[1])
        return True

    if e.type == pygame.WINDOWLEAVE:
        pointer_leave(intent)
        return True

    return False
