import pygame

from controls import InputIntent, press, release, pointer_move, pointer_leave, handle_event


def test_press_and_release():
    intent = InputIntent()
    press(intent, "up")
    assert intent.up and not intent.down
    press(intent, "down")
    assert intent.key_held
    release(intent, "up")
    release(intent, "down")
    assert not intent.key_held


def test_key_kick_sign():
    intent = InputIntent()
    assert intent.key_kick() == 0
    intent.down = True
    assert intent.key_kick() == 1
    intent.up = True
    assert intent.key_kick() == -1


def test_pointer_is_consumed_once():
    intent = InputIntent()
    pointer_move(intent, 123)
    assert intent.pointer_active
    assert intent.take_pointer() == 123.0
    assert intent.take_pointer() is None
    assert intent.pointer_active


def test_pointer_leave():
    intent = InputIntent()
    pointer_move(intent, 50)
    pointer_leave(intent)
    assert intent.pointer_y is None
    assert not intent.pointer_active


def test_handle_keyboard_events():
    intent = InputIntent()
    assert handle_event(intent, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert intent.up
    assert handle_event(intent, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s))
    assert intent.down
    assert handle_event(intent, pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
    assert not intent.up
    assert not handle_event(intent, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))


def test_handle_pointer_events():
    intent = InputIntent()
    assert handle_event(intent, pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 240), rel=(0, 0), buttons=(0, 0, 0)))
    assert intent.pointer_y == 240.0
    assert handle_event(intent, pygame.event.Event(pygame.WINDOWLEAVE))
    assert not intent.pointer_active
    assert intent.pointer_y is None
