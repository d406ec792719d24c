import pygame

from pixelarcade.keyboard import Keyboard


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


def test_initially_no_keys_down():
    keyboard = Keyboard()
    assert keyboard.is_key_down(pygame.K_a) is False
    assert keyboard.key_released(pygame.K_a) is False


def test_press_marks_key_down():
    keyboard = Keyboard()
    keyboard.update(key_event(pygame.KEYDOWN, pygame.K_a))
    assert keyboard.is_key_down(pygame.K_a) is True
    assert keyboard.is_key_down(pygame.K_d) is False


def test_release_clears_key_and_records_it():
    keyboard = Keyboard()
    keyboard.update(key_event(pygame.KEYDOWN, pygame.K_SPACE))
    keyboard.update(key_event(pygame.KEYUP, pygame.K_SPACE))
    assert keyboard.is_key_down(pygame.K_SPACE) is False
    assert keyboard.key_released(pygame.K_SPACE) is True


def test_release_only_lasts_one_event():
    keyboard = Keyboard()
    keyboard.update(key_event(pygame.KEYUP, pygame.K_a))
    keyboard.update(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0)))
    assert keyboard.key_released(pygame.K_a) is False


def test_held_keys_survive_other_events():
    keyboard = Keyboard()
    keyboard.update(key_event(pygame.KEYDOWN, pygame.K_a))
    keyboard.update(key_event(pygame.KEYDOWN, pygame.K_d))
    keyboard.update(key_event(pygame.KEYUP, pygame.K_d))
    assert keyboard.is_key_down(pygame.K_a) is True
    assert keyboard.key_released(pygame.K_a) is False