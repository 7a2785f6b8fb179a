import pygame
import pytest

from game_logic import InputState
from main import KEY_BINDINGS, handle_key_event, main


@pytest.mark.parametrize("key, direction", [
    (pygame.K_UP, "up"), (pygame.K_w, "up"),
    (pygame.K_DOWN, "down"), (pygame.K_s, "down"),
    (pygame.K_LEFT, "left"), (pygame.K_a, "left"),
    (pygame.K_RIGHT, "right"), (pygame.K_d, "right"),
])
def test_key_down_and_up(key, direction):
    keys = InputState()
    assert handle_key_event(keys, pygame.event.Event(pygame.KEYDOWN, key=key))
    assert getattr(keys, direction)
    assert handle_key_event(keys, pygame.event.Event(pygame.KEYUP, key=key))
    assert not getattr(keys, direction)


def test_both_bindings_share_a_flag():
    keys = InputState()
    handle_key_event(keys, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    handle_key_event(keys, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    handle_key_event(keys, pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
    assert not keys.up


def test_unbound_and_other_events_are_ignored():
    keys = InputState()
    assert not handle_key_event(keys, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    assert not handle_key_event(keys, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert keys.snapshot() == (False, False, False, False)


def test_bindings_cover_all_directions():
    assert set(KEY_BINDINGS.values()) == {"up", "down", "left", "right"}


def test_rejects_non_positive_rows():
    with pytest.raises(SystemExit) as exc:
        main(["--rows", "0"])
    assert exc.value.code == 2


def test_headless_smoke_run():
    assert main(["--headless", "--seed", "1", "--max-frames", "3"]) == 0


def test_too_small_grid_exits_with_error():
    assert main(["--headless", "--rows", "1", "--cols", "2"]) == 2
