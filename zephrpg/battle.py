"""Battle screen shown when the player meets enemies."""

import time
from collections.abc import Sequence

from .drawing import draw_image
from .hud import RETURN_BUTTON
from .models import MAX_ENEMIES

BATTLE_X = 0
BATTLE_Y = 30
_POLL_INTERVAL = 0.001


def start_battle(screen, keyboard, image, enemies: Sequence[int]) -> None:
    """Show the battle picture and wait until the return key is held.

    ``image`` is the bitmap shown and ``enemies`` the indices of the foes.
    """
    if len(enemies) > MAX_ENEMIES:
        raise ValueError(f"at most {MAX_ENEMIES} enemies, got {len(enemies)}")
    draw_image(screen.vga, BATTLE_X, BATTLE_Y, image)
    screen.vga.switch_buffer()
    while not keyboard.is_pressed(RETURN_BUTTON):
        time.sleep(_POLL_INTERVAL)