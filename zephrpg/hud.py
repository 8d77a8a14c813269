"""Status bar, menus and selection lists drawn over the game screen."""

from .drawing import draw_rect_fill
from .mathutil import map_int
from .models import MAX_ENEMIES, MAX_ITEMS, ItemType
from .ps2 import Key
from .vga import get_color

CONFIRM_BUTTON = Key.Z
RETURN_BUTTON = Key.X
MENU_BUTTON = Key.C
UP_BUTTON = Key.W
DOWN_BUTTON = Key.S

WHITE = get_color(255, 255, 255)
BLACK = get_color(0, 0, 0)

_BAR_WIDTH = 16
_ENEMY_BAR_WIDTH = 24
_LIST_DELAY = 50
_ITEM_LIST_ROWS = 14


class Hud:
    """Draws the player's status and runs the blocking selection menus."""

    def __init__(self, screen, keyboard, clock, player, items, uart=None):
        self.screen = screen
        self.keyboard = keyboard
        self.clock = clock
        self.player = player
        self.items = items
        self.uart = uart

    @property
    def _chars(self):
        return self.screen.chars

    def _report(self, text: str, *args) -> None:
        if self.uart is not None:
            self.uart.printf(text, *args)

    def _bar(self, value: int, maximum: int, width: int) -> None:
        filled = map_int(value, 0, maximum, 0, width)
        for i in range(width):
            self._chars.put("#" if filled > i else " ")

    def draw(self) -> None:
        self.draw_statusbar()
        draw_rect_fill(self.screen.vga, 14, 186, 126, 44, WHITE, 3, BLACK)

    def draw_statusbar(self) -> None:
        chars, player = self._chars, self.player
        draw_rect_fill(self.screen.vga, 3, 2, 315, 24, WHITE, 3, BLACK)
        chars.printf(3, 2, player.name)
        chars.printf(3, 4, "Dinheiro: %d", player.money)
        chars.printf(23, 2, "Arma: %s", self.items[player.weapon].name)
        chars.printf(19, 4, "Armadura: %s", self.items[player.armor].name)
        chars.printf(46, 2, "Vida: |")
        self._bar(player.life, player.max_life, _BAR_WIDTH)
        chars.printf(69, 2, "| %d/%d  ", player.life, player.max_life)
        chars.printf(46, 4, "Mana: |")
        self._bar(player.mana, player.max_mana, _BAR_WIDTH)
        chars.printf(69, 4, "| %d/%d  ", player.mana, player.max_mana)

    def draw_enemy_status(self, enemies) -> None:
        """Show a life bar for each living enemy and blank the others."""
        if len(enemies) > MAX_ENEMIES:
            raise ValueError(f"at most {MAX_ENEMIES} enemies")
        x, y = 128, 188
        draw_rect_fill(self.screen.vga, x, y, 186, 44, WHITE, 3, BLACK)
        char_x = x // 4 + 8
        char_y = y // 4 + 2
        for j, enemy in enumerate(enemies):
            row = char_y + 2 * j
            if enemy.life > 0:
                self._chars.printf(char_x, row, " |")
                self._bar(enemy.life, enemy.max_life, _ENEMY_BAR_WIDTH)
                self._chars.printf(char_x + 26, row, "| %d/%d    ", enemy.life, enemy.max_life)
            else:
                self._chars.printf(char_x, row, " " * 35)

    def _render_list(self, x, y, names, offset, index, max_names) -> None:
        for i in range(max_names):
            self._chars.printf(x, y + 2 * i, "  %s ", names[offset + i])
        self._chars.printf(x, y + 2 * index, ">")

    def draw_list(self, x, y, names, length, max_names) -> int:
        """Let the player pick from ``names``; return its index, or -1 if cancelled.

        Shows ``max_names`` rows at a time, scrolling through ``length`` entries.
        Blocks until the confirm or return key is freshly pressed.
        """
        if not 0 <= max_names <= length:
            raise ValueError("visible rows must be between 0 and the list length")
        if length > len(names):
            raise ValueError("list length exceeds the names given")
        keyboard = self.keyboard
        index = offset = 0
        held = True
        self._render_list(x, y, names, offset, index, max_names)
        while True:
            up = keyboard.is_pressed(UP_BUTTON)
            down = keyboard.is_pressed(DOWN_BUTTON)
            back = keyboard.is_pressed(RETURN_BUTTON)
            confirm = keyboard.is_pressed(CONFIRM_BUTTON)
            if (up or down) and not held:
                if down:
                    if index >= max_names - 1:
                        offset = min(offset + 1, length - max_names)
                    else:
                        index += 1
                elif index <= 0:
                    offset = max(offset - 1, 0)
                else:
                    index -= 1
                self._render_list(x, y, names, offset, index, max_names)
            if back and not held:
                return -1
            if confirm and not held:
                return index + offset
            held = up or down or back or confirm
            self.clock.delay(_LIST_DELAY)

    def draw_items_menu(self) -> int:
        """List the inventory; return the chosen slot or -1."""
        x, y = 100, 45
        self.draw()
        draw_rect_fill(self.screen.vga, x, y, 125, 125, WHITE, 3, BLACK)
        names = []
        for slot in self.player.items[:MAX_ITEMS]:
            item = self.items[slot]
            names.append("------" if item.type is ItemType.NONE else item.name)
        return self.draw_list(x // 4 + 2, y // 4 + 2, names, MAX_ITEMS, _ITEM_LIST_ROWS)

    def draw_options_menu(self) -> None:
        """Run the pause menu until the player backs out of it."""
        options = ["Itens", "Armas", "Armaduras", "Feiticos"]
        messages = {1: "Open weapons\n", 2: "Open shields\n", 3: "Open Spells\n"}
        index = 0
        while index != -1:
            self.draw()
            draw_rect_fill(self.screen.vga, 100, 100, 66, 44, WHITE, 3, BLACK)
            index = self.draw_list(27, 27, options, 4, 4)
            if index == 0:
                self.draw_items_menu()
            elif index in messages:
                self._report(messages[index])

    def draw_battle_options(self) -> int:
        """Let the player choose a battle action; return its index or -1."""
        options = ["Atacar", "Defender", "Feitico", "Item"]
        draw_rect_fill(self.screen.vga, 6, 188, 118, 44, WHITE, 3, BLACK)
        index = self.draw_list(6, 49, options, 4, 4)
        if index >= 0:
            self._report("%s\n", options[index])
        return index