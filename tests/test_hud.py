from types import SimpleNamespace

import pytest

from zephrpg.clock import Clock
from zephrpg.hud import BLACK, WHITE, Hud
from zephrpg.models import Character, Effect, Item, ItemType, empty_item, new_player
from zephrpg.ps2 import BREAK_PREFIX, Key, Keyboard
from zephrpg.uart import Uart
from zephrpg.vga import Screen


def press(key):
    return [key]


def release(key):
    return [BREAK_PREFIX, key]


@pytest.fixture
def rig():
    screen, keyboard, clock, uart = Screen(), Keyboard(), Clock(), Uart()
    items = [empty_item(), Item(ItemType.WEAPON, "Espada", value=10, effect=Effect(attack=2))]
    player = new_player()
    hud = Hud(screen, keyboard, clock, player, items, uart)
    return SimpleNamespace(screen=screen, keyboard=keyboard, clock=clock, uart=uart, player=player, hud=hud)


def schedule(rig, events):
    def listener(now):
        if now > 10_000:
            raise RuntimeError("input schedule ran out")
        if now in events:
            rig.keyboard.feed(events[now])

    rig.clock.add_listener(listener)


def _bar(row, opener):
    return row.split(opener)[1].split("|")[0]


def test_statusbar_shows_player(rig):
    rig.hud.draw_statusbar()
    row2 = rig.screen.chars.row_text(2)
    row4 = rig.screen.chars.row_text(4)
    assert row2[3:9] == "Tobias"
    assert row4[3:].startswith("Dinheiro: 9999")
    assert "Arma: --------" in row2
    assert "Armadura: --------" in row4
    assert _bar(row2, "Vida: |") == "#" * 16
    assert "| 100/100" in row2


def test_mana_bar_is_partly_filled(rig):
    rig.hud.draw_statusbar()
    bar = _bar(rig.screen.chars.row_text(4), "Mana: |")
    filled = bar.count("#")
    assert len(bar) == 16
    assert 0 < filled < 16
    assert bar == "#" * filled + " " * (16 - filled)


def test_statusbar_names_weapon(rig):
    rig.player.weapon = 1
    rig.hud.draw_statusbar()
    assert "Arma: Espada" in rig.screen.chars.row_text(2)


def test_statusbar_with_zero_max_life_fails(rig):
    rig.player.max_life = 0
    with pytest.raises(ZeroDivisionError):
        rig.hud.draw_statusbar()


def test_draw_paints_panel(rig):
    rig.hud.draw()
    assert rig.screen.vga.get_pixel(14, 186) == WHITE
    assert rig.screen.vga.get_pixel(60, 200) == BLACK


def test_draw_list_moves_down_and_confirms(rig):
    schedule(rig, {100: press(Key.S), 200: release(Key.S), 300: press(Key.Z)})
    result = rig.hud.draw_list(5, 10, ["a", "b", "c"], 3, 3)
    assert result == 1
    assert rig.screen.chars.char_at(5, 12) == ">"
    assert rig.screen.chars.char_at(5, 10) == " "


def test_draw_list_return_cancels(rig):
    schedule(rig, {100: press(Key.X)})
    assert rig.hud.draw_list(0, 0, ["a", "b"], 2, 2) == -1


def test_draw_list_scrolls(rig):
    names = ["a", "b", "c", "d", "e"]
    schedule(rig, {100: press(Key.S), 200: release(Key.S), 300: press(Key.S), 400: release(Key.S), 500: press(Key.Z)})
    result = rig.hud.draw_list(0, 0, names, 5, 2)
    assert names[result] == "c"
    assert rig.screen.chars.row_text(0)[2] == "b"
    assert rig.screen.chars.row_text(2)[2] == "c"


def test_draw_list_clamps_at_both_ends(rig):
    names = ["a", "b", "c"]
    events = {}
    for step in range(3):
        events[100 + 200 * step] = press(Key.S)
        events[200 + 200 * step] = release(Key.S)
    events[700] = press(Key.Z)
    schedule(rig, events)
    assert rig.hud.draw_list(0, 0, names, 3, 2) == len(names) - 1


def test_draw_list_up_at_top_stays(rig):
    schedule(rig, {100: press(Key.W), 200: release(Key.W), 300: press(Key.Z)})
    assert rig.hud.draw_list(0, 0, ["a", "b"], 2, 2) == 0


def test_draw_list_rejects_bad_sizes(rig):
    with pytest.raises(ValueError):
        rig.hud.draw_list(0, 0, ["a"], 1, 2)
    with pytest.raises(ValueError):
        rig.hud.draw_list(0, 0, ["a"], 3, 1)


def test_items_menu_lists_inventory(rig):
    rig.player.items[0] = 1
    schedule(rig, {100: press(Key.Z)})
    assert rig.hud.draw_items_menu() == 0
    assert "Espada" in rig.screen.chars.row_text(13)
    assert "------" in rig.screen.chars.row_text(15)


def test_options_menu_reports_choice_until_cancelled(rig):
    schedule(
        rig,
        {100: press(Key.S), 200: release(Key.S), 300: press(Key.Z), 400: release(Key.Z), 500: press(Key.X)},
    )
    rig.hud.draw_options_menu()
    assert rig.uart.output == "Open weapons\n"


def test_battle_options_returns_choice(rig):
    schedule(rig, {100: press(Key.Z)})
    assert rig.hud.draw_battle_options() == 0
    assert rig.uart.output.startswith("Atacar")