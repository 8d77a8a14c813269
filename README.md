# zephrpg

Building blocks for a small role-playing game that runs on a simulated
machine: a 320x240 RGB565 framebuffer, an 80x60 character overlay, a PS/2
keyboard, a UART serial port with a slash-command console, interval timers,
an interrupt controller and a millisecond clock. On top of these sit the
game's data models, a status HUD with blocking selection menus, and a
battle screen.

The package has no dependencies beyond the standard library.

## Modules

- `zephrpg.textfmt` – `format_text(text, *args)`, a `printf`-style
  formatter supporting `%d`, `%u`, `%l`, `%s`, `%x`, `%p` and `%%`, and
  `parse_int(text, max_length)`, which reads decimal digits up to a space.
  Hexadecimal is upper case; `%x` drops leading zeros, `%p` always prints
  eight digits. A non-empty `%s` argument is followed by a NUL character,
  and `%f` prints nothing.
- `zephrpg.mathutil` – `abs_int`, `pow_int` (raises `ValueError` for a
  negative exponent) and `map_int` (integer range mapping, truncating toward
  zero; raises `ZeroDivisionError` for an empty input range).
- `zephrpg.vga` – `get_color(r, g, b)` packs 8-bit channels into RGB565;
  `VgaDisplay` (pixels, rows 512 entries apart) with `set_pixel`,
  `get_pixel`, `fill`, `set_backbuffer`, `switch_buffer` and
  `is_double_buffered`; `CharDisplay` (a cursor-driven text overlay, rows
  128 entries apart) with `set_cursor`, `put`, `printf`, `clear`,
  `char_at`, `row_text` and the same buffer methods; and `Screen`, a
  dataclass holding a `vga` and a `chars` display.
- `zephrpg.drawing` – `draw_line` (Bresenham), `draw_rect`,
  `draw_rect_fill` (with a border of a given weight) and `draw_image`,
  which draws a bottom-up 24-bit BMP given as bytes.
- `zephrpg.ps2` – `Key` and `SpecialKey` scan codes, `key_to_char`, and
  `Keyboard`, which tracks held keys from a stream of scan codes
  (`feed`, `is_pressed`, `is_special_pressed`, `set_callback`).
- `zephrpg.interrupts` – `InterruptController`: `config_interrupt` installs
  a handler for a line, `irq_handler` signals a line (queued until
  `enable_irq` is called).
- `zephrpg.timer` – `TimerId` and `Timer`, with start/stop, one-shot or
  continuous mode, `set_interval` and `expire`, which raises the timer's
  interrupt (line 72 or 74).
- `zephrpg.uart` – `Uart`: `put`, `puts`, `write`, `printf`, echo control,
  a receive callback and `receive`, which feeds characters in. Everything
  sent accumulates in `Uart.output`.
- `zephrpg.console` – `Console`, which collects a line from a `Uart` and
  runs the matching `/command`; `help` is registered from the start.
- `zephrpg.clock` – `Clock`: `tick`, `millis`, `delay` and `add_listener`.
  Given a `Timer`, the timer's interrupt drives it.
- `zephrpg.crash` – `dump_core(screen, registers)`, the blue crash screen
  listing R0–R12, LR and CPSR.
- `zephrpg.models` – game data: `Effect`, `Spell`, `ItemType`, `Item`,
  `QuestCondition`, `QuestStatus`, `Quest`, `Personality`, `Character`,
  `Npc`, `SceneType`, `CutsceneData`, `VillageData`, `ShopData`,
  `DungeonData`, `BossData`, `Scene`, `Line` and `Dialog`, plus
  `empty_item()` and `new_player()`.
- `zephrpg.hud` – `Hud`, which draws the status bar and enemy life bars and
  runs the blocking menus: `draw_list`, `draw_items_menu`,
  `draw_options_menu` and `draw_battle_options`. It also defines the key
  bindings `CONFIRM_BUTTON` (Z), `RETURN_BUTTON` (X), `MENU_BUTTON` (C),
  `UP_BUTTON` (W) and `DOWN_BUTTON` (S).
- `zephrpg.battle` – `start_battle(screen, keyboard, image, enemies)`,
  which shows a picture and waits until the return key is held.

## Examples

```python
from zephrpg.textfmt import format_text, parse_int

format_text("%d + %d = %d\n", 1, 2, 3)   # "1 + 2 = 3\n"
format_text("0x%x", 255)                 # "0xFF"
parse_int("42", 32)                      # 42
```

```python
from zephrpg.vga import get_color
from zephrpg.mathutil import map_int

get_color(255, 255, 255)      # 0xFFFF
get_color(0, 0, 255)          # 0x001F
map_int(50, 0, 100, 0, 16)    # 8
```

Tracking keys:

```python
from zephrpg.ps2 import Key, Keyboard

keyboard = Keyboard()
keyboard.feed([0x1C])          # make code of A
keyboard.is_pressed(Key.A)     # True
keyboard.feed([0xF0, 0x1C])    # break code of A
keyboard.is_pressed(Key.A)     # False
```

A console command over the serial port:

```python
from zephrpg.console import Console
from zephrpg.textfmt import parse_int
from zephrpg.uart import Uart

uart = Uart()
console = Console(uart)
console.add_command(
    "sum", 2,
    lambda params: uart.printf("%d\n", parse_int(params[0], 32) + parse_int(params[1], 32)),
)
uart.receive("/sum 1 2\n")
uart.output   # the echoed "/sum 1 2\n" followed by "3\n"
```

## What the package does not do

It has no game loop and no command to start a game: nothing boots the
machine, shows a main menu or moves the player from one `Scene` to the
next. The scene, dialog and quest types in `zephrpg.models` describe a game
but nothing here plays them; there is no dialog box or text box drawing.
`start_battle` only shows a picture and waits for a key; there are no
combat rules. The console offers only `help` until you add commands.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.