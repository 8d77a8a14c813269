"""PS/2 keyboard scan codes and key state tracking."""

from collections.abc import Callable, Iterable
from enum import Enum, IntEnum, auto


class SpecialKey(IntEnum):
    """Keys whose make code is preceded by 0xE0."""

    UP_ARROW = 0x75
    DOWN_ARROW = 0x72
    LEFT_ARROW = 0x6B
    RIGHT_ARROW = 0x74
    INSERT = 0x70
    HOME = 0x6C
    PAGE_UP = 0x7D
    PAGE_DOWN = 0x7A
    RIGHT_ALT = 0x11
    RIGHT_CTRL = 0x14
    NUMPAD_ENTER = 0x5A
    NUMPAD_RIGHT_SLASH = 0x4A


class Key(IntEnum):
    """Scan code set 2 make codes."""

    A = 0x1C
    B = 0x32
    C = 0x21
    D = 0x23
    E = 0x24
    F = 0x2B
    G = 0x34
    H = 0x33
    I = 0x43  # noqa: E741
    J = 0x3B
    K = 0x42
    L = 0x4B
    M = 0x3A
    N = 0x31
    O = 0x44  # noqa: E741
    P = 0x4D
    Q = 0x15
    R = 0x2D
    S = 0x1B
    T = 0x2C
    U = 0x3C
    V = 0x2A
    W = 0x1D
    X = 0x22
    Y = 0x35
    Z = 0x1A
    F1 = 0x05
    F2 = 0x06
    F3 = 0x04
    F4 = 0x0C
    F5 = 0x03
    F6 = 0x0B
    F7 = 0x83
    F8 = 0x0A
    F9 = 0x01
    F10 = 0x09
    F11 = 0x78
    F12 = 0x07
    SHIFT = 0x12
    TAB = 0x0D
    CTRL = 0x14
    ALT = 0x11
    SPACE = 0x29
    TILDE = 0x0E
    CAPS = 0x58
    BACKSPACE = 0x66
    ENTER = 0x5A
    DIGIT_1 = 0x16
    DIGIT_2 = 0x1E
    DIGIT_3 = 0x26
    DIGIT_4 = 0x25
    DIGIT_5 = 0x2E
    DIGIT_6 = 0x36
    DIGIT_7 = 0x3D
    DIGIT_8 = 0x3E
    DIGIT_9 = 0x46
    DIGIT_0 = 0x45
    MINUS = 0x4E
    EQUAL = 0x55
    LEFT_BRACKET = 0x54
    RIGHT_BRACKET = 0x5B
    COMMA = 0x41
    DOT = 0x49
    SEMICOLON = 0x4C
    NUMPAD_1 = 0x69
    NUMPAD_2 = 0x72
    NUMPAD_3 = 0x7A
    NUMPAD_4 = 0x6B
    NUMPAD_5 = 0x73
    NUMPAD_6 = 0x74
    NUMPAD_7 = 0x6C
    NUMPAD_8 = 0x75
    NUMPAD_9 = 0x7D
    NUMPAD_0 = 0x70
    NUMPAD_COMMA = 0x71
    NUMPAD_PLUS = 0x79
    NUMPAD_MINUS = 0x7B
    NUMPAD_STAR = 0x7C
    NUM_LOCK = 0x77
    SCROLL_LOCK = 0x7E


EXTENDED_PREFIX = 0xE0
BREAK_PREFIX = 0xF0

_KEY_CHARS = {Key[letter]: letter.lower() for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
_KEY_CHARS.update({Key.ENTER: "\n", Key.BACKSPACE: "\b", Key.SPACE: " "})


def key_to_char(key: int) -> str | None:
    """Text typed by a key, or None for keys that type nothing."""
    return _KEY_CHARS.get(key)


class _State(Enum):
    NORMAL = auto()
    EXTENDED = auto()
    RELEASE = auto()
    EXTENDED_RELEASE = auto()


class Keyboard:
    """Tracks which keys are held from a stream of scan codes."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()
        self._special: set[int] = set()
        self._state = _State.NORMAL
        self._callback: Callable[[], None] | None = None

    def feed(self, codes: Iterable[int]) -> None:
        """Process received scan codes, then run the callback if one is set."""
        for code in codes:
            if not 0 <= code <= 0xFF:
                raise ValueError(f"scan code out of range: {code}")
            if self._state is _State.NORMAL:
                if code == EXTENDED_PREFIX:
                    self._state = _State.EXTENDED
                elif code == BREAK_PREFIX:
                    self._state = _State.RELEASE
                else:
                    self._pressed.add(code)
            elif self._state is _State.EXTENDED:
                if code == BREAK_PREFIX:
                    self._state = _State.EXTENDED_RELEASE
                else:
                    self._special.add(code)
                    self._state = _State.NORMAL
            elif self._state is _State.RELEASE:
                self._pressed.discard(code)
                self._state = _State.NORMAL
            else:
                self._special.discard(code)
                self._state = _State.NORMAL
        if self._callback is not None:
            self._callback()

    def is_pressed(self, key: int) -> bool:
        return key in self._pressed

    def is_special_pressed(self, key: int) -> bool:
        return key in self._special

    def set_callback(self, callback: Callable[[], None] | None) -> None:
        self._callback = callback