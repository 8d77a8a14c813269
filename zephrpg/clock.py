"""Millisecond clock driven by a timer interrupt."""

from collections.abc import Callable

from .timer import Timer

DELAY_INTERVAL = 100000
_MASK32 = 0xFFFFFFFF


class Clock:
    """Counts milliseconds; with a timer attached the timer drives it."""

    def __init__(self, timer: Timer | None = None):
        self._millis = 0
        self._listeners: list[Callable[[int], None]] = []
        self.timer = timer
        if timer is not None:
            timer.disable_interrupts()
            timer.set_interval(DELAY_INTERVAL, self.tick)
            timer.set_continuous()
            timer.enable_interrupts()

    def tick(self) -> None:
        """Advance one millisecond and notify listeners."""
        self._millis = (self._millis + 1) & _MASK32
        for listener in list(self._listeners):
            listener(self._millis)

    def millis(self) -> int:
        return self._millis

    def add_listener(self, listener: Callable[[int], None]) -> None:
        """Call ``listener`` with the new time after every tick."""
        self._listeners.append(listener)

    def delay(self, wait_time: int) -> None:
        """Block until ``wait_time`` milliseconds have passed."""
        if not 0 <= wait_time <= _MASK32:
            raise ValueError(f"wait time out of range: {wait_time}")
        start = self._millis
        while (self._millis - start) & _MASK32 < wait_time:
            self._advance()

    def _advance(self) -> None:
        if self.timer is None:
            self.tick()
            return
        before = self._millis
        self.timer.expire()
        if self._millis == before:
            raise RuntimeError("the timer interrupt did not advance the clock")