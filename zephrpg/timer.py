"""Interval timers that raise interrupts when they count down."""

from collections.abc import Callable
from enum import IntEnum, IntFlag

from .interrupts import InterruptController

_MAX_INTERVAL = 0xFFFFFFFF


class TimerId(IntEnum):
    TIMER0 = 0
    TIMER1 = 1


TIMER_IRQS = {TimerId.TIMER0: 72, TimerId.TIMER1: 74}


class _Control(IntFlag):
    ITO = 1 << 0
    CONT = 1 << 1
    START = 1 << 2
    STOP = 1 << 3


class Timer:
    """One interval timer, optionally wired to an interrupt controller."""

    def __init__(self, timer_id: TimerId = TimerId.TIMER0, controller: InterruptController | None = None):
        self.timer_id = TimerId(timer_id)
        self.controller = controller
        self.period = 0
        self.timed_out = False
        self._control = _Control(0)
        self._callback: Callable[[], None] | None = None

    @property
    def irq(self) -> int:
        return TIMER_IRQS[self.timer_id]

    @property
    def running(self) -> bool:
        return bool(self._control & _Control.START)

    @property
    def continuous(self) -> bool:
        return bool(self._control & _Control.CONT)

    @property
    def interrupts_enabled(self) -> bool:
        return bool(self._control & _Control.ITO)

    def enable_interrupts(self) -> None:
        self._control |= _Control.ITO

    def disable_interrupts(self) -> None:
        self._control &= ~_Control.ITO

    def start(self) -> None:
        self._control |= _Control.START

    def stop(self) -> None:
        self._control &= ~_Control.START

    def set_continuous(self) -> None:
        self._control |= _Control.CONT

    def set_oneshot(self) -> None:
        self._control &= ~_Control.CONT

    def set_interval(self, interval: int, callback: Callable[[], None]) -> None:
        """Load a new period, install ``callback`` and restart the timer."""
        if not 0 <= interval <= _MAX_INTERVAL:
            raise ValueError(f"interval out of range: {interval}")
        self._callback = callback
        if self.controller is not None:
            self.controller.config_interrupt(self.irq, self._isr)
        self.stop()
        self.period = interval
        self.start()

    def expire(self) -> None:
        """The counter reached zero: flag the timeout and raise the interrupt."""
        if not self.running:
            raise RuntimeError(f"{self.timer_id.name} is not running")
        self.timed_out = True
        if not self.continuous:
            self.stop()
        if not self.interrupts_enabled:
            return
        if self.controller is not None:
            self.controller.irq_handler(self.irq)
        else:
            self._isr()

    def _isr(self) -> None:
        self.timed_out = False
        if self._callback is not None:
            self._callback()