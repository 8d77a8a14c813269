import pytest

from zephrpg.clock import DELAY_INTERVAL, Clock
from zephrpg.interrupts import InterruptController
from zephrpg.timer import Timer


def test_tick_advances_millis():
    clock = Clock()
    assert clock.millis() == 0
    clock.tick()
    clock.tick()
    assert clock.millis() == 2


def test_delay_waits_exact_time():
    clock = Clock()
    clock.delay(50)
    assert clock.millis() == 50
    clock.delay(0)
    assert clock.millis() == 50


def test_listeners_see_each_tick():
    clock = Clock()
    seen = []
    clock.add_listener(seen.append)
    clock.delay(3)
    assert seen == [1, 2, 3]


def test_clock_configures_timer():
    timer = Timer()
    Clock(timer)
    assert timer.period == DELAY_INTERVAL == 100000
    assert timer.running and timer.continuous and timer.interrupts_enabled


def test_delay_driven_by_timer_and_controller():
    gic = InterruptController()
    gic.enable_irq()
    clock = Clock(Timer(controller=gic))
    clock.delay(5)
    assert clock.millis() == 5
    assert gic.last_acknowledged == 72


def test_delay_with_masked_irqs_fails():
    gic = InterruptController()
    clock = Clock(Timer(controller=gic))
    with pytest.raises(RuntimeError):
        clock.delay(1)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Clock().delay(-1)