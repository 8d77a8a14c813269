"""Generic interrupt controller that routes interrupt lines to handlers."""

from collections.abc import Callable

IRQ_COUNT = 256
_CPU0 = 1


def _check_line(n: int) -> None:
    if not 0 <= n < IRQ_COUNT:
        raise ValueError(f"interrupt line out of range: {n}")


class InterruptController:
    """Distributor and CPU interface: enables lines, queues and dispatches IRQs."""

    def __init__(self) -> None:
        self._handlers: dict[int, Callable[[], None]] = {}
        self._targets: dict[int, int] = {}
        self._pending: list[int] = []
        self.priority_mask = 0xFFFF
        self.cpu_interface_enabled = True
        self.distributor_enabled = True
        self.irq_enabled = False
        self.last_acknowledged: int | None = None

    @property
    def enabled_lines(self) -> frozenset[int]:
        return frozenset(self._handlers)

    @property
    def pending(self) -> tuple[int, ...]:
        return tuple(self._pending)

    def target_of(self, n: int) -> int | None:
        """CPU mask that line ``n`` is routed to, or None if it is not configured."""
        _check_line(n)
        return self._targets.get(n)

    def config_interrupt(self, n: int, handler: Callable[[], None]) -> None:
        """Enable line ``n``, route it to CPU 0 and install its handler."""
        _check_line(n)
        self._handlers[n] = handler
        self._targets[n] = _CPU0

    def enable_irq(self) -> None:
        """Unmask IRQs on the CPU and service whatever became pending meanwhile."""
        self.irq_enabled = True
        while self._pending:
            self._dispatch(self._pending.pop(0))

    def irq_handler(self, irq: int) -> bool:
        """Signal line ``irq``; return True if its handler ran now."""
        _check_line(irq)
        if irq not in self._handlers:
            return False
        if not self.irq_enabled:
            self._pending.append(irq)
            return False
        self._dispatch(irq)
        return True

    def _dispatch(self, irq: int) -> None:
        self._handlers[irq]()
        self.last_acknowledged = irq