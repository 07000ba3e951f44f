"""Processor exception and peripheral interrupt handling."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class Vector(Enum):
    """Exception and interrupt vectors the firmware handles."""

    NMI = "NMI"
    HARD_FAULT = "HardFault"
    MEM_MANAGE = "MemManage"
    BUS_FAULT = "BusFault"
    USAGE_FAULT = "UsageFault"
    SVC = "SVC"
    DEBUG_MON = "DebugMon"
    PEND_SV = "PendSV"
    SYSTICK = "SysTick"
    TIM2 = "TIM2"


_FAULTS = frozenset(
    {
        Vector.NMI,
        Vector.HARD_FAULT,
        Vector.MEM_MANAGE,
        Vector.BUS_FAULT,
        Vector.USAGE_FAULT,
    }
)


class FaultError(RuntimeError):
    """A fault vector fired; on the board the processor halts here."""

    def __init__(self, vector: Vector) -> None:
        super().__init__(f"{vector.value} exception: processor halted")
        self.vector = vector


class InterruptController:
    """Routes vectors to their handlers.

    SysTick advances the millisecond tick count, timer 2 calls the
    period-elapsed callback, and fault vectors raise :class:`FaultError`.
    """

    def __init__(self) -> None:
        self.ticks = 0
        self._period_elapsed: Callable[[], object] | None = None

    def dispatch(self, vector: Vector) -> None:
        """Run the handler of ``vector``."""
        if vector in _FAULTS:
            raise FaultError(vector)
        if vector is Vector.SYSTICK:
            self.ticks += 1
        elif vector is Vector.TIM2 and self._period_elapsed is not None:
            self._period_elapsed()

    def on_period_elapsed(
        self, callback: Callable[[], object]
    ) -> Callable[[], object]:
        """Make ``callback`` the timer 2 period-elapsed handler and return it."""
        self._period_elapsed = callback
        return callback