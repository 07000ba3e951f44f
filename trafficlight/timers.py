"""Tick-driven software timers with expiry flags."""

from __future__ import annotations

from dataclasses import dataclass

TIMER_CYCLE = 10
TIMER_COUNT = 5


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


@dataclass
class SoftwareTimer:
    """A countdown of ticks that raises its flag when it runs out.

    ``cycle`` is the tick period in milliseconds; durations passed to
    :meth:`set` are in milliseconds and rounded toward zero to whole ticks.
    """

    cycle: int = TIMER_CYCLE
    counter: int = 0
    flag: bool = False

    def __post_init__(self) -> None:
        if self.cycle <= 0:
            raise ValueError("timer cycle must be positive")

    def set(self, duration: int) -> None:
        """Start counting down ``duration`` milliseconds and clear the flag."""
        self.counter = _trunc_div(duration, self.cycle)
        self.flag = False

    def tick(self) -> bool:
        """Advance one tick and return the flag."""
        if self.counter > 0:
            self.counter -= 1
            if self.counter <= 0:
                self.flag = True
        return self.flag


class TimerBank:
    """A fixed set of software timers numbered from 1, all ticked together."""

    def __init__(self, count: int = TIMER_COUNT, cycle: int = TIMER_CYCLE) -> None:
        if count < 1:
            raise ValueError("a timer bank needs at least one timer")
        self.timers = tuple(SoftwareTimer(cycle) for _ in range(count))

    def _timer(self, index: int) -> SoftwareTimer:
        if not 1 <= index <= len(self.timers):
            raise IndexError(f"no timer {index}; timers are 1 to {len(self.timers)}")
        return self.timers[index - 1]

    def set(self, index: int, duration: int) -> None:
        """Start timer ``index`` for ``duration`` milliseconds."""
        self._timer(index).set(duration)

    def flag(self, index: int) -> bool:
        """Whether timer ``index`` has expired."""
        return self._timer(index).flag

    def run(self) -> None:
        """Advance every timer by one tick."""
        for timer in self.timers:
            timer.tick()