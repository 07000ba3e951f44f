"""Debounced reading of the three push buttons, with long-press detection."""

from __future__ import annotations

from collections.abc import Iterable

from .gpio import PinLevel

NO_OF_BUTTONS = 3
DURATION_FOR_AUTO_INCREASING = 100
BUTTON_IS_PRESSED = PinLevel.RESET
BUTTON_IS_RELEASED = PinLevel.SET


class ButtonReader:
    """Debounces raw button levels sampled once per call to :meth:`read`.

    A level is accepted only when two consecutive samples agree. All state
    starts at the pressed level, as zero-filled memory does on the board,
    so a released button needs two samples before it reads released.
    """

    def __init__(self, count: int = NO_OF_BUTTONS) -> None:
        self._count = count
        self._state = [BUTTON_IS_PRESSED] * count
        self._last_sample = [BUTTON_IS_PRESSED] * count
        self._previous_sample = [BUTTON_IS_PRESSED] * count
        self._held = [0] * count
        self._long_press = [False] * count

    def read(self, levels: Iterable[object]) -> None:
        """Take one sample of every button's level."""
        samples = [PinLevel.coerce(level) for level in levels]
        if len(samples) != self._count:
            raise ValueError(f"expected {self._count} button levels, got {len(samples)}")
        for i, sample in enumerate(samples):
            self._previous_sample[i] = self._last_sample[i]
            self._last_sample[i] = sample
            if self._last_sample[i] == self._previous_sample[i]:
                self._state[i] = sample
            if self._state[i] == BUTTON_IS_PRESSED:
                if self._held[i] < DURATION_FOR_AUTO_INCREASING:
                    self._held[i] += 1
                else:
                    self._long_press[i] = True
            else:
                self._held[i] = 0
                self._long_press[i] = False

    def is_pressed(self, index: int) -> bool:
        """Whether button ``index`` is pressed; unknown buttons read as released."""
        if not 0 <= index < self._count:
            return False
        return self._state[index] == BUTTON_IS_PRESSED

    def is_pressed_1s(self, index: int) -> bool:
        """Whether button ``index`` has been held past the long-press threshold."""
        if not 0 <= index < self._count:
            raise IndexError(f"no button {index}")
        return self._long_press[index]