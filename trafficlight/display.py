"""Four-digit multiplexed seven-segment display."""

from __future__ import annotations

from .gpio import DIGIT_ENABLES, SEGMENTS, Board, PinLevel

MAX_LED = 4

_PATTERNS = (
    0b1111110,  # 0
    0b0110000,  # 1
    0b1101101,  # 2
    0b1111001,  # 3
    0b0110011,  # 4
    0b1011011,  # 5
    0b1011111,  # 6
    0b1110000,  # 7
    0b1111111,  # 8
    0b1111011,  # 9
)


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _trunc_mod(value: int, divisor: int) -> int:
    return value - _trunc_div(value, divisor) * divisor


def segment_pattern(num: int) -> int:
    """Segment bits for the last decimal digit of ``num``; bit 0 drives segment a."""
    return _PATTERNS[abs(num) % 10]


def clock_buffer(count: int, mode: int) -> tuple[int, int, int, int]:
    """Digits shown for a count in the given mode.

    Mode 1 shows the count then ``01``; other modes show the count then
    ``0`` and the mode number.
    """
    tens = _trunc_div(count, 10)
    units = _trunc_mod(count, 10)
    if mode == 1:
        return (tens, units, 0, 1)
    return (0 if count < 10 else tens, units, 0, mode)


class SevenSegmentDisplay:
    """Drives the segment and digit-enable pins of a board; both are active low."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.buffer = [0] * MAX_LED

    def show_digit(self, num: int) -> None:
        """Put the pattern of one digit on the segment pins."""
        pattern = segment_pattern(num)
        for bit, pin in enumerate(SEGMENTS):
            lit = pattern & (1 << bit)
            self.board.write(pin, PinLevel.RESET if lit else PinLevel.SET)

    def update(self, index: int) -> None:
        """Enable digit ``index`` alone and show its buffered value."""
        if not 0 <= index < MAX_LED:
            return
        for position, pin in enumerate(DIGIT_ENABLES):
            self.board.write(pin, PinLevel.RESET if position == index else PinLevel.SET)
        self.show_digit(self.buffer[index])

    def set_buffer(self, count: int, mode: int) -> None:
        """Load the digits for a count in the given mode."""
        self.buffer = list(clock_buffer(count, mode))