"""Simulated GPIO ports and the board's pin assignment."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum


class PinLevel(IntEnum):
    """Logic level of a pin. LEDs and digit enables are active low."""

    RESET = 0
    SET = 1

    @classmethod
    def coerce(cls, value: object) -> "PinLevel":
        """Turn a PinLevel, bool or int into a PinLevel (non-zero means SET)."""
        if isinstance(value, PinLevel):
            return value
        return cls.SET if value else cls.RESET


class Port(Enum):
    """GPIO ports used on the board."""

    A = "GPIOA"
    B = "GPIOB"
    C = "GPIOC"


class Pin(Enum):
    """Every pin the firmware uses, as (port, pin number)."""

    ENC = (Port.C, 13)
    ENC2 = (Port.C, 14)
    DPC = (Port.C, 15)
    LED_RED = (Port.A, 1)
    LED_AMBER = (Port.A, 2)
    LED_GREEN = (Port.A, 3)
    LED_TIMER = (Port.A, 4)
    LED_RED_VER = (Port.A, 5)
    LED_AMBER_VER = (Port.A, 6)
    LED_GREEN_VER = (Port.A, 7)
    EN1 = (Port.A, 11)
    EN2 = (Port.A, 12)
    EN3 = (Port.A, 13)
    EN4 = (Port.A, 14)
    BUTTON1 = (Port.B, 0)
    BUTTON2 = (Port.B, 1)
    BUTTON3 = (Port.B, 2)
    SEG_A = (Port.B, 4)
    SEG_B = (Port.B, 5)
    SEG_C = (Port.B, 6)
    SEG_D = (Port.B, 7)
    SEG_E = (Port.B, 8)
    SEG_F = (Port.B, 9)
    SEG_G = (Port.B, 12)
    ENM = (Port.B, 13)
    ENM2 = (Port.B, 14)
    DPM = (Port.B, 15)

    @property
    def port(self) -> Port:
        return self.value[0]

    @property
    def number(self) -> int:
        return self.value[1]

    @property
    def mask(self) -> int:
        """The pin's bit in its port register."""
        return 1 << self.number

    @property
    def is_input(self) -> bool:
        return self in _INPUT_PINS


_INPUT_PINS = frozenset({Pin.BUTTON1, Pin.BUTTON2, Pin.BUTTON3})

BUTTONS = (Pin.BUTTON1, Pin.BUTTON2, Pin.BUTTON3)
SEGMENTS = (Pin.SEG_A, Pin.SEG_B, Pin.SEG_C, Pin.SEG_D, Pin.SEG_E, Pin.SEG_F, Pin.SEG_G)
DIGIT_ENABLES = (Pin.EN1, Pin.EN2, Pin.EN3, Pin.EN4)


class Board:
    """Pin levels of the board.

    Outputs start low, as after GPIO initialisation; the button inputs have
    pull-ups and so read high until something drives them low.
    """

    def __init__(self) -> None:
        self._levels: dict[Pin, PinLevel] = {
            pin: PinLevel.SET if pin.is_input else PinLevel.RESET for pin in Pin
        }

    def write(self, pins: Pin | Iterable[Pin], level: object) -> None:
        """Drive one output pin or several to a level."""
        targets = (pins,) if isinstance(pins, Pin) else tuple(pins)
        value = PinLevel.coerce(level)
        for pin in targets:
            if pin.is_input:
                raise ValueError(f"{pin.name} is an input pin")
        for pin in targets:
            self._levels[pin] = value

    def read(self, pin: Pin) -> PinLevel:
        """Read the level present on a pin."""
        return self._levels[pin]

    def toggle(self, pin: Pin) -> PinLevel:
        """Invert an output pin and return its new level."""
        if pin.is_input:
            raise ValueError(f"{pin.name} is an input pin")
        new = PinLevel.RESET if self._levels[pin] is PinLevel.SET else PinLevel.SET
        self._levels[pin] = new
        return new

    def level(self, pin: Pin) -> PinLevel:
        """Current level of any pin."""
        return self._levels[pin]

    def set_input(self, pin: Pin, level: object) -> None:
        """Drive an input pin from outside, as a pressed or released button would."""
        if not pin.is_input:
            raise ValueError(f"{pin.name} is not an input pin")
        self._levels[pin] = PinLevel.coerce(level)