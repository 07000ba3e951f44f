"""Traffic-light state machine, button handling and the simulated main loop."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from enum import Enum

from .buttons import NO_OF_BUTTONS, ButtonReader
from .clock import TIM2_PERIOD, TIM2_PRESCALER, SystemClock
from .display import MAX_LED, SevenSegmentDisplay
from .gpio import Board, Pin, PinLevel
from .interrupts import InterruptController, Vector
from .msp import MspState, Peripheral
from .timers import TIMER_CYCLE, SoftwareTimer

TRAFFIC_LEDS = (
    Pin.LED_RED,
    Pin.LED_AMBER,
    Pin.LED_GREEN,
    Pin.LED_RED_VER,
    Pin.LED_AMBER_VER,
    Pin.LED_GREEN_VER,
)

# Blinking pair and the pins kept dark, for each modification mode.
_BLINK_PINS = {
    2: ((Pin.LED_RED, Pin.LED_RED_VER),
        (Pin.LED_AMBER, Pin.LED_GREEN, Pin.LED_AMBER_VER, Pin.LED_GREEN_VER)),
    3: ((Pin.LED_AMBER, Pin.LED_AMBER_VER),
        (Pin.LED_RED, Pin.LED_GREEN, Pin.LED_RED_VER, Pin.LED_GREEN_VER)),
    4: ((Pin.LED_GREEN, Pin.LED_GREEN_VER),
        (Pin.LED_RED, Pin.LED_AMBER, Pin.LED_RED_VER, Pin.LED_AMBER_VER)),
}

TRAFFIC_PERIOD_MS = 1000
SCAN_PERIOD_MS = 250
DEFAULT_TEMP_DURATION = 15


class Phase(Enum):
    """States of the normal-mode cycle."""

    INIT = 0
    RED_GREEN = 1
    GREEN_RED = 2


class TrafficController:
    """Two-way traffic light with a four-digit display and three buttons.

    Mode 1 runs the lights; modes 2, 3 and 4 edit the red, amber and green
    durations. Button 1 cycles the mode, button 2 increases the edited
    value and button 3 stores it.
    """

    def __init__(
        self, board: Board | None = None, buttons: ButtonReader | None = None
    ) -> None:
        self.board = board if board is not None else Board()
        self.buttons = buttons if buttons is not None else ButtonReader()
        self.display = SevenSegmentDisplay(self.board)
        self.led_timer = SoftwareTimer(TIMER_CYCLE)
        self.seg_timer = SoftwareTimer(TIMER_CYCLE)
        self.mode = 1
        self.countdown = 15
        self.red_duration = 0
        self.amber_duration = 1
        self.green_duration = 1
        self.temp_duration = 0
        self.phase = Phase.INIT
        self.index_led = 0
        self._blink_on = False
        self._last_pressed = [False] * NO_OF_BUTTONS

    @property
    def timer_flag(self) -> tuple[bool, bool, bool]:
        """Expiry flags of the traffic timer, the display timer and a spare."""
        return (self.led_timer.flag, self.seg_timer.flag, False)

    def turn_off_all_traffic_leds(self) -> None:
        """Switch every traffic LED off (they are active low)."""
        self.board.write(TRAFFIC_LEDS, PinLevel.SET)

    def set_blinking_led(self, mode: int) -> None:
        """Toggle the LED pair of the edited colour and darken the others."""
        self._blink_on = not self._blink_on
        pins = _BLINK_PINS.get(mode)
        if pins is None:
            self.turn_off_all_traffic_leds()
            return
        blinking, dark = pins
        self.board.write(blinking, PinLevel.RESET if self._blink_on else PinLevel.SET)
        self.board.write(dark, PinLevel.SET)

    def _pressed_now(self, index: int) -> bool:
        return self.buttons.is_pressed(index) and not self._last_pressed[index]

    def process_input(self, levels: Iterable[object]) -> None:
        """Sample the buttons and act on every new press."""
        self.buttons.read(levels)

        if self._pressed_now(0):
            self.mode = self.mode % 4 + 1
            if self.mode != 1:
                self.turn_off_all_traffic_leds()
                self.set_timer_7seg(SCAN_PERIOD_MS)
                self.temp_duration = {
                    2: self.red_duration,
                    3: self.amber_duration,
                    4: self.green_duration,
                }.get(self.mode, DEFAULT_TEMP_DURATION)
                self.display.set_buffer(self.temp_duration, self.mode)
            else:
                self.phase = Phase.INIT
                self.countdown = self.red_duration
                self.set_timer_led(TRAFFIC_PERIOD_MS)
                self.red_light_phase(self.countdown)
                self.display.set_buffer(self.countdown, self.mode)

        if self.mode >= 2 and self._pressed_now(1):
            self.temp_duration = 1 if self.temp_duration >= 99 else self.temp_duration + 1
            self.display.set_buffer(self.temp_duration, self.mode)

        if self.mode >= 2 and self._pressed_now(2):
            self.set_timer_7seg(min(self.temp_duration * 50, 1000))
            if self.mode == 2:
                self.red_duration = self.temp_duration
            elif self.mode == 3:
                self.amber_duration = self.temp_duration
            elif self.mode == 4:
                self.green_duration = self.temp_duration

        self._last_pressed = [self.buttons.is_pressed(i) for i in range(NO_OF_BUTTONS)]

    def red_light_phase(self, countdown: int) -> None:
        """Red for the horizontal road; vertical shows green, then amber near the end."""
        self.board.write(Pin.LED_RED, PinLevel.RESET)
        self.board.write((Pin.LED_AMBER, Pin.LED_GREEN, Pin.LED_RED_VER), PinLevel.SET)
        if 0 <= countdown <= self.amber_duration:
            self.board.write(Pin.LED_AMBER_VER, PinLevel.RESET)
            self.board.write(Pin.LED_GREEN_VER, PinLevel.SET)
        else:
            self.board.write(Pin.LED_AMBER_VER, PinLevel.SET)
            self.board.write(Pin.LED_GREEN_VER, PinLevel.RESET)
        self.display.set_buffer(countdown, self.mode)

    def green_light_phase(self, countdown: int) -> None:
        """Red for the vertical road; horizontal shows green, then amber near the end."""
        self.board.write((Pin.LED_RED, Pin.LED_AMBER_VER, Pin.LED_GREEN), PinLevel.SET)
        self.board.write(Pin.LED_RED_VER, PinLevel.RESET)
        if countdown <= self.amber_duration:
            self.board.write(Pin.LED_AMBER, PinLevel.RESET)
            self.board.write(Pin.LED_GREEN, PinLevel.SET)
        else:
            self.board.write(Pin.LED_AMBER, PinLevel.SET)
            self.board.write(Pin.LED_GREEN, PinLevel.RESET)
        self.display.set_buffer(countdown, self.mode)

    def _scan_display(self) -> None:
        self.display.update(self.index_led)
        self.index_led = (self.index_led + 1) % MAX_LED
        self.set_timer_7seg(SCAN_PERIOD_MS)

    def normal_run(self) -> None:
        """Advance the light cycle each second and scan the display."""
        if self.led_timer.flag:
            self.set_timer_led(TRAFFIC_PERIOD_MS)
            self.countdown -= 1
            self.display.set_buffer(self.countdown, self.mode)

            if self.phase is Phase.INIT:
                self.phase = Phase.RED_GREEN
                self.countdown = self.red_duration
                self.red_light_phase(self.countdown)
            elif self.phase is Phase.RED_GREEN:
                self.red_light_phase(self.countdown)
                if self.countdown <= 0:
                    self.phase = Phase.GREEN_RED
                    self.countdown = self.green_duration
                    self.green_light_phase(self.countdown)
            elif self.phase is Phase.GREEN_RED:
                self.green_light_phase(self.countdown)
                if self.countdown <= 0:
                    self.phase = Phase.RED_GREEN
                    self.countdown = self.red_duration
                    self.red_light_phase(self.countdown)
            else:
                self.turn_off_all_traffic_leds()

        if self.seg_timer.flag:
            self._scan_display()

    def modify_run(self) -> None:
        """Blink the edited colour and show the value being edited."""
        if self.seg_timer.flag:
            self.set_blinking_led(self.mode)
            self.display.set_buffer(self.temp_duration, self.mode)
            self._scan_display()

    def set_timer_led(self, duration: int) -> None:
        """Start the traffic timer for ``duration`` milliseconds."""
        self.led_timer.set(duration)

    def set_timer_7seg(self, duration: int) -> None:
        """Start the display timer for ``duration`` milliseconds."""
        self.seg_timer.set(duration)

    def timer_run(self) -> None:
        """One timer interrupt: advance both timers and toggle the heartbeat LED."""
        self.led_timer.tick()
        self.seg_timer.tick()
        self.board.toggle(Pin.LED_TIMER)

    def step(self, levels: Iterable[object]) -> None:
        """One pass of the main loop with the given button levels."""
        self.process_input(levels)
        if self.mode == 1:
            self.normal_run()
        if 2 <= self.mode <= 4 and self.seg_timer.flag:
            self.set_blinking_led(self.mode)
            self._scan_display()


def _lit(board: Board, red: Pin, amber: Pin, green: Pin) -> str:
    return "".join(
        letter if board.level(pin) is PinLevel.RESET else "-"
        for letter, pin in (("R", red), ("A", amber), ("G", green))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate the board with all buttons released and report once a second."""
    parser = argparse.ArgumentParser(
        prog="trafficlight", description="Simulate the traffic-light controller."
    )
    parser.add_argument(
        "--seconds", type=int, default=10, help="simulated seconds to run"
    )
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")

    core_clock = SystemClock().configure_hsi()
    msp = MspState()
    msp.msp_init()
    msp.tim_base_msp_init(Peripheral.TIM2)
    ticks_per_second = core_clock // ((TIM2_PRESCALER + 1) * (TIM2_PERIOD + 1))

    controller = TrafficController()
    interrupts = InterruptController()
    interrupts.on_period_elapsed(controller.timer_run)

    controller.set_timer_led(TRAFFIC_PERIOD_MS)
    controller.set_timer_7seg(SCAN_PERIOD_MS)
    released = [PinLevel.SET] * NO_OF_BUTTONS
    board = controller.board
    for second in range(1, args.seconds + 1):
        for _ in range(ticks_per_second):
            interrupts.dispatch(Vector.TIM2)
            controller.step(released)
        digits = "".join(str(d) for d in controller.display.buffer)
        horizontal = _lit(board, Pin.LED_RED, Pin.LED_AMBER, Pin.LED_GREEN)
        vertical = _lit(board, Pin.LED_RED_VER, Pin.LED_AMBER_VER, Pin.LED_GREEN_VER)
        print(
            f"{second:>4}s mode={controller.mode} display={digits} "
            f"horizontal={horizontal} vertical={vertical}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())