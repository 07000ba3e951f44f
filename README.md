# trafficlight

A software model of a two-way traffic light controller. The controller has three
push buttons and a four-digit seven-segment display, and it runs on a 10 ms timer
tick. The pins, timers, button debouncing, display multiplexing, clock setup and
interrupt routing are all simulated in plain Python. You can drive the controller
one step at a time and inspect its state at any point.

## Behaviour

- **Normal mode (mode 1):** a red phase and a green phase alternate, and the
  countdown drops by one each second. During the red phase the horizontal red
  light is on. The vertical road shows green, then amber once the countdown is
  at or below the amber duration. The green phase mirrors this. The display
  shows the countdown followed by `01`.
- **Edit modes (2, 3, 4):** the red, amber or green light pair blinks. The
  display shows the duration being edited, followed by `0` and the mode
  number. Values below 10 get a leading zero.
  - Button 1 cycles the mode: 1 → 2 → 3 → 4 → 1. Going back to mode 1
    restarts the cycle with the red duration.
  - Button 2 increases the value being edited. After 99 it wraps to 1.
  - Button 3 stores the value as the red, amber or green duration.

The buttons are active low: a pressed button reads `PinLevel.RESET`. The
debouncer accepts a level only when two consecutive samples agree. A button
held past 100 samples sets its long-press flag (`ButtonReader.is_pressed_1s`).

The defaults at start-up are:

| Setting         | Default |
|-----------------|---------|
| mode            | 1       |
| countdown       | 15      |
| red duration    | 0       |
| amber duration  | 1       |
| green duration  | 1       |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Command

```
trafficlight [--seconds N]
```

This command simulates the board for `N` seconds (10 by default) with every
button released. The timer runs at 100 ticks per simulated second, taken from
the 8 MHz internal clock and timer 2's prescaler and period. After each
simulated second the command prints one line with:

- the mode,
- the four display digits,
- the lit lights of each road, for example `R--` or `-A-`.

A negative `--seconds` value is rejected.

The debouncer starts with every button at the pressed level. Because of this,
the first pass of the loop registers a press of each button, and the simulated
run begins in edit mode 2.

## Library use

`trafficlight.controller.TrafficController` is the whole controller:

- `step(levels)` runs one pass of the main loop. `levels` holds the three
  button levels.
- `timer_run()` is one timer interrupt. It advances the traffic and display
  timers by one tick and toggles the heartbeat LED.
- `process_input(levels)`, `normal_run()` and `modify_run()` are the parts of
  a step. Each can also be called on its own.
- `red_light_phase(countdown)`, `green_light_phase(countdown)`,
  `set_blinking_led(mode)` and `turn_off_all_traffic_leds()` set the lights.
- `set_timer_led(duration)` and `set_timer_7seg(duration)` restart the two
  timers. The duration is given in milliseconds.
- The attributes `mode`, `countdown`, `phase` (a `Phase`), `red_duration`,
  `amber_duration`, `green_duration`, `temp_duration`, `board` and `display`
  expose the controller's state.

```python
from trafficlight.controller import TrafficController
from trafficlight.gpio import Pin, PinLevel

controller = TrafficController()
released = [PinLevel.SET] * 3
controller.step(released)
controller.timer_run()
print(controller.mode, controller.display.buffer, controller.board.level(Pin.LED_RED))
```

The other modules:

| Module       | Contents |
|--------------|----------|
| `gpio`       | `Board` (`write`, `read`, `toggle`, `level`, `set_input`), `Port`, `Pin`, `PinLevel` |
| `buttons`    | `ButtonReader` (`read`, `is_pressed`, `is_pressed_1s`) |
| `display`    | `segment_pattern`, `clock_buffer`, `SevenSegmentDisplay` (`show_digit`, `update`, `set_buffer`) |
| `timers`     | `SoftwareTimer` (`set`, `tick`) and `TimerBank` with timers numbered 1 to 5 (`set`, `flag`, `run`) |
| `clock`      | `system_core_clock`, `vector_table_address`, `ClockRegisters`, `DeviceLine`, `SystemClock` (`update`, `configure_hsi`) |
| `halconf`    | `HalConfig` (`is_enabled`, `assert_param`), `HalModule`, `OscillatorValues`, `default_config()` |
| `interrupts` | `InterruptController` (`dispatch`, `on_period_elapsed`), `Vector`, `FaultError` |
| `msp`        | `MspState` (`msp_init`, `tim_base_msp_init`, `tim_base_msp_deinit`), `Peripheral` |
| `sysmem`     | `Heap.sbrk`, which raises `HeapExhausted` when the heap would grow into the stack |
| `syscalls`   | `SystemCalls`: process and file calls for a board with no file system. Most of them raise `OSError`. |

Each module covers a specific part of the board:

- **`interrupts`:** fault vectors raise `FaultError`, SysTick counts ticks, and
  TIM2 calls the registered period-elapsed callback.
- **`clock`:** computes the core clock from CFGR/CFGR2 register values. This
  covers the standard, value-line and connectivity-line devices.

## What this package does not do

- It does not talk to real hardware. Every pin is a value held in memory on a
  `Board`.
- It has no graphical view. The command prints text lines only.
- The command cannot press buttons. To exercise the edit modes, call
  `TrafficController.step` with your own button levels.

## Tests

```
pytest
```