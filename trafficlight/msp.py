"""Low-level peripheral setup: clocks and interrupt lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Peripheral(Enum):
    """Peripherals whose clocks and interrupts can be switched."""

    AFIO = "AFIO"
    PWR = "PWR"
    TIM2 = "TIM2"
    TIM3 = "TIM3"
    TIM4 = "TIM4"


@dataclass
class MspState:
    """Which peripheral clocks and interrupts are on, and debug port state."""

    clocks_enabled: set[Peripheral] = field(default_factory=set)
    irqs_enabled: set[Peripheral] = field(default_factory=set)
    irq_priorities: dict[Peripheral, tuple[int, int]] = field(default_factory=dict)
    debug_port_disabled: bool = False

    def msp_init(self) -> None:
        """Global setup: alternate-function and power clocks on, JTAG and SWD off."""
        self.clocks_enabled.update({Peripheral.AFIO, Peripheral.PWR})
        self.debug_port_disabled = True

    def tim_base_msp_init(self, instance: Peripheral) -> bool:
        """Enable timer 2's clock and interrupt; other timers are left alone.

        Returns whether anything was configured.
        """
        if instance is not Peripheral.TIM2:
            return False
        self.clocks_enabled.add(instance)
        self.irq_priorities[instance] = (0, 0)
        self.irqs_enabled.add(instance)
        return True

    def tim_base_msp_deinit(self, instance: Peripheral) -> bool:
        """Disable timer 2's clock and interrupt; other timers are left alone.

        Returns whether anything was changed.
        """
        if instance is not Peripheral.TIM2:
            return False
        self.clocks_enabled.discard(instance)
        self.irqs_enabled.discard(instance)
        return True