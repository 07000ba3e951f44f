"""System clock frequency derived from the clock-control registers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .halconf import OscillatorValues

_OSCILLATORS = OscillatorValues()
HSE_VALUE = _OSCILLATORS.hse
HSI_VALUE = _OSCILLATORS.hsi

AHB_PRESC_TABLE = (0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 3, 4, 6, 7, 8, 9)
APB_PRESC_TABLE = (0, 0, 0, 0, 1, 2, 3, 4)

# Configuration register (CFGR) fields.
CFGR_SWS = 0x0000000C
CFGR_HPRE = 0x000000F0
CFGR_PLLSRC = 0x00010000
CFGR_PLLXTPRE = 0x00020000
CFGR_PLLMULL = 0x003C0000

SWS_HSI = 0x00
SWS_HSE = 0x04
SWS_PLL = 0x08

# Second configuration register (CFGR2) fields, connectivity and value lines.
CFGR2_PREDIV1 = 0x0000000F
CFGR2_PREDIV2 = 0x000000F0
CFGR2_PLL2MUL = 0x00000F00
CFGR2_PREDIV1SRC = 0x00010000

FLASH_BASE = 0x08000000
SRAM_BASE = 0x20000000
VECTOR_TABLE_ALIGNMENT = 0x200

# Timer 2 runs from the 8 MHz clock divided by 8000, reloading every 10 counts.
TIM2_PRESCALER = 7999
TIM2_PERIOD = 9


class DeviceLine(Enum):
    """Families of the microcontroller whose PLL wiring differs."""

    STANDARD = "standard"
    VALUE_LINE = "value"
    CONNECTIVITY_LINE = "connectivity"


@dataclass(frozen=True)
class ClockRegisters:
    """Snapshot of the clock configuration registers."""

    cfgr: int = 0
    cfgr2: int = 0


def _pll_clock(registers: ClockRegisters, line: DeviceLine) -> int:
    cfgr, cfgr2 = registers.cfgr, registers.cfgr2
    mull_field = (cfgr & CFGR_PLLMULL) >> 18
    from_hse = bool(cfgr & CFGR_PLLSRC)

    if line is not DeviceLine.CONNECTIVITY_LINE:
        pllmull = mull_field + 2
        if not from_hse:
            return (HSI_VALUE >> 1) * pllmull
        if line is DeviceLine.VALUE_LINE:
            prediv1 = (cfgr2 & CFGR2_PREDIV1) + 1
            return (HSE_VALUE // prediv1) * pllmull
        if cfgr & CFGR_PLLXTPRE:
            return (HSE_VALUE >> 1) * pllmull
        return HSE_VALUE * pllmull

    # A field of 0x0D selects a factor of 6.5, truncated to whole units.
    pllmull = mull_field + 2 if mull_field != 0x0D else 13 // 2
    if not from_hse:
        return (HSI_VALUE >> 1) * pllmull
    prediv1 = (cfgr2 & CFGR2_PREDIV1) + 1
    if not cfgr2 & CFGR2_PREDIV1SRC:
        return (HSE_VALUE // prediv1) * pllmull
    prediv2 = ((cfgr2 & CFGR2_PREDIV2) >> 4) + 1
    pll2mull = ((cfgr2 & CFGR2_PLL2MUL) >> 8) + 2
    return (((HSE_VALUE // prediv2) * pll2mull) // prediv1) * pllmull


def system_core_clock(
    registers: ClockRegisters, line: DeviceLine = DeviceLine.STANDARD
) -> int:
    """Core clock (HCLK) in Hz for the given register contents."""
    source = registers.cfgr & CFGR_SWS
    if source == SWS_HSE:
        sysclk = HSE_VALUE
    elif source == SWS_PLL:
        sysclk = _pll_clock(registers, line)
    else:
        sysclk = HSI_VALUE
    shift = AHB_PRESC_TABLE[(registers.cfgr & CFGR_HPRE) >> 4]
    return sysclk >> shift


def vector_table_address(in_sram: bool = False, offset: int = 0) -> int:
    """Address of a relocated vector table in SRAM or flash."""
    if offset < 0 or offset % VECTOR_TABLE_ALIGNMENT:
        raise ValueError(
            f"vector table offset {offset:#x} must be a non-negative "
            f"multiple of {VECTOR_TABLE_ALIGNMENT:#x}"
        )
    return (SRAM_BASE if in_sram else FLASH_BASE) | offset


@dataclass
class SystemClock:
    """The core clock frequency together with the registers it came from."""

    line: DeviceLine = DeviceLine.STANDARD
    core_clock: int = HSI_VALUE
    registers: ClockRegisters = field(default_factory=ClockRegisters)
    flash_latency: int = 0
    apb1_divider: int = 1
    apb2_divider: int = 1

    def update(self, registers: ClockRegisters) -> int:
        """Recompute the core clock from new register contents and return it."""
        self.registers = registers
        self.core_clock = system_core_clock(registers, self.line)
        return self.core_clock

    def configure_hsi(self) -> int:
        """Run from the internal oscillator, PLL off, all buses undivided."""
        self.flash_latency = 0
        self.apb1_divider = 1
        self.apb2_divider = 1
        return self.update(ClockRegisters(cfgr=SWS_HSI))