"""Hardware abstraction layer configuration for the board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HalModule(Enum):
    """Modules that can be compiled into the hardware abstraction layer."""

    HAL = "HAL"
    ADC = "ADC"
    CRYP = "CRYP"
    CAN = "CAN"
    CAN_LEGACY = "CAN_LEGACY"
    CEC = "CEC"
    CORTEX = "CORTEX"
    CRC = "CRC"
    DAC = "DAC"
    DMA = "DMA"
    ETH = "ETH"
    EXTI = "EXTI"
    FLASH = "FLASH"
    GPIO = "GPIO"
    I2C = "I2C"
    I2S = "I2S"
    IRDA = "IRDA"
    IWDG = "IWDG"
    NOR = "NOR"
    NAND = "NAND"
    PCCARD = "PCCARD"
    PCD = "PCD"
    HCD = "HCD"
    PWR = "PWR"
    RCC = "RCC"
    RTC = "RTC"
    SD = "SD"
    MMC = "MMC"
    SDRAM = "SDRAM"
    SMARTCARD = "SMARTCARD"
    SPI = "SPI"
    SRAM = "SRAM"
    TIM = "TIM"
    UART = "UART"
    USART = "USART"
    WWDG = "WWDG"


class ParamAssertionError(AssertionError):
    """A parameter check failed; carries the reporting file and line."""

    def __init__(self, file: str, line: int) -> None:
        super().__init__(f"Wrong parameters value: file {file} on line {line}")
        self.file = file
        self.line = line


@dataclass(frozen=True)
class OscillatorValues:
    """Oscillator frequencies in Hz and start-up timeouts in ms."""

    hse: int = 8_000_000
    hse_startup_timeout: int = 100
    hsi: int = 8_000_000
    lsi: int = 40_000
    lse: int = 32_768
    lse_startup_timeout: int = 5_000


_DEFAULT_MODULES = frozenset(
    {
        HalModule.HAL,
        HalModule.GPIO,
        HalModule.TIM,
        HalModule.CORTEX,
        HalModule.DMA,
        HalModule.FLASH,
        HalModule.EXTI,
        HalModule.PWR,
        HalModule.RCC,
    }
)


@dataclass(frozen=True)
class HalConfig:
    """Module selection and system settings of the abstraction layer."""

    modules: frozenset[HalModule] = _DEFAULT_MODULES
    oscillators: OscillatorValues = field(default_factory=OscillatorValues)
    vdd_mv: int = 3300
    tick_int_priority: int = 15
    use_rtos: bool = False
    prefetch_enable: bool = True
    use_full_assert: bool = False
    register_callbacks: bool = False
    mac_address: tuple[int, ...] = (2, 0, 0, 0, 0, 0)
    eth_rx_buffers: int = 8
    eth_tx_buffers: int = 4
    phy_address: int = 0x01
    phy_reset_delay: int = 0x000000FF
    phy_config_delay: int = 0x00000FFF
    use_spi_crc: bool = False

    def is_enabled(self, module: HalModule) -> bool:
        """Whether a module is selected."""
        return module in self.modules

    def assert_param(self, expr: object, file: str, line: int) -> bool:
        """Check a parameter when full assertions are on.

        Returns True when the check ran and held, False when checks are off.
        Raises ParamAssertionError when the check ran and failed.
        """
        if not self.use_full_assert:
            return False
        if not expr:
            raise ParamAssertionError(file, line)
        return True


def default_config() -> HalConfig:
    """The configuration the firmware is built with."""
    return HalConfig()