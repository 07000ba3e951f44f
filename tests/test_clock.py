import pytest

from trafficlight.clock import (
    CFGR2_PREDIV1SRC,
    CFGR_PLLSRC,
    CFGR_PLLXTPRE,
    FLASH_BASE,
    HSE_VALUE,
    HSI_VALUE,
    SRAM_BASE,
    SWS_HSE,
    SWS_HSI,
    SWS_PLL,
    ClockRegisters,
    DeviceLine,
    SystemClock,
    system_core_clock,
    vector_table_address,
)


def _mull(field):
    return field << 18


def test_reset_registers_run_from_hsi():
    assert system_core_clock(ClockRegisters()) == 8_000_000


def test_hse_source():
    assert system_core_clock(ClockRegisters(cfgr=SWS_HSE)) == HSE_VALUE


def test_undefined_source_falls_back_to_hsi():
    assert system_core_clock(ClockRegisters(cfgr=0x0C)) == HSI_VALUE


def test_pll_from_hsi_halves_input():
    regs = ClockRegisters(cfgr=SWS_PLL | _mull(0))
    assert system_core_clock(regs) == HSI_VALUE


def test_pll_multiplier_scales_linearly():
    base = system_core_clock(ClockRegisters(cfgr=SWS_PLL | _mull(0)))
    doubled = system_core_clock(ClockRegisters(cfgr=SWS_PLL | _mull(2)))
    assert doubled == 2 * base


def test_hse_xtpre_halves_pll_input():
    plain = system_core_clock(ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | _mull(1)))
    halved = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | CFGR_PLLXTPRE | _mull(1))
    )
    assert plain == 2 * halved


def test_value_line_prediv_matches_xtpre():
    value = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | _mull(3), cfgr2=1),
        DeviceLine.VALUE_LINE,
    )
    standard = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | CFGR_PLLXTPRE | _mull(3))
    )
    assert value == standard


def test_connectivity_six_and_a_half_truncates_to_six():
    odd = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | _mull(0x0D)), DeviceLine.CONNECTIVITY_LINE
    )
    six = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | _mull(4)), DeviceLine.CONNECTIVITY_LINE
    )
    assert odd == six


def test_connectivity_pll2_path_doubles_input():
    direct = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | _mull(2)),
        DeviceLine.CONNECTIVITY_LINE,
    )
    via_pll2 = system_core_clock(
        ClockRegisters(cfgr=SWS_PLL | CFGR_PLLSRC | _mull(2), cfgr2=CFGR2_PREDIV1SRC),
        DeviceLine.CONNECTIVITY_LINE,
    )
    assert via_pll2 == 2 * direct


@pytest.mark.parametrize("hpre,shift", [(0x8, 1), (0x9, 2), (0xB, 4), (0xF, 9)])
def test_ahb_prescaler_divides(hpre, shift):
    regs = ClockRegisters(cfgr=SWS_HSE | (hpre << 4))
    assert system_core_clock(regs) == HSE_VALUE >> shift


def test_ahb_prescaler_low_codes_do_not_divide():
    regs = ClockRegisters(cfgr=SWS_HSE | (0x7 << 4))
    assert system_core_clock(regs) == HSE_VALUE


def test_vector_table_defaults_to_flash():
    assert vector_table_address() == FLASH_BASE
    assert vector_table_address(in_sram=True) == SRAM_BASE


def test_vector_table_offset_added():
    assert vector_table_address(True, 0x400) - SRAM_BASE == 0x400


@pytest.mark.parametrize("offset", [0x100, 1, -0x200])
def test_vector_table_bad_offset(offset):
    with pytest.raises(ValueError):
        vector_table_address(False, offset)


def test_configure_hsi():
    clock = SystemClock(core_clock=0)
    result = clock.configure_hsi()
    assert result == HSI_VALUE
    assert clock.core_clock == HSI_VALUE
    assert clock.registers.cfgr & 0x0C == SWS_HSI
    assert clock.flash_latency == 0
    assert (clock.apb1_divider, clock.apb2_divider) == (1, 1)


def test_update_stores_and_recomputes():
    clock = SystemClock()
    regs = ClockRegisters(cfgr=SWS_PLL | _mull(4))
    assert clock.update(regs) == system_core_clock(regs)
    assert clock.registers == regs
    assert clock.core_clock == system_core_clock(regs)


def test_update_uses_device_line():
    regs = ClockRegisters(cfgr=SWS_PLL | _mull(0x0D))
    standard = SystemClock().update(regs)
    connectivity = SystemClock(line=DeviceLine.CONNECTIVITY_LINE).update(regs)
    assert standard > connectivity