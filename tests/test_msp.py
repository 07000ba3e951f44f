from trafficlight.msp import MspState, Peripheral


def test_msp_init_enables_afio_and_power():
    state = MspState()
    state.msp_init()
    assert state.clocks_enabled == {Peripheral.AFIO, Peripheral.PWR}
    assert state.debug_port_disabled is True


def test_tim2_init_enables_clock_and_interrupt():
    state = MspState()
    assert state.tim_base_msp_init(Peripheral.TIM2) is True
    assert Peripheral.TIM2 in state.clocks_enabled
    assert Peripheral.TIM2 in state.irqs_enabled
    assert state.irq_priorities[Peripheral.TIM2] == (0, 0)


def test_other_timer_init_does_nothing():
    state = MspState()
    assert state.tim_base_msp_init(Peripheral.TIM3) is False
    assert state.clocks_enabled == set()
    assert state.irqs_enabled == set()


def test_tim2_deinit_reverses_init():
    state = MspState()
    state.msp_init()
    state.tim_base_msp_init(Peripheral.TIM2)
    assert state.tim_base_msp_deinit(Peripheral.TIM2) is True
    assert Peripheral.TIM2 not in state.clocks_enabled
    assert Peripheral.TIM2 not in state.irqs_enabled
    assert state.clocks_enabled == {Peripheral.AFIO, Peripheral.PWR}


def test_deinit_without_init_is_harmless():
    state = MspState()
    assert state.tim_base_msp_deinit(Peripheral.TIM2) is True
    assert state.clocks_enabled == set()


def test_other_timer_deinit_leaves_tim2():
    state = MspState()
    state.tim_base_msp_init(Peripheral.TIM2)
    assert state.tim_base_msp_deinit(Peripheral.TIM4) is False
    assert Peripheral.TIM2 in state.irqs_enabled