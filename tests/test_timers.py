import pytest

from trafficlight.timers import TIMER_COUNT, SoftwareTimer, TimerBank


def _ticks_until_flag(timer, limit=10_000):
    for ticks in range(1, limit + 1):
        if timer.tick():
            return ticks
    raise AssertionError("timer never expired")


def test_one_second_takes_one_hundred_ticks():
    timer = SoftwareTimer()
    timer.set(1000)
    assert _ticks_until_flag(timer) == 100


@pytest.mark.parametrize("duration", [10, 250, 990, 5000])
def test_ticks_match_whole_cycles(duration):
    timer = SoftwareTimer()
    timer.set(duration)
    assert timer.counter == duration // timer.cycle
    assert _ticks_until_flag(timer) == duration // timer.cycle


def test_partial_cycle_is_dropped():
    exact = SoftwareTimer()
    exact.set(250)
    rounded = SoftwareTimer()
    rounded.set(259)
    assert rounded.counter == exact.counter


def test_flag_stays_set_until_timer_is_restarted():
    timer = SoftwareTimer()
    timer.set(20)
    _ticks_until_flag(timer)
    assert timer.tick() is True
    timer.set(20)
    assert timer.flag is False


def test_duration_below_one_cycle_never_fires():
    timer = SoftwareTimer()
    timer.set(5)
    assert timer.counter == 0
    for _ in range(50):
        timer.tick()
    assert timer.flag is False


def test_negative_duration_never_fires():
    timer = SoftwareTimer()
    timer.set(-15)
    for _ in range(50):
        timer.tick()
    assert timer.flag is False
    assert timer.counter <= 0


def test_zero_cycle_rejected():
    with pytest.raises(ValueError):
        SoftwareTimer(cycle=0)


def test_bank_timers_are_independent():
    bank = TimerBank()
    bank.set(1, 20)
    bank.set(3, 40)
    bank.run()
    bank.run()
    assert bank.flag(1) is True
    assert bank.flag(3) is False
    bank.run()
    bank.run()
    assert bank.flag(3) is True
    assert bank.flag(2) is False


def test_bank_has_five_timers_numbered_from_one():
    bank = TimerBank()
    assert len(bank.timers) == TIMER_COUNT
    bank.set(TIMER_COUNT, 10)
    bank.run()
    assert bank.flag(TIMER_COUNT) is True


@pytest.mark.parametrize("index", [0, TIMER_COUNT + 1, -1])
def test_bank_rejects_unknown_timer(index):
    bank = TimerBank()
    with pytest.raises(IndexError):
        bank.set(index, 100)
    with pytest.raises(IndexError):
        bank.flag(index)