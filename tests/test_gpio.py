import pytest

from trafficlight.gpio import Board, Pin, PinLevel, Port


def test_outputs_start_low_and_buttons_high():
    board = Board()
    for pin in Pin:
        expected = PinLevel.SET if pin.is_input else PinLevel.RESET
        assert board.level(pin) is expected


def test_pin_assignment_matches_board():
    board = Board()
    board.write(Pin.LED_RED, PinLevel.SET)
    assert board.level(Pin.LED_RED) is PinLevel.SET
    assert Pin.LED_RED.port is Port.A
    assert Pin.LED_RED.mask == 0x0002
    assert board.toggle(Pin.SEG_G) is PinLevel.SET
    assert Pin.SEG_G.port is Port.B
    assert Pin.SEG_G.number == 12
    assert board.level(Pin.ENC) is PinLevel.RESET
    assert Pin.ENC.port is Port.C


def test_pin_masks_are_single_bits():
    board = Board()
    for pin in Pin:
        assert pin.mask & (pin.mask - 1) == 0
        assert pin.mask == 1 << pin.number
        if not pin.is_input:
            board.write(pin, PinLevel.SET)
            assert board.level(pin) is PinLevel.SET


def test_write_several_pins():
    board = Board()
    board.write([Pin.LED_RED, Pin.LED_GREEN_VER], PinLevel.SET)
    assert board.level(Pin.LED_RED) is PinLevel.SET
    assert board.level(Pin.LED_GREEN_VER) is PinLevel.SET
    assert board.level(Pin.LED_AMBER) is PinLevel.RESET


def test_write_coerces_truthiness():
    board = Board()
    board.write(Pin.SEG_A, not (0b1111110 & 0x01))
    assert board.level(Pin.SEG_A) is PinLevel.SET
    board.write(Pin.SEG_A, 0)
    assert board.level(Pin.SEG_A) is PinLevel.RESET


def test_toggle_twice_restores_level():
    board = Board()
    assert board.toggle(Pin.LED_TIMER) is PinLevel.SET
    assert board.toggle(Pin.LED_TIMER) is PinLevel.RESET
    assert board.level(Pin.LED_TIMER) is PinLevel.RESET


def test_set_input_then_read():
    board = Board()
    board.set_input(Pin.BUTTON2, PinLevel.RESET)
    assert board.read(Pin.BUTTON2) is PinLevel.RESET
    assert board.read(Pin.BUTTON1) is PinLevel.SET


def test_write_to_input_is_rejected():
    board = Board()
    with pytest.raises(ValueError):
        board.write([Pin.LED_RED, Pin.BUTTON1], PinLevel.RESET)
    assert board.level(Pin.BUTTON1) is PinLevel.SET


def test_set_input_on_output_is_rejected():
    board = Board()
    with pytest.raises(ValueError):
        board.set_input(Pin.LED_RED, PinLevel.SET)


def test_toggle_input_is_rejected():
    with pytest.raises(ValueError):
        Board().toggle(Pin.BUTTON3)