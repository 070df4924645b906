from geogrid.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6


def test_zero_pad():
    assert zero_pad(0, 5) == '00000'
    assert zero_pad(6021, 5) == '06021'
    assert zero_pad(66021.9, 5) == '66021'
    assert zero_pad(123456, 5) == '123456'
    assert zero_pad(7, 5) == '00007'
