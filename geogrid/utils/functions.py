"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'zero_pad']

from typing import Union


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def zero_pad(num: Union[float, int], length: int) -> str:
    """Stringifies a whole number and pads zeros to the prefix"""
    _ = str(int(num))
    return '0' * (length - len(_)) + _
