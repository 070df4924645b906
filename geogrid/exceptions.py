"""Exceptions raised by geogrid"""

__all__ = ['MalformedCoordinateError']

from typing import Optional


class MalformedCoordinateError(ValueError):
    """
    Raised when a grid reference string cannot be parsed.

    Args:
        mgrs:
            The offending input, exactly as it was received

        reason:
            A human-readable description of what is wrong with it

        position: (Default None)
            The character index (in the normalized string) where parsing failed,
            if known
    """

    def __init__(self, mgrs: Optional[str], reason: str, position: Optional[int] = None):
        self.mgrs = mgrs
        self.reason = reason
        self.position = position

        msg = f'Malformed MGRS string {mgrs!r}: {reason}'
        if position is not None:
            msg += f' (at position {position})'

        super().__init__(msg)
