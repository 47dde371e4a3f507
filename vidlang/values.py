"""Runtime values.

A script manipulates exactly three kinds of value: plain numbers (frame
indices and scale factors), text (file names) and time positions. Values are
only ever produced by evaluating a fully resolved expression, so they carry
no source positions of their own.

Time positions are stored as whole minutes and seconds and are kept
normalized so that ``0 <= seconds < 60``. Equality compares total seconds.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re

from dataclasses import dataclass
from enum import Enum
from typing import Union


TIME_PATTERN = re.compile(r'[0-9]+:[0-9]+')


class TimePosition:
    """
    A normalized ``minutes:seconds`` offset into a media file.

    Instances are immutable; arithmetic returns new positions.
    """
    __slots__ = ("minutes", "seconds")

    def __init__(self, minutes: int = 0, seconds: int = 0):
        """
        Initialize and normalize a time position.

        Parameters:
            minutes (int): Whole minutes.
            seconds (int): Whole seconds, carried into minutes when >= 60.

        Raises:
            ValueError: If either component is negative after normalization.
        """
        minutes, seconds = self.normalize(minutes, seconds)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)

    def __setattr__(self, name, value):
        raise AttributeError(f"TimePosition is immutable: cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"TimePosition is immutable: cannot delete {name!r}")

    @classmethod
    def parse(cls, text: str) -> 'TimePosition':
        """
        Build a time position from an ``MM:SS`` literal.

        Raises:
            ValueError: If the text is not two digit runs separated by a colon,
                or a component has too many digits to convert.
        """
        if not TIME_PATTERN.fullmatch(text):
            raise ValueError(f"Invalid time format: {text}")
        minutes, seconds = text.split(':')
        try:
            return cls(int(minutes), int(seconds))
        except ValueError:
            raise ValueError(
                f"Time component too large: {len(minutes)}:{len(seconds)} digits"
            ) from None

    @classmethod
    def from_seconds(cls, total: int) -> 'TimePosition':
        """
        Build a time position from a total number of seconds.
        """
        if total < 0:
            raise ValueError("Time cannot be negative")
        minutes, seconds = divmod(total, 60)
        return cls(minutes, seconds)

    @staticmethod
    def normalize(minutes: int, seconds: int) -> tuple[int, int]:
        """
        Carry whole minutes out of the seconds field.

        Returns:
            tuple[int, int]: the normalized ``(minutes, seconds)`` pair.

        Raises:
            ValueError: If the position is negative.
        """
        if seconds >= 60:
            minutes += seconds // 60
            seconds %= 60
        if minutes < 0 or seconds < 0:
            raise ValueError("Time cannot be negative")
        return minutes, seconds

    def total_seconds(self) -> int:
        """
        Return the position expressed in seconds.
        """
        return self.minutes * 60 + self.seconds

    def __add__(self, other: 'TimePosition') -> 'TimePosition':
        if not isinstance(other, TimePosition):
            return NotImplemented
        return TimePosition.from_seconds(self.total_seconds() + other.total_seconds())

    def __mul__(self, factor: int) -> 'TimePosition':
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return TimePosition.from_seconds(self.total_seconds() * factor)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePosition):
            return NotImplemented
        return self.total_seconds() == other.total_seconds()

    def __hash__(self) -> int:
        return hash(self.total_seconds())

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"

    def __repr__(self) -> str:
        return f"TimePosition({self.minutes}, {self.seconds})"


class ValueType(str, Enum):
    """
    Enumeration of runtime value types.
    """
    NUMBER = "number"
    TEXT = "text"
    TIME = "time"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Value:
    """Tagged runtime value."""
    type: ValueType
    data: Union[int, str, TimePosition]

    @classmethod
    def number(cls, n: int) -> 'Value':
        return cls(ValueType.NUMBER, n)

    @classmethod
    def text(cls, s: str) -> 'Value':
        return cls(ValueType.TEXT, s)

    @classmethod
    def time(cls, t: TimePosition) -> 'Value':
        return cls(ValueType.TIME, t)

    def __str__(self) -> str:
        if self.type == ValueType.TEXT:
            return f'"{self.data}"'
        return str(self.data)


__all__ = ["TimePosition", "Value", "ValueType"]
