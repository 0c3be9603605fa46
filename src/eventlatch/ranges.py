# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Inclusive integer ranges used as latch conditions."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, cast

from .dbc import pure
from .errors import InvalidRangeError

MIN_COUNT: Final[int] = -sys.maxsize - 1
"""Lowest bound used by :meth:`ValueRange.at_most`."""

MAX_COUNT: Final[int] = sys.maxsize
"""Highest bound used by :meth:`ValueRange.at_least`."""

type RangeLike = ValueRange | Sequence[int]


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive ``[min, max]`` range of integers.

    Bounds are not checked against each other. A range whose ``min`` exceeds
    its ``max`` is legal and simply contains nothing.

    Example::

        ValueRange(0, 0).contains(0)     # True
        -3 in ValueRange.at_most(0)      # True
        ValueRange(2, 1).is_empty        # True
    """

    min: int
    max: int

    @pure
    def contains(self, value: int) -> bool:
        """Return ``True`` when ``min <= value <= max``."""
        return self.min <= value <= self.max

    def __contains__(self, value: object) -> bool:
        return _is_bound(value) and self.contains(cast(int, value))

    @property
    def is_empty(self) -> bool:
        """``True`` for inverted ranges that can never match."""
        return self.min > self.max

    @classmethod
    def exactly(cls, value: int) -> ValueRange:
        return cls(value, value)

    @classmethod
    def at_most(cls, value: int) -> ValueRange:
        return cls(MIN_COUNT, value)

    @classmethod
    def at_least(cls, value: int) -> ValueRange:
        return cls(value, MAX_COUNT)

    @classmethod
    def coerce(cls, value: object) -> ValueRange:
        """Return ``value`` as a :class:`ValueRange`.

        Accepts an existing range or a two-item ``(min, max)`` sequence of
        integers.

        Raises:
            InvalidRangeError: ``value`` has any other shape.
        """
        if isinstance(value, ValueRange):
            return value
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            items = cast(Sequence[object], value)
            if len(items) == 2 and all(_is_bound(item) for item in items):
                return cls(cast(int, items[0]), cast(int, items[1]))
        msg = f"Expected a ValueRange or an (min, max) pair of ints, got {value!r}"
        raise InvalidRangeError(msg)


def _is_bound(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = [
    "MAX_COUNT",
    "MIN_COUNT",
    "RangeLike",
    "ValueRange",
]
