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

"""Count-gated callback latches.

An :class:`EventLatch` lets several independent code paths report progress
and runs its listeners on the call that moves the count into a configured
range. All operations are synchronous and meant for one logical flow of
control (GUI callbacks, an event loop, cooperative tasks). Nothing blocks and
nothing is locked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, override

from .callbacks import CallbackSlot
from .dbc import ensure
from .logging import StructuredLogger, get_logger
from .ranges import ValueRange

if TYPE_CHECKING:
    from .ranges import RangeLike

logger: StructuredLogger = get_logger(__name__, context={"component": "event_latch"})


def _rearmed(latch: BaseEventLatch, *_: object, **__: object) -> tuple[bool, str]:
    return (
        latch.current_count == latch.starting_count,
        f"current_count={latch.current_count} starting_count={latch.starting_count}",
    )


class BaseEventLatch:
    """Count and range state shared by every latch.

    ``current_count`` and ``starting_count`` are plain mutable attributes with
    no floor or ceiling. ``condition_range`` accepts a :class:`ValueRange` or a
    ``(min, max)`` pair and is stored as a :class:`ValueRange`.
    """

    current_count: int
    starting_count: int

    def __init__(
        self,
        starting_count: int,
        condition_range: RangeLike = ValueRange(0, 0),
    ) -> None:
        super().__init__()
        self.condition_range = condition_range
        self.reset(starting_count)

    @property
    def condition_range(self) -> ValueRange:
        """Inclusive range of counts that satisfies the condition."""
        return self._condition_range

    @condition_range.setter
    def condition_range(self, value: RangeLike) -> None:
        self._condition_range = ValueRange.coerce(value)

    @ensure(_rearmed)
    def reset(self, new_starting_count: int | None = None) -> None:
        """Rearm the latch.

        Without an argument ``current_count`` goes back to ``starting_count``.
        With one, ``starting_count`` is replaced first. Listeners are never
        invoked, even if the rearmed count lies inside the condition range.
        """
        if new_starting_count is not None:
            self.starting_count = new_starting_count
        self.current_count = self.starting_count
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "event_latch.reset",
                event="event_latch.reset",
                context={"starting_count": self.starting_count},
            )

    @property
    def is_condition_met(self) -> bool:
        """Whether ``current_count`` currently lies in ``condition_range``."""
        return self._condition_range.contains(self.current_count)


class EventLatch[**P](BaseEventLatch):
    """Latch that runs listeners when its count enters the condition range.

    The type parameter describes the arguments handed to listeners, so one
    class covers every arity::

        latch = EventLatch[[str, int]](3)
        latch.on_condition_met += lambda name, size: print(name, size)

        latch.signal("a.txt", 10)   # count 2, nothing happens
        latch.signal("b.txt", 20)   # count 1, nothing happens
        latch.signal("c.txt", 30)   # count 0, prints "c.txt 30"

    Arguments are forwarded only from the call that satisfies the condition;
    they are never stored. A latch does not rearm itself; register
    ``lambda *_: latch.reset()`` as a listener to get that behavior.

    Listener dispatch is deliberately unguarded. A listener may call
    ``signal`` or ``reset`` on the same latch and the nested call behaves as an
    ordinary call. A listener that raises stops the remaining listeners and
    the exception reaches the caller of ``signal``/``try_condition``.
    """

    _on_condition_met: CallbackSlot[P]

    def __init__(
        self,
        starting_count: int,
        condition_range: RangeLike = ValueRange(0, 0),
    ) -> None:
        self.on_condition_met = CallbackSlot()
        super().__init__(starting_count, condition_range)

    @property
    def on_condition_met(self) -> CallbackSlot[P]:
        """Listeners run when the condition is met."""
        return self._on_condition_met

    @on_condition_met.setter
    def on_condition_met(self, value: CallbackSlot[P] | Callable[P, object]) -> None:
        # A bare callable replaces every listener with that single one.
        if isinstance(value, CallbackSlot):
            self._on_condition_met = value
            return
        if not callable(value):
            msg = f"on_condition_met expects a CallbackSlot or a callable, got {value!r}"
            raise TypeError(msg)
        slot: CallbackSlot[P] = CallbackSlot()
        slot.register(value)
        self._on_condition_met = slot

    def signal(self, *args: P.args, **kwargs: P.kwargs) -> bool:
        """Decrement the count by one, then :meth:`try_condition`.

        Returns:
            ``True`` if the condition was met and listeners ran.
        """
        self.current_count -= 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "event_latch.signal",
                event="event_latch.signal",
                context={"current_count": self.current_count},
            )
        return self.try_condition(*args, **kwargs)

    def try_condition(self, *args: P.args, **kwargs: P.kwargs) -> bool:
        """Run listeners if ``current_count`` is inside ``condition_range``.

        The count itself is left untouched.

        Returns:
            ``True`` if the condition was met and listeners ran.
        """
        if not self.is_condition_met:
            return False
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "event_latch.condition_met",
                event="event_latch.condition_met",
                context={
                    "current_count": self.current_count,
                    "listeners": self.on_condition_met.count,
                },
            )
        self.on_condition_met(*args, **kwargs)
        return True

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(starting_count={self.starting_count}, "
            f"current_count={self.current_count}, "
            f"condition_range=({self.condition_range.min}, "
            f"{self.condition_range.max}), "
            f"listeners={self.on_condition_met.count})"
        )


__all__ = [
    "BaseEventLatch",
    "EventLatch",
]
