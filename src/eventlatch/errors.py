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

"""Base exception hierarchy for :mod:`eventlatch`."""

from __future__ import annotations


class EventLatchError(Exception):
    """Base class for all eventlatch exceptions.

    The latch itself never raises: counts, ranges and re-entrant signaling are
    all accepted as given. The errors below only surface at the edges, when a
    value cannot be interpreted at all.

    Example:
        Catch any eventlatch-specific error::

            try:
                latch.condition_range = settings["range"]
            except EventLatchError as e:
                logger.error("Bad latch setting: %s", e)

    Note:
        Exceptions raised by listeners registered on
        :attr:`EventLatch.on_condition_met` are never wrapped in this hierarchy.
        They reach the caller of ``signal``/``try_condition`` unchanged.
    """


class InvalidRangeError(EventLatchError, TypeError):
    """Raised when a value cannot be interpreted as a condition range.

    Accepted inputs are :class:`~eventlatch.ValueRange` instances and pairs of
    integers ``(min, max)``. Inverted pairs such as ``(5, 1)`` are *not* an
    error; they produce a range that never matches.

    Example::

        ValueRange.coerce((0, 2))      # ValueRange(min=0, max=2)
        ValueRange.coerce("0..2")      # raises InvalidRangeError
    """


class LoggingConfigError(EventLatchError, ValueError):
    """Raised when :func:`eventlatch.logging.configure_logging` gets a bad level."""


__all__ = [
    "EventLatchError",
    "InvalidRangeError",
    "LoggingConfigError",
]
