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

"""Count-gated callback latches for single-flow programs.

Replace scattered "have all the replies arrived yet?" flags with one object::

    from eventlatch import EventLatch

    loaded = EventLatch[[str]](3)
    loaded.on_condition_met += lambda last: print(f"all loaded, last was {last}")

    for name in ("config", "assets", "profile"):
        fetch(name, on_done=loaded.signal)

The latch counts down on every ``signal`` and runs its listeners, with that
call's arguments, whenever the count lands inside ``condition_range``
(``(0, 0)`` by default).
"""

from __future__ import annotations

from .callbacks import CallbackSlot
from .errors import EventLatchError, InvalidRangeError, LoggingConfigError
from .latch import BaseEventLatch, EventLatch
from .ranges import MAX_COUNT, MIN_COUNT, RangeLike, ValueRange

__all__ = [
    "MAX_COUNT",
    "MIN_COUNT",
    "BaseEventLatch",
    "CallbackSlot",
    "EventLatch",
    "EventLatchError",
    "InvalidRangeError",
    "LoggingConfigError",
    "RangeLike",
    "ValueRange",
]
