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

"""Recording listeners for latch and callback slot tests.

Example::

    from tests.helpers.listeners import Recorder

    def test_fires_once() -> None:
        latch = EventLatch[[int]](1)
        seen = Recorder()
        latch.on_condition_met += seen
        latch.signal(7)
        assert seen.args == [(7,)]
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass(eq=False)
class Recorder:
    """Listener that records every call it receives."""

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = field(
        default_factory=list
    )

    def __call__(self, *args: object, **kwargs: object) -> None:
        self.calls.append((args, kwargs))

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def args(self) -> list[tuple[object, ...]]:
        """Positional arguments of each call, in order."""
        return [args for args, _ in self.calls]


@dataclass(eq=False)
class Raiser:
    """Listener that raises ``error`` every time it is called."""

    error: Exception

    def __call__(self, *args: object, **kwargs: object) -> None:
        raise self.error


@pytest.fixture
def recorder() -> Recorder:
    """Provide a fresh :class:`Recorder`."""
    return Recorder()


__all__ = [
    "Raiser",
    "Recorder",
    "recorder",
]
