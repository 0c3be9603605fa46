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

"""Ordered multicast callback slot."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Self

from .dbc import require


def _is_callable(self: object, callback: object) -> tuple[bool, str]:
    return callable(callback), f"listener {callback!r} is not callable"


@dataclass(eq=False)
class CallbackSlot[**P]:
    """Ordered collection of listeners invoked together.

    The slot is meant for a single logical flow of control and takes no locks.
    Listeners run in registration order; the same callable may be registered
    more than once and then runs once per registration.

    Example::

        slot = CallbackSlot[[str]]()

        @slot.register
        def on_message(msg: str) -> None:
            print(f"Received: {msg}")

        slot += lambda msg: audit.append(msg)
        slot("hello")  # both listeners run, in order

    Dispatch semantics:
        - Listeners are copied before invocation, so registering or
          unregistering during dispatch only affects later calls.
        - The first listener that raises stops dispatch and the exception
          propagates to the caller unchanged.
        - An empty slot is a valid no-op.
    """

    _callbacks: list[Callable[P, object]] = field(default_factory=list, repr=False)

    @require(_is_callable)
    def register(self, callback: Callable[P, object]) -> Callable[P, object]:
        """Append ``callback`` and return it, so this doubles as a decorator."""
        self._callbacks.append(callback)
        return callback

    def unregister(self, callback: Callable[P, object]) -> bool:
        """Remove the most recent registration of ``callback``.

        Returns:
            ``False`` if ``callback`` was not registered.
        """
        for index in range(len(self._callbacks) - 1, -1, -1):
            if self._callbacks[index] == callback:
                del self._callbacks[index]
                return True
        return False

    def __iadd__(self, callback: Callable[P, object]) -> Self:
        self.register(callback)
        return self

    def __isub__(self, callback: Callable[P, object]) -> Self:
        self.unregister(callback)
        return self

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> int:
        """Invoke every listener with the given arguments.

        Returns:
            Number of listeners invoked.

        Raises:
            Exception: Whatever the first failing listener raised.
        """
        callbacks = tuple(self._callbacks)
        for callback in callbacks:
            callback(*args, **kwargs)
        return len(callbacks)

    def clear(self) -> None:
        """Remove all listeners."""
        self._callbacks.clear()

    @property
    def count(self) -> int:
        """Number of registrations."""
        return len(self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __iter__(self) -> Iterator[Callable[P, object]]:
        return iter(tuple(self._callbacks))

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks


__all__ = [
    "CallbackSlot",
]
