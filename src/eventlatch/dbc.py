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

"""Opt-in design-by-contract checks for :mod:`eventlatch`.

Contracts are disabled unless ``EVENTLATCH_DBC`` is set to a truthy value or
:func:`enable_dbc` is called, so production latches pay only a flag lookup.
The test suite enables them globally.

Contracts never police counts or ranges: the latch accepts any integer for
either. They guard the library's own guarantees and catch wiring mistakes
such as registering something that is not callable.

A predicate returns a ``bool`` or a ``(bool, detail)`` pair; the detail is
appended to the :class:`AssertionError` raised on failure::

    def _rearmed(latch, *_, **__):
        return latch.current_count == latch.starting_count, repr(latch)

    @ensure(_rearmed)
    def reset(self, new_starting_count=None): ...
"""

from __future__ import annotations

import copy
import os
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

type ContractResult = bool | tuple[bool, str]
ContractCallable = Callable[..., ContractResult]

_ENV_FLAG = "EVENTLATCH_DBC"
_OFF_VALUES = frozenset({"", "0", "false", "off", "no"})
_forced_state: bool | None = None


def dbc_active() -> bool:
    """Return ``True`` when DbC checks should run."""

    if _forced_state is not None:
        return _forced_state
    value = os.getenv(_ENV_FLAG)
    return value is not None and value.strip().lower() not in _OFF_VALUES


def enable_dbc() -> None:
    """Force DbC enforcement on."""

    global _forced_state
    _forced_state = True


def disable_dbc() -> None:
    """Force DbC enforcement off."""

    global _forced_state
    _forced_state = False


@contextmanager
def dbc_enabled(*, active: bool = True) -> Iterator[None]:
    """Temporarily set the DbC flag inside a ``with`` block."""

    global _forced_state
    previous = _forced_state
    _forced_state = active
    try:
        yield
    finally:
        _forced_state = previous


def _check(
    kind: str,
    func: Callable[..., object],
    predicates: tuple[ContractCallable, ...],
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> None:
    for predicate in predicates:
        outcome = predicate(*args, **kwargs)
        detail: str | None = None
        if isinstance(outcome, tuple):
            outcome, detail = outcome
        if outcome:
            continue
        name = getattr(predicate, "__name__", repr(predicate))
        msg = f"{kind} contract for {func.__qualname__} failed via {name}."
        if detail:
            msg = f"{msg} Details: {detail}"
        raise AssertionError(msg)


def _contract(
    kind: str, predicates: tuple[ContractCallable, ...]
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    if not predicates:
        msg = f"@{kind} expects at least one predicate"
        raise ValueError(msg)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
            if not dbc_active():
                return func(*args, **kwargs)
            if kind == "require":
                _check(kind, func, predicates, args, kwargs)
                return func(*args, **kwargs)
            result = func(*args, **kwargs)
            _check(kind, func, predicates, args, {**kwargs, "result": result})
            return result

        return wrapped

    return decorator


def require(
    *predicates: ContractCallable,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check preconditions against the call's arguments."""

    return _contract("require", predicates)


def ensure(*predicates: ContractCallable) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check postconditions; predicates also receive ``result=``."""

    return _contract("ensure", predicates)


def pure(func: Callable[P, R]) -> Callable[P, R]:  # noqa: UP047
    """Check that the wrapped callable leaves its positional arguments unchanged."""

    @wraps(func)
    def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
        if not dbc_active():
            return func(*args, **kwargs)
        before = copy.deepcopy(args)
        result = func(*args, **kwargs)
        for index, (original, snapshot) in enumerate(zip(args, before, strict=True)):
            if original != snapshot:
                msg = (
                    f"pure contract for {func.__qualname__} detected mutation of "
                    f"positional argument {index}: {snapshot!r} -> {original!r}"
                )
                raise AssertionError(msg)
        return result

    return wrapped


__all__ = [
    "ContractResult",
    "dbc_active",
    "dbc_enabled",
    "disable_dbc",
    "enable_dbc",
    "ensure",
    "pure",
    "require",
]
