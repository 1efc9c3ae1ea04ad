# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock, get_ident
from typing import Generic, TypeVar, final

from lazycell.error import InternalError, RecursiveInitializationError
from lazycell.logging import log

T_co = TypeVar("T_co", covariant=True)


@final
@dataclass(frozen=True)
class Filled(Generic[T_co]):
    """Holds the value of an initialized :class:`LazyCell`."""

    value: T_co


@final
class LazyCell(Generic[T_co]):
    """
    Holds a value that is constructed by ``factory`` on first request.

    The cell starts uninitialized. The first call to :meth:`initialize` or
    :meth:`get` invokes ``factory`` and stores its return value; all later calls
    return the stored value without invoking ``factory`` again. Any value,
    including ``None``, is a valid result.

    The cell can be shared between threads. Concurrent initializers block until
    the first one finishes, and all of them observe the same value. If
    ``factory`` raises, the error propagates to the caller and the cell stays
    uninitialized, so the next call retries.
    """

    _factory: Callable[[], T_co] | None
    _slot: Filled[T_co] | None
    _initializing_thread: int | None

    def __init__(self, factory: Callable[[], T_co]) -> None:
        if not callable(factory):
            raise TypeError(
                f"`factory` must be callable, but is of type `{type(factory)}` instead."
            )

        self._factory = factory
        self._slot = None
        self._lock = Lock()
        self._initializing_thread = None

    @staticmethod
    def create(factory: Callable[[], T_co]) -> LazyCell[T_co]:
        return LazyCell(factory)

    def initialize(self) -> bool:
        """
        Constructs the value if the cell is not initialized yet.

        :returns: ``True`` if this call invoked ``factory``; ``False`` if the
            cell was already initialized.

        :raises RecursiveInitializationError: if ``factory`` tries to
            initialize its own cell.
        """
        if self._slot is not None:
            return False

        thread_id = get_ident()

        if self._initializing_thread == thread_id:
            raise RecursiveInitializationError(
                thread_id, "`factory` must not initialize the cell it belongs to."
            )

        with self._lock:
            # Another thread might have won the race while we were waiting.
            if self._slot is not None:
                return False

            factory = self._factory
            if factory is None:
                raise InternalError("`factory` is `None`.")

            name = _get_factory_name(factory)

            log.debug("Initializing lazy cell with {}.", name)

            self._initializing_thread = thread_id

            try:
                value = factory()
            except Exception as ex:
                log.debug(
                    "Factory {} failed. The cell stays uninitialized.", name, exc=ex
                )

                raise
            finally:
                self._initializing_thread = None

            self._slot = Filled(value)

            # Release anything captured by the factory.
            self._factory = None

        log.debug("Lazy cell initialized with {}.", name)

        return True

    def get(self) -> T_co:
        """
        Returns the value of the cell, initializing it if necessary.

        :raises RecursiveInitializationError: if ``factory`` tries to
            initialize its own cell.
        """
        self.initialize()

        slot = self._slot
        if slot is None:
            raise InternalError("The cell is not initialized after `initialize()`.")

        return slot.value

    def peek_without_initializing(self) -> Filled[T_co] | None:
        """
        Returns the stored value wrapped in :class:`Filled`, or ``None`` if the
        cell is not initialized. Never invokes ``factory``.
        """
        return self._slot

    def is_initialized(self) -> bool:
        return self._slot is not None

    def __repr__(self) -> str:
        slot = self._slot
        if slot is None:
            return "LazyCell(<uninitialized>)"

        return f"LazyCell({slot.value!r})"


def _get_factory_name(factory: Callable[..., object]) -> str:
    name = getattr(factory, "__qualname__", None)
    if isinstance(name, str):
        return name

    return repr(factory)
