# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar, final

import pytest

T = TypeVar("T")


@final
class CountingFactory(Generic[T]):
    """Wraps a factory and records how many times it was invoked."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory

        self.num_calls = 0

    def __call__(self) -> T:
        self.num_calls += 1

        return self._factory()


@pytest.fixture
def counting_factory() -> type[CountingFactory[Any]]:
    return CountingFactory
