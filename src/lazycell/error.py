# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations


class InvalidOperationError(Exception):
    pass


class RecursiveInitializationError(InvalidOperationError):
    def __init__(self, thread_id: int, message: str) -> None:
        super().__init__(message)

        self.thread_id = thread_id


class InternalError(Exception):
    pass
