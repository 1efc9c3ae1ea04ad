# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from lazycell.cell import Filled as Filled
from lazycell.cell import LazyCell as LazyCell
from lazycell.error import InvalidOperationError as InvalidOperationError
from lazycell.error import RecursiveInitializationError as RecursiveInitializationError
from lazycell.logging import configure_logging as configure_logging

__version__ = "0.1.0"
