# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import logging
from logging import INFO, Formatter, Handler, Logger, StreamHandler, getLogger
from typing import Any, Final, final


@final
class LogWriter:
    """Writes log messages using ``format()`` strings."""

    _NO_HIGHLIGHT: Final = {"highlighter": None}

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def debug(
        self, message: str, *args: Any, exc: BaseException | None = None, **kwargs: Any
    ) -> None:
        self._log(logging.DEBUG, message, args, kwargs, exc or False)

    def _log(
        self,
        level: int,
        message: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        exc_info: bool | BaseException = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        if args or kwargs:
            message = message.format(*args, **kwargs)

        self._logger.log(level, message, exc_info=exc_info, extra=self._NO_HIGHLIGHT)


def get_log_writer(name: str | None = None) -> LogWriter:
    """Returns the :class:`LogWriter` for the specified name."""
    return LogWriter(getLogger(name))


log = get_log_writer("lazycell")


def configure_logging(level: int = INFO, no_rich: bool = False) -> None:
    """
    Replaces the handlers of the root logger with a single console handler.

    Libraries should not call this function; it is meant for applications and
    test sessions that want readable ``lazycell`` debug output.
    """
    logger = getLogger()

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

        handler.close()

    datefmt = "%Y-%m-%d %H:%M:%S"

    console_handler: Handler

    if no_rich:
        console_handler = StreamHandler()

        console_formatter = Formatter(
            "%(asctime)s %(levelname)s: %(name)s - %(message)s", datefmt
        )
    else:
        from rich.console import Console
        from rich.logging import RichHandler

        console = Console(stderr=True, highlight=False)

        console_handler = RichHandler(console=console, show_path=False, keywords=[])

        console_formatter = Formatter("%(name)s - %(message)s", datefmt)

    console_handler.setFormatter(console_formatter)

    logger.addHandler(console_handler)

    logger.setLevel(level)
