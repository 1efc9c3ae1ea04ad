# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import logging
from logging import Logger, StreamHandler

import pytest
from rich.logging import RichHandler

from lazycell.logging import LogWriter, configure_logging, get_log_writer


class _Unformattable:
    def __format__(self, format_spec: str) -> str:
        raise AssertionError("The message must not be formatted.")


class TestLogWriter:
    def test_debug_formats_message(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="lazycell.test")

        log = get_log_writer("lazycell.test")

        log.debug("foo {} {bar}", 1, bar="baz")

        assert [r.getMessage() for r in caplog.records] == ["foo 1 baz"]

    def test_disabled_level_skips_formatting(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="lazycell.test")

        log = get_log_writer("lazycell.test")

        log.debug("foo {}", _Unformattable())

        assert caplog.records == []

    def test_message_without_args_is_not_formatted(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="lazycell.test")

        log = LogWriter(logging.getLogger("lazycell.test"))

        log.debug("{not a placeholder}")

        assert [r.getMessage() for r in caplog.records] == ["{not a placeholder}"]


class TestConfigureLogging:
    @pytest.fixture
    def root(self, monkeypatch: pytest.MonkeyPatch) -> Logger:
        logger = Logger("root")

        monkeypatch.setattr("lazycell.logging.getLogger", lambda: logger)

        return logger

    def test_rich_handler_is_installed(self, root: Logger) -> None:
        old_handler = StreamHandler()

        root.addHandler(old_handler)

        configure_logging(level=logging.DEBUG)

        assert len(root.handlers) == 1

        assert isinstance(root.handlers[0], RichHandler)

        assert root.level == logging.DEBUG

    def test_plain_handler_is_installed(self, root: Logger) -> None:
        configure_logging(no_rich=True)

        assert len(root.handlers) == 1

        handler = root.handlers[0]

        assert type(handler) is StreamHandler

        assert handler.formatter is not None
        assert handler.formatter._fmt == (
            "%(asctime)s %(levelname)s: %(name)s - %(message)s"
        )

        assert root.level == logging.INFO
