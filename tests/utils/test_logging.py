# XUtils
# Copyright (C) 2022-Present  XUtils

# This program is free software: you can redistribute it and/or modify
# it under the terms of the following licenses:
# - The Unlicense
# - GNU Affero General Public License v3.0 or later
# - GNU General Public License v2.0 or later
# - BSD 4-Clause "Original" or "Old" License
# - MIT License
# - Apache License 2.0

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the LICENSE file for more details.

import logging
import warnings

import pytest

from xutils.numbers import fixed_point
from xutils.utils import configure_logging


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("xutils")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging.captureWarnings(False)


class Test:
    def test_default_level(self, restore_logging):
        logger = configure_logging()
        assert logger is restore_logging
        assert logger.level == logging.WARNING

    def test_records_to_stdout(self, restore_logging, capsys):
        configure_logging("debug")
        fixed_point.log(3)
        out = capsys.readouterr().out
        assert "[DEBUG] xutils.numbers.fixed_point:" in out
        assert "terms" in out

    def test_captures_warnings(self, restore_logging):
        configure_logging()
        assert warnings.showwarning.__module__ == "logging"
