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

from __future__ import annotations

import logging
import logging.config
from typing import Optional, Union

from xutils.config import defaults


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    r"""
    Set up logging for the `xutils` logger tree.

    Records are written to `stdout` as `time [LEVEL] name: message`.
    Warnings raised with `warnings.warn` are routed into logging as well.

    Args:
        level: Logging level, name or number.
            Defaults to `defaults.log_level`.

    Returns:
        The `xutils` logger.
    """

    if level is None:
        level = defaults.log_level
    if isinstance(level, str):
        level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
            },
            "handlers": {
                "stdout": {
                    "level": "DEBUG",
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "xutils": {
                    "handlers": ["stdout"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
    logging.captureWarnings(True)
    return logging.getLogger("xutils")
