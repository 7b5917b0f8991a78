# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
"""Logging helpers shared by the CLI layers."""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator, Union

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


@contextmanager
def log_step(logger: LoggerLike, description: str) -> Generator[None, None, None]:
    """
    Log the start and the timed end of a step; failures are logged and re-raised.

    Example:
        with log_step(logger, "Converting tweaks.reg"):
            script = convert(text)
    """
    t0 = time.time()
    logger.info("%s ...", description)
    try:
        yield
    except Exception as e:
        logger.error("%s failed (%.2fs): %s", description, time.time() - t0, e)
        raise
    logger.info("%s done (%.2fs)", description, time.time() - t0)
