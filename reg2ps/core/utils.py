# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/core/utils.py
from __future__ import annotations

import json
import logging
from typing import Any, NoReturn, Union

from .exceptions import Fatal

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


class U:
    @staticmethod
    def die(logger: LoggerLike, msg: str, code: int = 1) -> NoReturn:
        logger.error(msg)
        raise Fatal(code=code, msg=msg)

    @staticmethod
    def json_dump(obj: Any) -> str:
        return json.dumps(obj, indent=2, sort_keys=True, default=str)

    @staticmethod
    def plural(n: int, word: str) -> str:
        return f"{n} {word}" if n == 1 else f"{n} {word}s"
