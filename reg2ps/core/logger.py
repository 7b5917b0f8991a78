# SPDX-License-Identifier: LGPL-3.0-or-later
# reg2ps/core/logger.py
"""
Logging for the reg2ps CLI.

Everything goes to stderr; stdout is reserved for generated scripts.
Two line formats exist: a short emoji line for people and NDJSON
(--json-logs) for CI. Per-file context rides along on records as `ctx`.
"""
from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from termcolor import colored as _colored

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVEL_EMOJI = {
    "TRACE": "🧬",
    "DEBUG": "🔍",
    "INFO": "✅",
    "WARNING": "⚠️",
    "ERROR": "💥",
    "CRITICAL": "🧨",
}
_LEVEL_COLOR = {
    "TRACE": "cyan",
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


def is_tty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _can_encode_emoji(stream: Any) -> bool:
    enc = getattr(stream, "encoding", None) or "utf-8"
    try:
        "✅".encode(enc)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


def c(
    text: str,
    color: Optional[str] = None,
    attrs: Optional[List[str]] = None,
    *,
    enable: bool = True,
) -> str:
    """Colorize text if enabled."""
    if not enable or not color:
        return text
    return _colored(text, color=color, attrs=attrs or [])


def _format_ctx(ctx: Optional[Mapping[str, Any]]) -> str:
    if not ctx:
        return ""
    parts = [f"{k}={v}".replace("\n", " ") for k, v in sorted(ctx.items())]
    return " " + " ".join(parts)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Carries a context dict (e.g. file="tweaks.reg") onto every record.
    Call sites may add more with extra={"ctx": {...}}.
    """

    def __init__(self, logger: logging.Logger, ctx: Optional[Mapping[str, Any]] = None):
        super().__init__(logger, extra={"ctx": dict(ctx or {})})

    def process(self, msg: Any, kwargs: Dict[str, Any]) -> Tuple[Any, Dict[str, Any]]:
        extra = kwargs.get("extra") or {}
        extra["ctx"] = {**self.extra["ctx"], **(extra.get("ctx") or {})}
        kwargs["extra"] = extra
        return msg, kwargs


class EmojiFormatter(logging.Formatter):
    """
    `12:01:33 ✅ INFO     Wrote out/tweaks.ps1 keys=2 values=7`

    detailed=True (log files, -vvv) adds milliseconds, logger name and
    module:line.
    """

    def __init__(self, *, color: bool = True, detailed: bool = False, stream: Any = None):
        super().__init__()
        out = stream if stream is not None else sys.stderr
        self._color = color and is_tty(out)
        self._emoji = _can_encode_emoji(out)
        self._detailed = detailed

    def format(self, record: logging.LogRecord) -> str:
        dt = _dt.datetime.fromtimestamp(record.created)
        ts = dt.strftime("%H:%M:%S.%f")[:-3] if self._detailed else dt.strftime("%H:%M:%S")
        mark = _LEVEL_EMOJI.get(record.levelname, "•") if self._emoji else "·"
        color = _LEVEL_COLOR.get(record.levelname)

        lvl = c(f"{record.levelname:<8}", color, enable=self._color)
        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            msg = c(msg, color, ["bold"], enable=self._color)
        where = f" [{record.name} {record.module}:{record.lineno}]" if self._detailed else ""

        line = f"{ts} {mark} {lvl}{where} {msg}{_format_ctx(getattr(record, 'ctx', None))}"
        if record.exc_info:
            tb = "\n".join("  " + ln for ln in self.formatException(record.exc_info).splitlines())
            line += "\n" + c(tb, "red", enable=self._color)
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per line, UTC timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        obj: Dict[str, Any] = {
            "ts": _dt.datetime.fromtimestamp(record.created, tz=_dt.timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "lineno": record.lineno,
        }
        ctx = getattr(record, "ctx", None)
        if ctx:
            obj["ctx"] = dict(ctx)
        if record.exc_info:
            obj["exc_type"] = record.exc_info[0].__name__ if record.exc_info[0] else "Exception"
            obj["traceback"] = self.formatException(record.exc_info)
        return json.dumps(obj, ensure_ascii=False, default=str)


class Log:
    @staticmethod
    def _level_from_flags(verbose: int, quiet: int) -> int:
        """
        default WARNING, -v INFO, -vv DEBUG, -vvv TRACE;
        -q ERROR, -qq CRITICAL. Quiet wins over verbose.
        """
        if quiet >= 2:
            return logging.CRITICAL
        if quiet == 1:
            return logging.ERROR
        if verbose >= 3:
            return TRACE
        if verbose >= 2:
            return logging.DEBUG
        if verbose == 1:
            return logging.INFO
        return logging.WARNING

    @staticmethod
    def bind(logger: logging.Logger, **ctx: Any) -> ContextLoggerAdapter:
        return ContextLoggerAdapter(logger, ctx)

    @staticmethod
    def banner(logger: logging.Logger, title: str) -> None:
        logger.info(f" {title.strip()} ".center(72, "─"))

    @staticmethod
    def ok(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.info(msg, extra={"ctx": ctx})

    @staticmethod
    def fail(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.error(msg, extra={"ctx": ctx})

    @staticmethod
    def setup(
        verbose: int = 0,
        log_file: Optional[str] = None,
        *,
        quiet: int = 0,
        json_logs: bool = False,
        logger_name: str = "reg2ps",
        stream: Any = None,
    ) -> logging.Logger:
        """
        Configure and return the project logger.

        Calling it again replaces the handlers, so the CLI can re-run it
        once config files have supplied logging options.
        """
        logger = logging.getLogger(logger_name)
        logger.propagate = False

        level = Log._level_from_flags(verbose, quiet)
        logger.setLevel(level)

        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        out = stream if stream is not None else sys.stderr
        sh = logging.StreamHandler(stream=out)
        sh.setLevel(level)
        sh.setFormatter(JsonFormatter() if json_logs else EmojiFormatter(detailed=verbose >= 3, stream=out))
        logger.addHandler(sh)

        if log_file:
            fp = Path(log_file).expanduser().resolve()
            fp.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(fp, encoding="utf-8")
            # the file keeps INFO even when the console is quieter
            fh.setLevel(min(level, logging.INFO))
            fh.setFormatter(JsonFormatter() if json_logs else EmojiFormatter(color=False, detailed=True, stream=fh.stream))
            logger.addHandler(fh)
            logger.setLevel(min(level, logging.INFO))

        logger.debug("Logger initialized (level=%s, pid=%s)", logging.getLevelName(level), os.getpid())
        logger.log(TRACE, "TRACE enabled")
        return logger
