# SPDX-License-Identifier: LGPL-3.0-or-later
# reg2ps/core/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional


def _safe_int(x: Any, default: int = 1) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return default


def _clamp_exit_code(code: int) -> int:
    # Exit codes are 0..255.
    if code < 0:
        return 1
    if code > 255:
        return 255
    return code


def _one_line(s: str, limit: int = 600) -> str:
    s = (s or "").strip().replace("\r", " ").replace("\n", " ")
    s = " ".join(s.split())
    return s if len(s) <= limit else (s[: limit - 3] + "...")


def _format_context(ctx: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={ctx[k]!r}" for k in sorted(ctx))


@dataclass(eq=False)
class Reg2PsError(Exception):
    """
    Base error for reg2ps.

    `code` is the process exit code main() uses; `context` carries where
    the error happened (e.g. the input file) for verbose CLI output.
    """
    code: int = 1
    msg: str = "error"
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _clamp_exit_code(_safe_int(self.code, default=1))
        self.msg = _one_line(self.msg) or self.__class__.__name__
        if self.context is None:
            self.context = {}
        super().__init__(self.msg)
        self.args = (self.msg,)

    def with_context(self, **ctx: Any) -> "Reg2PsError":
        if self.context is None:
            self.context = {}
        self.context.update(ctx)
        return self

    def user_message(self, *, include_context: bool = False) -> str:
        if include_context and self.context:
            return f"{self.msg} [{_one_line(_format_context(self.context))}]"
        return self.msg

    def __str__(self) -> str:
        return self.user_message()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": self.msg,
            "context": dict(self.context or {}),
        }


class Fatal(Reg2PsError):
    """Bad arguments, unreadable input or unwritable output."""


# ---------------------------------------------------------------------------
# Conversion errors (terminal for one conversion call)
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class ConversionError(Reg2PsError):
    """
    A .reg document could not be translated.

    `line` is the 1-based physical line that triggered the failure, or None
    for whole-document conditions such as empty input.
    """
    code: int = 2
    msg: str = ""
    line: Optional[int] = None

    template: ClassVar[str] = "Conversion failed on line {line}"

    def __post_init__(self) -> None:
        if not self.msg:
            self.msg = self.template.format(line=self.line)
        super().__post_init__()

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["line"] = self.line
        return d


class EmptyInput(ConversionError):
    template = "Input is empty. Please provide REG file content."


class MalformedSectionHeader(ConversionError):
    template = "Invalid registry key format on line {line}"


class UnknownHive(ConversionError):
    template = "Unknown registry hive on line {line}"


class ValueOutsideSection(ConversionError):
    template = "Value outside of registry path on line {line}"


class MissingEquals(ConversionError):
    template = "Missing '=' on line {line}"


class InvalidDword(ConversionError):
    template = "Invalid DWORD value on line {line}"


def format_exception_for_cli(e: BaseException, *, verbose: int = 0) -> str:
    """
    One-liner output for CLI.

    verbose=0: just the message
    verbose>=1: message + context, exception type for foreign errors at 2
    """
    if isinstance(e, Reg2PsError):
        return e.user_message(include_context=verbose >= 1)

    if verbose >= 2:
        return f"{type(e).__name__}: {_one_line(str(e))}"
    return _one_line(str(e)) or type(e).__name__
