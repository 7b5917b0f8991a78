# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/converter.py
"""
Translate Windows Registry export text into PowerShell.

Every section header becomes a New-Item call and every value line a
Set-ItemProperty call against the most recent section. The first bad
line aborts the whole conversion; nothing partial is returned.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .core.exceptions import (
    ConversionError,
    EmptyInput,
    InvalidDword,
    MalformedSectionHeader,
    MissingEquals,
    UnknownHive,
    ValueOutsideSection,
)
from .core.logger import TRACE
from .powershell import (
    PropertyType,
    double_quoted,
    new_item,
    set_item_property,
    single_quoted,
    string_array,
)
from .registry.encoding import decode_hex_string
from .registry.hives import to_drive_path

logger = logging.getLogger("reg2ps.converter")

BANNER = "Windows Registry Editor"

_LINE_SPLIT = re.compile(r"\r?\n")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def _trim(line: str) -> str:
    # Pasted text may carry a BOM on its first line.
    return line.strip().strip("\ufeff").strip()


def _strip_quotes(s: str) -> str:
    """Drop one leading and one trailing double quote, nothing else."""
    if s.startswith('"'):
        s = s[1:]
    if s.endswith('"'):
        s = s[:-1]
    return s


def _parse_dword(payload: str, lineno: int) -> int:
    if not _HEX_DIGITS.fullmatch(payload):
        raise InvalidDword(line=lineno)
    return int(payload, 16)


def classify_value(value_part: str, lineno: int) -> Tuple[str, PropertyType]:
    """
    Map the right-hand side of a value line to (PowerShell literal, type).

    hex(7)/hex(2) are checked before hex: since they share its prefix.
    """
    if value_part.startswith("dword:"):
        return str(_parse_dword(value_part[len("dword:"):], lineno)), PropertyType.DWORD

    if value_part.startswith("hex(7):"):
        text = decode_hex_string(value_part[len("hex(7):"):])
        parts = [p for p in text.split("\0") if p]
        return string_array(parts), PropertyType.MULTI_STRING

    if value_part.startswith("hex(2):"):
        text = decode_hex_string(value_part[len("hex(2):"):])
        return double_quoted(text.replace("\0", "")), PropertyType.EXPAND_STRING

    if value_part.startswith("hex:"):
        return double_quoted(value_part[len("hex:"):].replace(",", "")), PropertyType.BINARY

    if value_part.startswith('"') and value_part.endswith('"'):
        return single_quoted(_strip_quotes(value_part)), PropertyType.STRING

    return single_quoted(value_part), PropertyType.STRING


def convert(text: str) -> str:
    """
    Convert .reg export text to PowerShell commands.

    Returns the commands, one per line, each newline-terminated.
    Raises a ConversionError subclass carrying the offending line number.
    """
    if not text or not text.strip():
        raise EmptyInput()

    current_path: Optional[str] = None
    out: List[str] = []

    for lineno, raw in enumerate(_LINE_SPLIT.split(text), start=1):
        line = _trim(raw)
        if not line or line.startswith(BANNER):
            continue

        if line.startswith("["):
            if not line.endswith("]"):
                raise MalformedSectionHeader(line=lineno)

            path = to_drive_path(line[1:-1])
            if path is None:
                raise UnknownHive(line=lineno)

            current_path = path
            logger.log(TRACE, "line %d: key %s", lineno, current_path)
            out.append(new_item(current_path))
            continue

        if current_path is None:
            raise ValueOutsideSection(line=lineno)
        if "=" not in line:
            raise MissingEquals(line=lineno)

        name_part, value_raw = line.split("=", 1)
        name = _strip_quotes(name_part)
        value, ptype = classify_value(value_raw.strip(), lineno)

        logger.log(TRACE, "line %d: %s (%s)", lineno, name, ptype.value)
        out.append(set_item_property(current_path, name, value, ptype))

    return "".join(f"{cmd}\n" for cmd in out)


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of one conversion: either `output` or `error` is set.

    Display-oriented callers (batch reports, notifications) use this
    instead of catching ConversionError themselves.
    """
    output: Optional[str] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @property
    def keys(self) -> int:
        return sum(1 for ln in (self.output or "").splitlines() if ln.startswith("New-Item "))

    @property
    def values(self) -> int:
        return sum(1 for ln in (self.output or "").splitlines() if ln.startswith("Set-ItemProperty "))

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {
                "ok": False,
                "error": self.error.kind,
                "line": self.error.line,
                "message": self.error.msg,
            }
        return {"ok": True, "keys": self.keys, "values": self.values}


def try_convert(text: str) -> ConversionResult:
    try:
        output = convert(text)
    except ConversionError as e:
        logger.debug("conversion failed: %s (%s)", e, e.kind)
        return ConversionResult(error=e)
    return ConversionResult(output=output)
