# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/powershell.py
"""PowerShell command rendering for registry provider paths."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from . import __version__

DEFAULT_HEADER = f"# Script generated with reg2ps {__version__}"


class PropertyType(Enum):
    """Values accepted by Set-ItemProperty -Type."""
    STRING = "String"
    EXPAND_STRING = "ExpandString"
    MULTI_STRING = "MultiString"
    DWORD = "DWord"
    BINARY = "Binary"


def single_quoted(s: str) -> str:
    return f"'{s}'"


def double_quoted(s: str) -> str:
    return f'"{s}"'


def string_array(items: Iterable[str]) -> str:
    """@("a","b") literal; an empty sequence still renders one empty element."""
    return '@("' + '","'.join(items) + '")'


def new_item(path: str) -> str:
    return f"New-Item -Path {single_quoted(path)} -Force"


def set_item_property(path: str, name: str, value: str, ptype: PropertyType) -> str:
    return (
        f"Set-ItemProperty -Path {single_quoted(path)} -Name {single_quoted(name)} "
        f"-Value {value} -Type {ptype.value}"
    )


def render_script(body: str, *, header: Optional[str] = DEFAULT_HEADER, newline: str = "\n") -> str:
    """
    Assemble the text of a .ps1 file.

    The header comment is followed by one blank line. `newline` rewrites
    every line ending, e.g. "\\r\\n" for Windows PowerShell.
    """
    text = body
    if header:
        h = header if header.startswith("#") else f"# {header}"
        text = f"{h}\n\n{body}"
    if newline != "\n":
        text = text.replace("\r\n", "\n").replace("\n", newline)
    return text


def encode_script(text: str, *, bom: bool = False) -> bytes:
    return text.encode("utf-8-sig" if bom else "utf-8", errors="surrogatepass")
