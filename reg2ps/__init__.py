# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/__init__.py
"""
reg2ps - Windows Registry export to PowerShell converter

Usage as a library:

    from reg2ps import convert, try_convert

    script = convert(open("tweaks.reg", encoding="utf-16").read())

    result = try_convert(text)
    if not result.ok:
        print(result.error.kind, result.error.line, result.message)
"""

__version__ = "0.1.0"

from .converter import ConversionResult, convert, try_convert
from .core.exceptions import (
    ConversionError,
    EmptyInput,
    InvalidDword,
    MalformedSectionHeader,
    MissingEquals,
    Reg2PsError,
    UnknownHive,
    ValueOutsideSection,
)
from .registry.encoding import decode_utf16_pairs

__all__ = [
    "__version__",
    "convert",
    "try_convert",
    "ConversionResult",
    "decode_utf16_pairs",
    # Errors
    "Reg2PsError",
    "ConversionError",
    "EmptyInput",
    "MalformedSectionHeader",
    "UnknownHive",
    "ValueOutsideSection",
    "MissingEquals",
    "InvalidDword",
]
