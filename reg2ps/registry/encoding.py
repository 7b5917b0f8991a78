# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
"""
Registry value payload decoding.

.reg files spell REG_MULTI_SZ (hex(7)) and REG_EXPAND_SZ (hex(2)) values
as comma-separated hex bytes holding UTF-16LE text:

    "Path"=hex(2):25,00,53,00,79,00,73,00,00,00
"""
from __future__ import annotations

from typing import List, Sequence


def parse_hex_bytes(payload: str) -> List[int]:
    """
    Split a comma-separated hex byte list.

    Tokens that are not hexadecimal count as 0, so the result always has
    one entry per comma-separated token.
    """
    out: List[int] = []
    for token in payload.split(","):
        try:
            out.append(int(token.strip(), 16))
        except ValueError:
            out.append(0)
    return out


def decode_utf16_pairs(data: Sequence[int]) -> str:
    """
    Decode byte pairs as little-endian UTF-16 code units.

    Each pair (low, high) becomes one code unit low + high*256; a trailing
    unpaired byte is dropped. Values above 0xFF are truncated to one byte.
    """
    usable = len(data) - (len(data) % 2)
    raw = bytes(b & 0xFF for b in data[:usable])
    return raw.decode("utf-16-le", errors="surrogatepass")


def decode_hex_string(payload: str) -> str:
    return decode_utf16_pairs(parse_hex_bytes(payload))
