# SPDX-License-Identifier: LGPL-3.0-or-later
# reg2ps/registry/__init__.py
"""
Registry export building blocks.

- hives: hive names and PowerShell drive prefixes
- encoding: hex byte lists and UTF-16 byte-pair decoding
"""
from .encoding import decode_hex_string, decode_utf16_pairs, parse_hex_bytes
from .hives import HIVE_NAMES, HIVES, match_hive, to_drive_path

__all__ = [
    "HIVES",
    "HIVE_NAMES",
    "decode_hex_string",
    "decode_utf16_pairs",
    "match_hive",
    "parse_hex_bytes",
    "to_drive_path",
]
