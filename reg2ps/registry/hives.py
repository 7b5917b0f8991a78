# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/registry/hives.py
"""Registry hive names and their PowerShell drive prefixes."""
from __future__ import annotations

from typing import Optional, Tuple

# Matched by prefix, first hit wins.
HIVES: Tuple[Tuple[str, str], ...] = (
    ("HKEY_LOCAL_MACHINE", "HKLM:"),
    ("HKEY_CURRENT_USER", "HKCU:"),
    ("HKEY_CLASSES_ROOT", "HKCR:"),
    ("HKEY_USERS", "HKU:"),
    ("HKEY_CURRENT_CONFIG", "HKCC:"),
)

HIVE_NAMES: Tuple[str, ...] = tuple(name for name, _ in HIVES)


def match_hive(section: str) -> Optional[Tuple[str, str]]:
    """Return (hive, drive) for the hive `section` starts with, else None."""
    for name, drive in HIVES:
        if section.startswith(name):
            return name, drive
    return None


def to_drive_path(section: str) -> Optional[str]:
    r"""
    Translate a section path to its PowerShell provider form.

    Only the hive prefix changes: HKEY_CURRENT_USER\Software -> HKCU:\Software
    """
    hit = match_hive(section)
    if hit is None:
        return None
    name, drive = hit
    return drive + section[len(name):]
