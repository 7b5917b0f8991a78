# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for hive name handling."""
from __future__ import annotations

import pytest

from reg2ps.converter import convert
from reg2ps.core.exceptions import UnknownHive
from reg2ps.registry.hives import HIVE_NAMES, HIVES, match_hive, to_drive_path

EXPECTED = {
    "HKEY_LOCAL_MACHINE": "HKLM:",
    "HKEY_CURRENT_USER": "HKCU:",
    "HKEY_CLASSES_ROOT": "HKCR:",
    "HKEY_USERS": "HKU:",
    "HKEY_CURRENT_CONFIG": "HKCC:",
}


@pytest.mark.unit
class TestHiveTable:
    def test_mapping_is_exact(self):
        assert dict(HIVES) == EXPECTED
        assert len(HIVES) == len(EXPECTED)

    def test_drive_prefixes_are_unique(self):
        drives = [d for _, d in HIVES]
        assert len(set(drives)) == len(drives)

    def test_each_hive_matches_only_itself(self):
        # Exhaustive: each hive's own paths only match that hive.
        for name in HIVE_NAMES:
            hits = [other for other in HIVE_NAMES if (name + "\\Sub").startswith(other)]
            assert hits == [name]


@pytest.mark.unit
class TestDrivePath:
    @pytest.mark.parametrize("hive,drive", sorted(EXPECTED.items()))
    def test_prefix_is_replaced_and_suffix_kept(self, hive, drive):
        suffix = r"\Software\Vendor\App 1.0"

        assert to_drive_path(hive + suffix) == drive + suffix
        assert match_hive(hive + suffix) == (hive, drive)

    @pytest.mark.parametrize("hive,drive", sorted(EXPECTED.items()))
    def test_bare_hive(self, hive, drive):
        assert to_drive_path(hive) == drive

    @pytest.mark.parametrize(
        "section",
        ["HKEY_UNKNOWN\\X", "HKLM\\Software", "hkey_local_machine\\x", "", " HKEY_USERS"],
    )
    def test_unknown(self, section):
        assert match_hive(section) is None
        assert to_drive_path(section) is None

    @pytest.mark.parametrize("hive,drive", sorted(EXPECTED.items()))
    def test_new_item_uses_drive(self, hive, drive):
        out = convert(f"[{hive}\\Key]")

        assert out == f"New-Item -Path '{drive}\\Key' -Force\n"

    @pytest.mark.parametrize("token", ["HKEY_NOPE", "HKLM\\X", "-HKEY_CURRENT_USER\\X", "Software"])
    def test_unknown_bracketed_token(self, token):
        with pytest.raises(UnknownHive):
            convert(f"[{token}]")
