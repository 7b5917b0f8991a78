# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the .reg to PowerShell conversion."""
from __future__ import annotations

import pytest

from reg2ps.converter import classify_value, convert, try_convert
from reg2ps.core.exceptions import (
    ConversionError,
    EmptyInput,
    InvalidDword,
    MalformedSectionHeader,
    MissingEquals,
    UnknownHive,
    ValueOutsideSection,
)
from reg2ps.powershell import PropertyType


def _doc(*lines: str) -> str:
    return "\n".join(lines) + "\n"


@pytest.mark.unit
class TestScenarios:
    """End-to-end behaviour on small documents."""

    def test_string_value_under_current_user(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\Software\Test]", '"Foo"="bar"'))

        assert out.splitlines() == [
            r"New-Item -Path 'HKCU:\Software\Test' -Force",
            r"Set-ItemProperty -Path 'HKCU:\Software\Test' -Name 'Foo' -Value 'bar' -Type String",
        ]

    def test_dword_is_emitted_in_decimal(self):
        out = convert(_doc(r"[HKEY_LOCAL_MACHINE\X]", '"N"=dword:0000002a'))

        assert "-Value 42 -Type DWord" in out.splitlines()[1]

    def test_value_before_any_section(self):
        with pytest.raises(ValueOutsideSection) as ei:
            convert(_doc("Windows Registry Editor Version 5.00", "", '"A"="b"'))

        assert ei.value.line == 3

    def test_unterminated_section_header(self):
        with pytest.raises(MalformedSectionHeader) as ei:
            convert(r"[HKEY_LOCAL_MACHINE\X")

        assert ei.value.line == 1

    def test_unknown_hive(self):
        with pytest.raises(UnknownHive) as ei:
            convert(_doc("", r"[HKEY_UNKNOWN\X]"))

        assert ei.value.line == 2

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t\r\n  \n"])
    def test_blank_input_is_empty_input(self, text):
        with pytest.raises(EmptyInput) as ei:
            convert(text)

        assert ei.value.line is None
        assert "empty" in str(ei.value).lower()

    def test_fixture_document(self, sample_reg, sample_ps1_text):
        text = sample_reg.read_text(encoding="utf-8")

        assert convert(text) == sample_ps1_text


@pytest.mark.unit
class TestLineHandling:
    def test_banner_and_blank_lines_are_skipped(self):
        out = convert(_doc("Windows Registry Editor Version 5.00", "", "   ", r"[HKEY_USERS\.DEFAULT]"))

        assert out == "New-Item -Path 'HKU:\\.DEFAULT' -Force\n"

    def test_banner_match_is_case_sensitive(self):
        with pytest.raises(ValueOutsideSection):
            convert("windows registry editor version 5.00\n")

    def test_crlf_and_lf_give_same_output(self):
        lines = [r"[HKEY_USERS\S-1-5-18\Control Panel]", '"Beep"="no"', '"Delay"=dword:00000010']

        assert convert("\r\n".join(lines)) == convert("\n".join(lines))

    def test_lines_are_trimmed(self):
        out = convert(_doc(r"   [HKEY_CURRENT_CONFIG\System]  ", '\t"A"="b"   '))

        assert out.splitlines() == [
            r"New-Item -Path 'HKCC:\System' -Force",
            r"Set-ItemProperty -Path 'HKCC:\System' -Name 'A' -Value 'b' -Type String",
        ]

    def test_leading_bom_is_ignored(self):
        out = convert("\ufeffWindows Registry Editor Version 5.00\n[HKEY_CLASSES_ROOT\\.txt]\n")

        assert out == "New-Item -Path 'HKCR:\\.txt' -Force\n"

    def test_section_switch_rebinds_values(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '"x"="1"', r"[HKEY_CURRENT_USER\B]", '"y"="2"'))

        lines = out.splitlines()
        assert "-Path 'HKCU:\\A' -Name 'x'" in lines[1]
        assert "-Path 'HKCU:\\B' -Name 'y'" in lines[3]

    def test_path_suffix_is_kept_verbatim(self):
        suffix = r"\Software\Classes\*\shell\Open With  Spaces\command"
        out = convert(f"[HKEY_CLASSES_ROOT{suffix}]")

        assert out == f"New-Item -Path 'HKCR:{suffix}' -Force\n"

    def test_hive_name_repeated_in_path_is_not_rewritten(self):
        out = convert(r"[HKEY_LOCAL_MACHINE\HKEY_LOCAL_MACHINE]")

        assert out == "New-Item -Path 'HKLM:\\HKEY_LOCAL_MACHINE' -Force\n"

    def test_lone_bracket_is_malformed(self):
        with pytest.raises(MalformedSectionHeader):
            convert("[")

    def test_empty_brackets_are_unknown_hive(self):
        with pytest.raises(UnknownHive):
            convert("[]")

    def test_missing_equals(self):
        with pytest.raises(MissingEquals) as ei:
            convert(_doc(r"[HKEY_CURRENT_USER\A]", '"x"="1"', '"broken"'))

        assert ei.value.line == 3
        assert str(ei.value) == "Missing '=' on line 3"

    def test_first_error_wins(self):
        with pytest.raises(MalformedSectionHeader) as ei:
            convert(_doc(r"[HKEY_CURRENT_USER\A", r"[HKEY_NOPE\B]"))

        assert ei.value.line == 1

    def test_repeated_runs_are_identical(self, sample_reg):
        text = sample_reg.read_text(encoding="utf-8")

        assert convert(text) == convert(text)


@pytest.mark.unit
class TestValueLines:
    def test_split_happens_at_first_equals_only(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '"Cmd"="a=b==c"'))

        assert out.splitlines()[1].endswith("-Name 'Cmd' -Value 'a=b==c' -Type String")

    def test_name_quotes_stripped_once(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '""Q""="v"'))

        assert "-Name '\"Q\"'" in out.splitlines()[1]

    def test_default_value_name_is_kept(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '@="v"'))

        assert "-Name '@' -Value 'v'" in out

    def test_bare_value_is_kept_verbatim(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '"x"=  some text  '))

        assert out.splitlines()[1].endswith("-Value 'some text' -Type String")

    def test_value_with_only_leading_quote_is_bare(self):
        out = convert(_doc(r"[HKEY_CURRENT_USER\A]", '"x"="open'))

        assert out.splitlines()[1].endswith("-Value '\"open' -Type String")

    def test_error_discards_earlier_output(self):
        result = try_convert(_doc(r"[HKEY_CURRENT_USER\A]", '"x"="1"', '"n"=dword:xyz'))

        assert not result.ok
        assert result.output is None
        assert isinstance(result.error, InvalidDword)
        assert result.error.line == 3


@pytest.mark.unit
class TestClassifyValue:
    @pytest.mark.parametrize(
        "payload,expected",
        [
            ("dword:0000002a", "42"),
            ("dword:0000002A", "42"),
            ("dword:00000000", "0"),
            ("dword:ffffffff", "4294967295"),
        ],
    )
    def test_dword(self, payload, expected):
        assert classify_value(payload, 1) == (expected, PropertyType.DWORD)

    @pytest.mark.parametrize("payload", ["dword:", "dword:xyz", "dword:0x10", "dword:12 34", "dword:-1"])
    def test_invalid_dword(self, payload):
        with pytest.raises(InvalidDword) as ei:
            classify_value(payload, 7)

        assert ei.value.line == 7
        assert str(ei.value) == "Invalid DWORD value on line 7"

    def test_multi_string(self):
        value, ptype = classify_value("hex(7):61,00,62,00,00,00,63,00,00,00,00,00", 1)

        assert ptype is PropertyType.MULTI_STRING
        assert value == '@("ab","c")'

    def test_multi_string_trailing_unpaired_byte_dropped(self):
        value, _ = classify_value("hex(7):61,00,62", 1)

        assert value == '@("a")'

    def test_multi_string_empty_payload(self):
        assert classify_value("hex(7):", 1) == ('@("")', PropertyType.MULTI_STRING)

    def test_expand_string(self):
        payload = "hex(2):25,00,53,00,79,00,73,00,74,00,65,00,6d,00,52,00,6f,00,6f,00,74,00,25,00,00,00"

        assert classify_value(payload, 1) == ('"%SystemRoot%"', PropertyType.EXPAND_STRING)

    def test_expand_string_drops_inner_nulls(self):
        value, _ = classify_value("hex(2):41,00,00,00,42,00,00,00", 1)

        assert value == '"AB"'

    def test_expand_string_trailing_unpaired_byte_dropped(self):
        value, _ = classify_value("hex(2):41,00,42", 1)

        assert value == '"A"'

    def test_non_ascii_text(self):
        # "Größe" as UTF-16LE
        value, _ = classify_value("hex(2):47,00,72,00,f6,00,df,00,65,00,00,00", 1)

        assert value == '"Größe"'

    def test_binary_is_an_opaque_token(self):
        assert classify_value("hex:de,ad,be,ef", 1) == ('"deadbeef"', PropertyType.BINARY)

    def test_empty_binary(self):
        assert classify_value("hex:", 1) == ('""', PropertyType.BINARY)

    def test_quoted_string(self):
        assert classify_value('"C:\\\\Temp"', 1) == ("'C:\\\\Temp'", PropertyType.STRING)

    def test_specific_hex_prefixes_win_over_generic(self):
        assert classify_value("hex(7):41,00", 1)[1] is PropertyType.MULTI_STRING
        assert classify_value("hex(2):41,00", 1)[1] is PropertyType.EXPAND_STRING

    def test_unhandled_hex_type_is_a_string(self):
        assert classify_value("hex(b):01,00", 1) == ("'hex(b):01,00'", PropertyType.STRING)


@pytest.mark.unit
class TestTryConvert:
    def test_success_counts(self, sample_reg):
        result = try_convert(sample_reg.read_text(encoding="utf-8"))

        assert result.ok
        assert result.error is None
        assert result.message == ""
        assert result.keys == 2
        assert result.values == 7
        assert result.to_dict() == {"ok": True, "keys": 2, "values": 7}

    def test_failure_report(self):
        result = try_convert("[HKEY_NOPE]\n")

        assert not result.ok
        assert isinstance(result.error, ConversionError)
        assert result.message == "Unknown registry hive on line 1"
        assert result.to_dict() == {
            "ok": False,
            "error": "UnknownHive",
            "line": 1,
            "message": "Unknown registry hive on line 1",
        }

    def test_empty_input_report(self):
        result = try_convert("  ")

        assert result.to_dict()["error"] == "EmptyInput"
        assert result.to_dict()["line"] is None
