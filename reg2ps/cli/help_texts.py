# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/cli/help_texts.py
"""Long-form help shown in the --help epilog."""

YAML_EXAMPLE = r"""
  # reg2ps.yaml
  output_dir: ./scripts
  header: "# Deployment tweaks, generated by reg2ps"
  crlf: true
  bom: true

  reg2ps --config reg2ps.yaml tweaks.reg policies.reg
"""

FEATURE_SUMMARY = r"""
  • [HKEY_*\...] sections become New-Item -Path 'HK??:\...' -Force
  • values become Set-ItemProperty with -Type String, ExpandString,
    MultiString, DWord or Binary
  • regedit exports are read as UTF-16 (with BOM), UTF-8 or cp1252
  • the first malformed line aborts that file: kind + line number reported
  • several inputs convert independently; exit code 2 if any failed
"""

EXIT_CODES = r"""
  0  all inputs converted
  1  usage, config or I/O error
  2  at least one input could not be converted
  130 interrupted
"""
