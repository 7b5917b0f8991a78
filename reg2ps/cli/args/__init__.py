# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/cli/args/__init__.py
"""
Argument parsing for the reg2ps CLI.

- builder: help formatter and epilog
- groups: argument groups
- parser: two-phase (config, then CLI) parsing
- validators: checks on the merged view
"""
from __future__ import annotations

from .builder import HelpFormatter, _build_epilog
from .groups import _add_global_config_logging, _add_input_paths, _add_output_knobs, _add_script_format
from .parser import _build_preparser, _load_merged_config, build_parser, parse_args_with_config
from .validators import validate_args

__all__ = [
    "HelpFormatter",
    "_build_epilog",
    "_add_global_config_logging",
    "_add_input_paths",
    "_add_output_knobs",
    "_add_script_format",
    "_build_preparser",
    "_load_merged_config",
    "build_parser",
    "parse_args_with_config",
    "validate_args",
]
