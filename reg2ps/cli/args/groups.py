# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/cli/args/groups.py
from __future__ import annotations

import argparse


def _add_global_config_logging(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # Global config/logging (two-phase parse relies on these)
    # ------------------------------------------------------------------
    from ... import __version__

    g = p.add_argument_group("config and logging")
    g.add_argument(
        "--config",
        action="append",
        default=[],
        help="YAML/JSON config file or directory (repeatable; later overrides earlier).",
    )
    g.add_argument("--dump-config", action="store_true", help="Print merged config and exit.")
    g.add_argument("--dump-args", action="store_true", help="Print final parsed args and exit.")
    g.add_argument("--version", action="version", version=__version__)
    g.add_argument("-v", "--verbose", action="count", default=0, help="Verbosity: -v, -vv, -vvv")
    g.add_argument("-q", "--quiet", action="count", default=0, help="Only errors (-q) or nothing (-qq).")
    g.add_argument("--log-file", dest="log_file", default=None, help="Write logs to file.")
    g.add_argument("--json-logs", dest="json_logs", action="store_true", help="Emit logs as NDJSON on stderr.")


def _add_input_paths(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    p.add_argument(
        "inputs",
        nargs="*",
        default=[],
        metavar="INPUT",
        help="Registry export (.reg) files; '-' or nothing reads stdin.",
    )


def _add_output_knobs(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # Output destination
    # ------------------------------------------------------------------
    g = p.add_argument_group("output")
    g.add_argument("-o", "--output", dest="output", default=None, help="Write the script to FILE (single input).")
    g.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Write <name>.ps1 per input into DIR (default: print to stdout).",
    )
    g.add_argument("--force", dest="force", action="store_true", help="Overwrite existing output files.")
    g.add_argument("--json", dest="json", action="store_true", help="Print a JSON report instead of scripts.")


def _add_script_format(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # Script file format
    # ------------------------------------------------------------------
    g = p.add_argument_group("script format")
    g.add_argument("--header", dest="header", default=None, help="Generator comment on the first line of written scripts.")
    g.add_argument("--no-header", dest="no_header", action="store_true", help="Do not write a generator comment.")
    g.add_argument(
        "--stdout-header",
        dest="stdout_header",
        action="store_true",
        help="Also print the generator comment when writing to stdout.",
    )
    g.add_argument("--crlf", dest="crlf", action="store_true", help="Use CRLF line endings in written scripts.")
    g.add_argument("--bom", dest="bom", action="store_true", help="Prefix written scripts with a UTF-8 BOM.")
