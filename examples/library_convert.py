#!/usr/bin/env python3
# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Example: converting a registry export with the reg2ps library.

This example demonstrates:
- Reading a regedit export (UTF-16 or ANSI)
- Converting it without raising, via try_convert()
- Writing a .ps1 file with the generator header

Usage:
    python library_convert.py /path/to/tweaks.reg /path/to/tweaks.ps1
"""

import logging
import sys
from pathlib import Path

from reg2ps import try_convert
from reg2ps.core.file_ops import read_reg_file, write_bytes_atomic
from reg2ps.powershell import encode_script, render_script

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def convert_file(source: Path, target: Path) -> bool:
    """Convert one .reg file; returns False if the export is rejected."""
    result = try_convert(read_reg_file(source))
    if not result.ok:
        logger.error(f"{source}: {result.error.kind} on line {result.error.line}: {result.message}")
        return False

    # Windows PowerShell 5.1 wants CRLF and a BOM for non-ASCII text
    text = render_script(result.output, newline="\r\n")
    write_bytes_atomic(target, encode_script(text, bom=True))
    logger.info(f"Wrote {target} ({result.keys} keys, {result.values} values)")
    return True


def main():
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    ok = convert_file(Path(sys.argv[1]), Path(sys.argv[2]))
    sys.exit(0 if ok else 2)


if __name__ == "__main__":
    main()
