# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/core/file_ops.py
"""
File helpers for reading registry exports and writing scripts.

Registry exports come in two encodings in practice: "Windows Registry
Editor Version 5.00" files are UTF-16LE with a BOM, while REGEDIT4 files
are ANSI. Scripts are written atomically through a temporary file.
"""

from __future__ import annotations

import codecs
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

_LEGACY_ENCODING = "cp1252"


def decode_reg_bytes(raw: bytes) -> str:
    """
    Decode the raw content of a .reg file.

    BOM wins (UTF-16LE/BE, UTF-8). Without a BOM the content is tried as
    UTF-8 and falls back to cp1252.
    """
    if raw.startswith(codecs.BOM_UTF16_LE) or raw.startswith(codecs.BOM_UTF16_BE):
        return raw.decode("utf-16", errors="replace")
    if raw.startswith(codecs.BOM_UTF8):
        return raw.decode("utf-8-sig", errors="replace")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode(_LEGACY_ENCODING, errors="replace")


def read_reg_file(path: Path) -> str:
    return decode_reg_bytes(Path(path).read_bytes())


@contextmanager
def atomic_write(
    target_path: Path,
    *,
    suffix: str = ".part",
    dir: Optional[Path] = None,
    delete_on_error: bool = True,
) -> Generator[Path, None, None]:
    """
    Context manager for atomic file writes using temporary file + rename.

    Creates a temporary file, yields its path for writing, then atomically
    renames it to the target path on success. Cleans up temp file on failure.

    Example:
        with atomic_write(Path("out/tweaks.ps1")) as temp_path:
            temp_path.write_bytes(data)
    """
    target_path = Path(target_path)
    temp_dir = Path(dir) if dir else target_path.parent

    temp_dir.mkdir(parents=True, exist_ok=True)

    # Same directory as target so the rename stays on one filesystem
    fd, temp_name = tempfile.mkstemp(
        suffix=suffix,
        prefix=f".{target_path.name}.",
        dir=str(temp_dir),
    )
    temp_path = Path(temp_name)

    try:
        os.close(fd)
        yield temp_path
        os.replace(temp_path, target_path)
    except BaseException:
        if delete_on_error:
            temp_path.unlink(missing_ok=True)
        raise


def write_bytes_atomic(target_path: Path, data: bytes) -> Path:
    with atomic_write(target_path) as tmp:
        tmp.write_bytes(data)
    return Path(target_path)
