# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import os
from typing import Any, Dict, List


def _require(v: Any) -> bool:
    """True if v is meaningfully present (treats empty/whitespace-only strings as missing)."""
    if v is None:
        return False
    if isinstance(v, str):
        return v.strip() != ""
    return True


def _normalize_inputs(args: argparse.Namespace) -> List[str]:
    raw = getattr(args, "inputs", None) or []
    if isinstance(raw, str):
        raw = [raw]
    return [str(x) for x in raw] or ["-"]


def _validate_inputs(inputs: List[str]) -> None:
    if inputs.count("-") > 1:
        raise SystemExit("stdin ('-') can only be given once")
    for p in inputs:
        if p == "-":
            continue
        if not os.path.exists(p):
            raise SystemExit(f"input file not found: {p}")
        if os.path.isdir(p):
            raise SystemExit(f"input is a directory: {p}")


def _validate_output(args: argparse.Namespace, inputs: List[str]) -> None:
    out = getattr(args, "output", None)
    out_dir = getattr(args, "output_dir", None)

    if _require(out) and _require(out_dir):
        raise SystemExit("--output and --output-dir are mutually exclusive")
    if _require(out) and len(inputs) > 1:
        raise SystemExit("--output takes a single input; use --output-dir for several")
    if _require(out_dir) and "-" in inputs and len(inputs) > 1:
        raise SystemExit("stdin cannot be mixed with files when using --output-dir")
    if _require(out_dir) and os.path.exists(str(out_dir)) and not os.path.isdir(str(out_dir)):
        raise SystemExit(f"--output-dir is not a directory: {out_dir}")


def _validate_header(args: argparse.Namespace) -> None:
    header = getattr(args, "header", None)
    if _require(header) and ("\n" in str(header) or "\r" in str(header)):
        raise SystemExit("--header must be a single line")


def validate_args(args: argparse.Namespace, conf: Dict[str, Any]) -> None:
    """
    Validate the merged CLI + config view.

    Normalizes args.inputs in place (empty means stdin).
    """
    args.inputs = _normalize_inputs(args)
    _validate_inputs(args.inputs)
    _validate_output(args, args.inputs)
    _validate_header(args)
