# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/config/config_loader.py
"""
YAML/JSON configuration files.

Several files may be given; they are merged in order, later files
overriding earlier ones (nested mappings merge key by key).
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

from ..core.utils import U

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

CONFIG_SUFFIXES = (".yaml", ".yml", ".json")


def _read_structured_file(path: Path) -> Dict[str, Any]:
    """
    Read a JSON/YAML file into a dict.

    Files without a known suffix are tried as JSON first, then YAML.
    """
    sfx = path.suffix.lower()
    raw = path.read_text(encoding="utf-8", errors="replace")
    if sfx == ".json":
        parsed = json.loads(raw)
    elif sfx in (".yml", ".yaml"):
        parsed = yaml.safe_load(raw)
    else:
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            parsed = yaml.safe_load(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("top-level config must be a mapping/object (dict)")
    return parsed


def _deep_merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _normalize_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    # `output-dir:` and `output_dir:` both work
    return {str(k).replace("-", "_"): v for k, v in d.items()}


class Config:
    @staticmethod
    def expand_configs(logger: LoggerLike, paths: Sequence[str]) -> List[Path]:
        """Resolve config arguments; a directory stands for its config files in name order."""
        out: List[Path] = []
        for p in paths:
            pp = Path(p).expanduser()
            if pp.is_dir():
                found = sorted(x for x in pp.iterdir() if x.is_file() and x.suffix.lower() in CONFIG_SUFFIXES)
                if not found:
                    logger.warning("Config directory has no config files: %s", pp)
                out.extend(found)
            elif pp.is_file():
                out.append(pp)
            else:
                U.die(logger, f"Config file not found: {pp}", 1)
        return out

    @staticmethod
    def load_one(logger: LoggerLike, path: Path) -> Dict[str, Any]:
        try:
            data = _read_structured_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            U.die(logger, f"Failed to load config {path}: {e}", 1)
        logger.debug("Loaded config %s (%d keys)", path, len(data))
        return _normalize_keys(data)

    @staticmethod
    def load_many(logger: LoggerLike, paths: Sequence[Path]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for p in paths:
            merged = _deep_merge(merged, Config.load_one(logger, p))
        return merged

    @staticmethod
    def apply_as_defaults(logger: LoggerLike, parser: argparse.ArgumentParser, conf: Dict[str, Any]) -> None:
        """
        Push config values into the parser as defaults so CLI flags still win.
        Keys the parser does not know are reported and ignored.
        """
        if not conf:
            return
        known = {a.dest for a in parser._actions}
        defaults: Dict[str, Any] = {}
        for k, v in conf.items():
            if k in known:
                defaults[k] = v
            else:
                logger.warning("Ignoring unknown config key: %s", k)
        if defaults:
            parser.set_defaults(**defaults)
