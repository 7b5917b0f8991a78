# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# reg2ps/orchestrator.py
"""
Batch driver behind the CLI.

Reads each input, converts it, and writes the script to a file or to
stdout. Inputs are independent: a conversion error in one file is
reported and the rest still run.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, TextIO, Tuple

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from .converter import ConversionResult, try_convert
from .core.exceptions import format_exception_for_cli
from .core.file_ops import decode_reg_bytes, read_reg_file, write_bytes_atomic
from .core.logger import Log, is_tty
from .core.logging_utils import log_step
from .core.utils import U
from .powershell import DEFAULT_HEADER, encode_script, render_script

STDIN = "-"


@dataclass
class InputOutcome:
    source: str
    result: ConversionResult
    output_path: Optional[Path] = None

    def to_dict(self, *, include_script: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {"input": self.source}
        d.update(self.result.to_dict())
        if self.output_path is not None:
            d["output"] = str(self.output_path)
        if include_script and self.result.ok:
            d["script"] = self.result.output
        return d


class Orchestrator:
    def __init__(
        self,
        logger: logging.Logger,
        args: argparse.Namespace,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.logger = logger
        self.args = args
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.outcomes: List[InputOutcome] = []

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def inputs(self) -> List[str]:
        return list(getattr(self.args, "inputs", None) or [STDIN])

    @property
    def header(self) -> Optional[str]:
        if getattr(self.args, "no_header", False):
            return None
        return getattr(self.args, "header", None) or DEFAULT_HEADER

    @property
    def newline(self) -> str:
        return "\r\n" if getattr(self.args, "crlf", False) else "\n"

    @property
    def json_mode(self) -> bool:
        return bool(getattr(self.args, "json", False))

    def _plan_targets(self) -> List[Optional[Path]]:
        """
        Output path per input, in input order.

        Under --output-dir each input becomes <stem>.ps1; stems that repeat
        (a/x.reg, b/x.reg) get -2, -3, ... so no script overwrites another.
        """
        out = getattr(self.args, "output", None)
        if out:
            return [Path(out).expanduser() for _ in self.inputs]
        out_dir = getattr(self.args, "output_dir", None)
        if not out_dir:
            return [None for _ in self.inputs]

        base = Path(out_dir).expanduser()
        taken: Set[str] = set()
        targets: List[Optional[Path]] = []
        for source in self.inputs:
            stem = "stdin" if source == STDIN else Path(source).stem
            name, n = f"{stem}.ps1", 1
            # compared case-insensitively
            while name.lower() in taken:
                n += 1
                name = f"{stem}-{n}.ps1"
            if n > 1:
                self.logger.info("Output name %s is taken, writing %s as %s", f"{stem}.ps1", source, name)
            taken.add(name.lower())
            targets.append(base / name)
        return targets

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def _read(self, source: str) -> str:
        if source == STDIN:
            buf = getattr(self.stdin, "buffer", None)
            if buf is not None:
                return decode_reg_bytes(buf.read())
            return self.stdin.read()
        try:
            return read_reg_file(Path(source))
        except OSError as e:
            U.die(self.logger, f"Cannot read {source}: {e}", 1)

    def _write(self, target: Path, body: str) -> None:
        if target.exists() and not getattr(self.args, "force", False):
            U.die(self.logger, f"Output exists (use --force to overwrite): {target}", 1)
        text = render_script(body, header=self.header, newline=self.newline)
        try:
            write_bytes_atomic(target, encode_script(text, bom=bool(getattr(self.args, "bom", False))))
        except OSError as e:
            U.die(self.logger, f"Cannot write {target}: {e}", 1)

    def _print(self, body: str) -> None:
        header = self.header if getattr(self.args, "stdout_header", False) else None
        self.stdout.write(render_script(body, header=header))
        self.stdout.flush()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def _progress_enabled(self) -> bool:
        return len(self.inputs) > 1 and is_tty(sys.stderr) and self.logger.isEnabledFor(logging.WARNING)

    def _iter_inputs(self, targets: List[Optional[Path]]) -> Iterator[Tuple[str, Optional[Path]]]:
        pairs = list(zip(self.inputs, targets))
        if not self._progress_enabled():
            yield from pairs
            return

        with Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=True,
        ) as progress:
            task = progress.add_task("Converting", total=len(pairs))
            for source, target in pairs:
                progress.update(task, description=f"Converting {Path(source).name}")
                yield source, target
                progress.advance(task)

    def _check_targets(self, targets: List[Optional[Path]]) -> None:
        if getattr(self.args, "force", False):
            return
        for target in targets:
            if target is not None and target.exists():
                U.die(self.logger, f"Output exists (use --force to overwrite): {target}", 1)

    def convert_one(self, source: str, target: Optional[Path] = None) -> InputOutcome:
        log = Log.bind(self.logger, file=source)
        with log_step(log, f"Converting {source}"):
            text = self._read(source)
            result = try_convert(text)

        if result.error is not None:
            err = result.error.with_context(file=source)
            Log.fail(self.logger, format_exception_for_cli(err, verbose=1), kind=err.kind)
            return InputOutcome(source=source, result=result)

        if target is not None:
            self._write(target, result.output or "")
            Log.ok(self.logger, f"Wrote {target}", keys=result.keys, values=result.values)
        elif not self.json_mode:
            self._print(result.output or "")

        return InputOutcome(source=source, result=result, output_path=target)

    def run(self) -> int:
        Log.banner(self.logger, "reg2ps")
        targets = self._plan_targets()
        # checked up front so a batch never stops after partial writes
        self._check_targets(targets)

        for source, target in self._iter_inputs(targets):
            self.outcomes.append(self.convert_one(source, target))

        failed = [o for o in self.outcomes if not o.result.ok]

        if self.json_mode:
            report = {
                "ok": not failed,
                "inputs": [o.to_dict(include_script=o.output_path is None) for o in self.outcomes],
            }
            self.stdout.write(U.json_dump(report) + "\n")
            self.stdout.flush()

        if failed:
            self.logger.warning(
                "%s of %s failed", U.plural(len(failed), "input"), len(self.outcomes)
            )
            return 2

        self.logger.info("Converted %s", U.plural(len(self.outcomes), "input"))
        return 0
