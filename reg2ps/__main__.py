# SPDX-License-Identifier: LGPL-3.0-or-later
#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import sys
import traceback
from typing import Any, Optional, Sequence

from .cli.args.parser import parse_args_with_config
from .core.exceptions import Fatal, format_exception_for_cli
from .orchestrator import Orchestrator


def _print_stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def _safe_log(logger: Any, level: str, msg: str) -> None:
    if logger is None:
        _print_stderr(msg)
        return
    getattr(logger, level)(msg)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logger: Any = None

    # Phase 1: parse (Fatal can happen here)
    try:
        args, _conf, logger = parse_args_with_config(argv)
    except Fatal as e:
        # Raised through U.die, which already logged it.
        return e.code
    except KeyboardInterrupt:
        _safe_log(logger, "warning", "Interrupted by user (Ctrl+C).")
        return 130

    # Phase 2: convert
    verbose = int(getattr(args, "verbose", 0) or 0)
    try:
        rc = Orchestrator(logger, args).run()
    except Fatal as e:
        # U.die already logged the message.
        rc = e.code
    except KeyboardInterrupt:
        _safe_log(logger, "warning", "Interrupted by user (Ctrl+C).")
        rc = 130
    except Exception as e:
        _safe_log(logger, "error", f"UNHANDLED {type(e).__name__}: {format_exception_for_cli(e, verbose=verbose)}")
        _safe_log(logger, "debug", traceback.format_exc())
        rc = 1

    return rc


if __name__ == "__main__":
    raise SystemExit(main())
