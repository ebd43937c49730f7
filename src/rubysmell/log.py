"""Logging setup for applications embedding rubysmell."""

from __future__ import annotations

import logging
import sys
from typing import Any

from rubysmell.config import load_config


def setup_logging(
    config: dict[str, Any] | None = None, verbose: bool = False, quiet: bool = False
) -> logging.Logger:
    """
    Configure the rubysmell logger: level from verbose/quiet or config, console handler,
    optional file handler from config. Returns the configured logger.
    """
    if config is None:
        config = load_config(None)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("rubysmell")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)
    return root
