# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Console logging via rich, plus an optional JSONL file of probe events."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "toolprobe"

# Extra record attributes carried by probe events.
EVENT_FIELDS: tuple[str, ...] = ("tool", "event", "exit_status", "error")

_console = Console(stderr=True)


class JsonlFormatter(logging.Formatter):
    """One JSON object per record; probe fields are null on plain records."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for name in EVENT_FIELDS:
            entry[name] = getattr(record, name, None)
        return json.dumps(entry, default=str)


class JsonlFileHandler(logging.FileHandler):
    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(str(path), mode="a", encoding="utf-8")
        self.setFormatter(JsonlFormatter())


def setup_logging(*, verbose: bool = False, jsonl_path: Path | None = None) -> logging.Logger:
    """Configure and return the toolprobe logger.

    The console only shows DEBUG records when verbose, so a quiet run leaves
    stderr to the install hints. The JSONL file, when given, gets every
    probe event regardless.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if verbose or jsonl_path is not None else logging.INFO)

    console_handler = RichHandler(
        console=_console,
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(console_handler)

    if jsonl_path is not None:
        logger.addHandler(JsonlFileHandler(jsonl_path))

    return logger


def log_probe_event(
    tool: str,
    event: str,
    *,
    exit_status: int | None = None,
    error: str | None = None,
) -> None:
    """Record one probe event at DEBUG level."""
    message = f"{tool}: {event}" if error is None else f"{tool}: {event} ({error})"
    logging.getLogger(LOGGER_NAME).debug(
        message,
        extra={"tool": tool, "event": event, "exit_status": exit_status, "error": error},
    )
