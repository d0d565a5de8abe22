# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Child-process launching for probe commands."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

logger = logging.getLogger("toolprobe")

DEFAULT_TIMEOUT_SEC = 5.0


class Launcher(Protocol):
    """Runs a command and returns its exit status, or None if it never ran."""

    def __call__(self, command: Sequence[str]) -> int | None: ...


class SubprocessLauncher:
    """Launcher backed by subprocess.run; output is discarded."""

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT_SEC) -> None:
        self.timeout = timeout

    def __call__(self, command: Sequence[str]) -> int | None:
        cmd = list(command)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug("%s timed out after %s seconds", cmd[0], self.timeout)
            return None
        except OSError as exc:
            # FileNotFoundError, PermissionError and spawn failures
            logger.debug("Could not launch %s: %s", cmd[0], exc)
            return None
        return result.returncode
