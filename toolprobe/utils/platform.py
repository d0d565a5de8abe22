# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Host platform detection and hint lookup."""

from __future__ import annotations

import sys
from typing import Callable

from toolprobe.core.models import ToolDescriptor

PlatformDetector = Callable[[], str]

FALLBACK_PLATFORM = "other"


def detect_platform(sys_platform: str | None = None) -> str:
    """Map ``sys.platform`` to one of macOS, linux, windows, other."""
    value = sys.platform if sys_platform is None else sys_platform
    if value == "darwin":
        return "macOS"
    if value.startswith("linux"):
        return "linux"
    if value in ("win32", "cygwin"):
        return "windows"
    return FALLBACK_PLATFORM


def resolve_hint(tool: ToolDescriptor, platform_id: str) -> str:
    """Return the install hint for platform_id, or the generic one if unknown."""
    return tool.hints.get(platform_id) or tool.hints[FALLBACK_PLATFORM]
