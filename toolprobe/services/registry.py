# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""The fixed set of external tools toolprobe checks for."""

from __future__ import annotations

from toolprobe.core.models import ToolDescriptor

ZSTD = ToolDescriptor(
    name="Zstd",
    description="Zstd CLI",
    probe_command=("zstd", "--version"),
    hints={
        "macOS": "For macOS: brew install zstd",
        "linux": "For Linux: sudo apt-get install zstd",
        "windows": (
            "For Windows: choco install zstandard or download from "
            "https://github.com/facebook/zstd/releases"
        ),
        "other": (
            "Unsupported OS. Please refer to the Zstandard documentation "
            "for installation instructions."
        ),
    },
)

CWEBP = ToolDescriptor(
    name="cwebp",
    description="cwebp (WebP encoder)",
    probe_command=("cwebp", "-version"),
    hints={
        "macOS": "For macOS: brew install webp",
        "linux": "For Linux: sudo apt-get install webp",
        "windows": (
            "For Windows: choco install webp or download from "
            "https://developers.google.com/speed/webp/download"
        ),
        "other": (
            "Unsupported OS. Please refer to the WebP documentation "
            "for installation instructions."
        ),
    },
)

FFMPEG = ToolDescriptor(
    name="FFmpeg",
    probe_command=("ffmpeg", "-version"),
    hints={
        "macOS": "For macOS: brew install ffmpeg",
        "linux": "For Linux: sudo apt-get install ffmpeg",
        "windows": (
            "For Windows: choco install ffmpeg or download from "
            "https://ffmpeg.org/download.html"
        ),
        "other": (
            "Unsupported OS. Please refer to the FFmpeg documentation "
            "for installation instructions."
        ),
    },
)

DEFAULT_TOOLS: tuple[ToolDescriptor, ...] = (ZSTD, CWEBP, FFMPEG)
