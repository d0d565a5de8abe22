# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""User-facing probe messages."""

from __future__ import annotations

import click

from toolprobe.core.models import OverallResult, ProbeResult
from toolprobe.utils.platform import resolve_hint


def installed_message(result: ProbeResult) -> str:
    return f"{result.tool.name} CLI is installed."


def missing_message(result: ProbeResult, platform_id: str) -> list[str]:
    """Header line plus one install hint for the given platform."""
    return [
        f"{result.tool.label} is not installed. Please install it before proceeding:",
        resolve_hint(result.tool, platform_id),
    ]


def report_result(result: ProbeResult, platform_id: str) -> None:
    """Confirm a present tool on stdout, or print install help on stderr."""
    if result.present:
        click.echo(installed_message(result))
        return
    for line in missing_message(result, platform_id):
        click.echo(line, err=True)


def report_overall(overall: OverallResult, platform_id: str) -> None:
    for result in overall.results:
        report_result(result, platform_id)
