# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pydantic data models for toolprobe."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

PLATFORMS: tuple[str, ...] = ("macOS", "linux", "windows", "other")


class ToolDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    probe_command: tuple[str, ...]
    hints: Mapping[str, str]

    @field_validator("probe_command")
    @classmethod
    def _command_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or not value[0]:
            raise ValueError("probe_command must name an executable")
        return value

    @field_validator("hints")
    @classmethod
    def _hints_cover_platforms(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        missing = [p for p in PLATFORMS if not value.get(p, "").strip()]
        if missing:
            raise ValueError(f"missing hints for: {', '.join(missing)}")
        return MappingProxyType(dict(value))

    @property
    def label(self) -> str:
        """Label used in the not-installed header."""
        return self.description or self.name


class ProbeOutcome(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class ProbeResult(BaseModel):
    tool: ToolDescriptor
    outcome: ProbeOutcome
    exit_status: int | None = None

    @property
    def present(self) -> bool:
        return self.outcome is ProbeOutcome.PRESENT


class OverallResult(BaseModel):
    results: list[ProbeResult]

    @property
    def missing(self) -> list[str]:
        """Names of absent tools, in probe order."""
        return [r.tool.name for r in self.results if not r.present]

    @property
    def all_present(self) -> bool:
        return not self.missing

    @property
    def exit_code(self) -> int:
        return 0 if self.all_present else 1
