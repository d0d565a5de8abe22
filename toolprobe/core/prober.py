"""Dependency prober: check every registered tool and aggregate the outcome."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from toolprobe.core.logging import LOGGER_NAME, log_probe_event
from toolprobe.core.models import OverallResult, ProbeOutcome, ProbeResult, ToolDescriptor
from toolprobe.core.options import ProbeOptions
from toolprobe.core.reporter import report_overall
from toolprobe.services.registry import DEFAULT_TOOLS
from toolprobe.utils.launcher import Launcher, SubprocessLauncher
from toolprobe.utils.platform import PlatformDetector, detect_platform

logger = logging.getLogger(LOGGER_NAME)


class DependencyProber:
    """Probes a fixed set of tools and reports which ones are missing.

    The launcher and platform detector are injectable so the prober can be
    exercised without the real tools installed. Each run is independent;
    no state is carried between calls to check_all().
    """

    def __init__(
        self,
        tools: Sequence[ToolDescriptor] | None = None,
        launcher: Launcher | None = None,
        platform: PlatformDetector | None = None,
        options: ProbeOptions | None = None,
    ) -> None:
        self.options = options if options is not None else ProbeOptions()
        self.tools = tuple(DEFAULT_TOOLS if tools is None else tools)
        self.launcher = launcher or SubprocessLauncher(timeout=self.options.timeout)
        self.platform = platform or detect_platform

    def probe(self, tool: ToolDescriptor) -> ProbeResult:
        """Run one probe command without printing anything.

        Every failure shape (missing executable, non-zero exit, timeout,
        launcher error) counts as absent.
        """
        try:
            status = self.launcher(tool.probe_command)
        except Exception as exc:
            log_probe_event(tool.name, "probe_error", error=str(exc))
            status = None

        outcome = ProbeOutcome.PRESENT if status == 0 else ProbeOutcome.ABSENT
        log_probe_event(tool.name, f"probe_{outcome.value}", exit_status=status)
        return ProbeResult(tool=tool, outcome=outcome, exit_status=status)

    def check_all(self) -> OverallResult:
        """Probe every tool, print the per-tool messages, return the aggregate.

        All probes finish before anything is printed, so one missing tool
        never hides another.
        """
        results = self._run_probes()
        overall = OverallResult(results=results)

        platform_id = self.platform()
        logger.debug("Reporting for platform %s", platform_id)
        report_overall(overall, platform_id)

        if overall.missing:
            logger.debug("Missing tools: %s", ", ".join(overall.missing))
        return overall

    def _run_probes(self) -> list[ProbeResult]:
        """Probe every tool, with or without an event loop already running."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self._probe_all())

        # Called from async code; asyncio.run() is not allowed here.
        with ThreadPoolExecutor(max_workers=self.options.workers) as pool:
            return list(pool.map(self.probe, self.tools))

    async def _probe_all(self) -> list[ProbeResult]:
        """Run the blocking probes in the default executor, bounded by workers."""
        semaphore = asyncio.Semaphore(self.options.workers)
        loop = asyncio.get_running_loop()

        async def _worker(tool: ToolDescriptor) -> ProbeResult:
            async with semaphore:
                return await loop.run_in_executor(None, self.probe, tool)

        tasks = [asyncio.create_task(_worker(tool)) for tool in self.tools]
        return list(await asyncio.gather(*tasks))
