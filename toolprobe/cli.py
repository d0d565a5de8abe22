# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CLI entry point for toolprobe."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from toolprobe import __version__
from toolprobe.core.logging import setup_logging
from toolprobe.core.options import ProbeOptions


# Exit codes
EXIT_OK = 0
EXIT_MISSING = 1


def _build_options(**cli_kwargs) -> ProbeOptions:
    """Build ProbeOptions from CLI kwargs, filtering out unset (None) values.

    Unset flags fall through to env vars → YAML → defaults.
    """
    overrides = {key: value for key, value in cli_kwargs.items() if value is not None}
    return ProbeOptions(**overrides)


@click.command()
@click.version_option(version=__version__, prog_name="toolprobe")
@click.option("--verbose", is_flag=True, default=None, help="Log each probe.")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Append JSONL logs to this file.")
@click.option("--timeout", type=float, default=None, help="Seconds to wait for each probe.")
def main(verbose, log_file, timeout) -> None:
    """Check that zstd, cwebp and ffmpeg are installed."""
    try:
        options = _build_options(verbose=verbose, log_file=log_file, timeout=timeout)
    except ValidationError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(verbose=options.verbose, jsonl_path=options.log_file)

    from toolprobe.core.prober import DependencyProber

    result = DependencyProber(options=options).check_all()
    sys.exit(EXIT_OK if result.all_present else EXIT_MISSING)


if __name__ == "__main__":
    main()
