"""toolprobe — check that the external CLI tools this project relies on are installed."""

__version__ = "0.1.0"

from toolprobe.core.models import OverallResult, ProbeOutcome, ProbeResult, ToolDescriptor
from toolprobe.core.options import ProbeOptions


def check_all(options: ProbeOptions | None = None) -> OverallResult:
    """Probe every registered tool and report the outcome.

    This is the primary library entry point. Confirmations go to stdout,
    install hints for missing tools go to stderr.

    Args:
        options: Configuration options. Uses defaults if not provided.

    Returns:
        OverallResult with one ProbeResult per tool and the missing names.
    """
    from toolprobe.core.prober import DependencyProber

    if options is None:
        options = ProbeOptions()

    return DependencyProber(options=options).check_all()


__all__ = [
    "__version__",
    "check_all",
    "ProbeOptions",
    "OverallResult",
    "ProbeOutcome",
    "ProbeResult",
    "ToolDescriptor",
]
