"""Diagnostics package.

Provides the Gemini API capability probes, their result records, and the
suite runner.

Note: Imports are lazy to avoid circular imports with the client module,
which imports the error taxonomy from this package.
"""


def __getattr__(name: str):
    """Lazy import of the public probe API."""
    if name in ("PROBES", "PROBE_DESCRIPTIONS"):
        from modules.diagnostics import probes
        return getattr(probes, name)

    if name in ("TestResult", "FailureKind"):
        from modules.diagnostics.errors import FailureKind
        from modules.diagnostics.results import TestResult
        return {"TestResult": TestResult, "FailureKind": FailureKind}[name]

    if name in ("run_probes", "format_probe_report"):
        from modules.diagnostics import runner
        return getattr(runner, name)

    raise AttributeError(f"module 'modules.diagnostics' has no attribute '{name}'")

__all__ = [
    "PROBES",
    "PROBE_DESCRIPTIONS",
    "TestResult",
    "FailureKind",
    "run_probes",
    "format_probe_report",
]
