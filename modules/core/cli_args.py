"""CLI argument parsing utilities for non-interactive script execution.

This module provides the argument parser for the probe runner when running in
CLI mode (interactive_mode: false in probe_config.yaml).
"""

from __future__ import annotations

import argparse

from modules.diagnostics.probes import PROBES


def create_run_probes_parser() -> argparse.ArgumentParser:
    """Create argument parser for run_probes.py in CLI mode.

    Returns:
        Configured ArgumentParser for probe runs
    """
    parser = argparse.ArgumentParser(
        description="Gemini API Probe Suite (CLI Mode)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every probe against the configured default model
  python main/run_probes.py

  # Run two probes against a specific model
  python main/run_probes.py --model gemini-2.5-pro --probe connect --probe vision

  # Run one at a time and print machine-readable results
  python main/run_probes.py --sequential --json
        """
    )

    parser.add_argument(
        "--model", "-m",
        type=str,
        default=None,
        help="Generation model to probe (default: models.default_model from probe_config.yaml)."
    )

    parser.add_argument(
        "--probe", "-p",
        action="append",
        choices=list(PROBES),
        dest="probes",
        help="Probe to run. Repeat to run several. Runs every probe when omitted."
    )

    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Run probes one after another instead of concurrently."
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of the text report."
    )

    return parser
