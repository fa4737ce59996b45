# run_probes.py
"""
Script to exercise the Gemini API capabilities: connectivity, text generation,
streaming, token counting, vision, system instructions, and embeddings.

Supports two modes:
1. Interactive mode: Pick a probe (or all) from a menu (interactive_mode: true)
2. CLI mode: Command-line arguments for automation (interactive_mode: false)

Exits with status 1 when any selected probe fails.
"""

from __future__ import annotations

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Dict, List, Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from modules.core.cli_args import create_run_probes_parser
from modules.core.execution_framework import AsyncDualModeScript
from modules.diagnostics.probes import PROBE_DESCRIPTIONS, PROBES, resolve_model_id
from modules.diagnostics.results import TestResult
from modules.diagnostics.runner import (
    format_probe_report,
    results_to_json,
    run_probes,
    summarize,
)
from modules.llm.client import ClientConfig
from modules.ui import (
    NavigationAction,
    display_probe_results,
    print_header,
    print_success,
    print_warning,
    prompt_select,
    ui_print,
)

ALL_PROBES = "all"


class RunProbesScript(AsyncDualModeScript):
    """Script to run the Gemini API probe suite."""

    def __init__(self):
        super().__init__("run_probes")

    def create_argument_parser(self) -> ArgumentParser:
        """Create argument parser for CLI mode."""
        return create_run_probes_parser()

    def _client_config(self) -> ClientConfig:
        return ClientConfig.from_env(env_var=self.client_config.get("api_key_env_var"))

    def _record_outcome(self, results: Dict[str, TestResult]) -> None:
        passed, total = summarize(results)
        self.logger.info(f"{passed}/{total} probes passed")
        self.exit_code = 0 if passed == total else 1

    async def run_interactive(self) -> None:
        """Let the user pick one probe or the whole suite."""
        model = resolve_model_id(self.models_config.get("default_model"))
        print_header("Gemini API Probe Suite", f"Model: {model}")

        options = [(ALL_PROBES, "Run all probes")]
        options.extend((name, PROBE_DESCRIPTIONS[name]) for name in PROBES)
        selection = prompt_select("Which probe do you want to run?", options)
        if selection.action == NavigationAction.QUIT:
            return

        names: Optional[List[str]] = None if selection.value == ALL_PROBES else [selection.value]
        results = await run_probes(names, model_id=model, client_config=self._client_config())

        ui_print("")
        display_probe_results(results, PROBE_DESCRIPTIONS)
        passed, total = summarize(results)
        if passed == total:
            print_success(f"All {total} probe(s) passed.")
        else:
            print_warning(f"{passed}/{total} probe(s) passed.")
        self._record_outcome(results)

    async def run_cli(self, args: Namespace) -> None:
        """Run the selected probes and print a report or JSON."""
        model = resolve_model_id(args.model)
        results = await run_probes(
            args.probes,
            model_id=model,
            client_config=self._client_config(),
            concurrent=not args.sequential,
        )

        if args.json:
            print(results_to_json(results))
        else:
            print(format_probe_report(results, model))
        self._record_outcome(results)


def main() -> None:
    """Main entry point."""
    RunProbesScript().execute()


if __name__ == "__main__":
    main()
