"""Core utilities package.

Provides CLI argument parsing and the dual-mode script execution framework.

Submodules:
- cli_args: CLI argument parser (create_run_probes_parser)
- execution_framework: AsyncDualModeScript base class

Note: To avoid circular imports, use direct imports from submodules:
    from modules.core.cli_args import create_run_probes_parser
    from modules.core.execution_framework import AsyncDualModeScript
"""
