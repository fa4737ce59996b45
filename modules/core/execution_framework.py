"""
Execution framework for dual-mode (Interactive/CLI) scripts.

Classes:
    AsyncDualModeScript: Base class for async scripts (uses asyncio.run)
"""

import asyncio
import sys
from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import Any, Dict, Optional

from modules.config.service import ConfigService, get_config_service
from modules.infra.logger import setup_logger
from modules.ui import print_error, print_info


class AsyncDualModeScript(ABC):
    """
    Base class for async scripts that support both interactive and CLI modes.

    This class handles:
    - Mode detection (interactive vs CLI)
    - Configuration loading
    - Logger setup
    - Common error handling
    - Async execution via asyncio.run()

    Subclasses must implement:
    - create_argument_parser(): Return configured ArgumentParser
    - run_interactive(): Execute async interactive workflow
    - run_cli(): Execute async CLI workflow

    Either run method may set ``exit_code``; a non-zero value is passed to
    sys.exit once the workflow finishes.
    """

    def __init__(self, script_name: str):
        """
        Initialize the async dual-mode script.

        Args:
            script_name: Name of the script for logging purposes
        """
        self.script_name = script_name
        self.logger = setup_logger(script_name)
        self.config_service: Optional[ConfigService] = None
        self.is_interactive: bool = False
        self.exit_code: int = 0

        # Configuration dictionaries (loaded on demand)
        self.general_config: Dict[str, Any] = {}
        self.models_config: Dict[str, Any] = {}
        self.client_config: Dict[str, Any] = {}

    def initialize_config(self) -> None:
        """Load all configuration resources."""
        self.config_service = get_config_service()
        self.general_config = self.config_service.get_general_config()
        self.models_config = self.config_service.get_models_config()
        self.client_config = self.config_service.get_client_config()

    @abstractmethod
    def create_argument_parser(self) -> ArgumentParser:
        """
        Create and configure the argument parser for CLI mode.
        """
        pass

    @abstractmethod
    async def run_interactive(self) -> None:
        """
        Execute the async interactive workflow with UI prompts.
        """
        pass

    @abstractmethod
    async def run_cli(self, args: Namespace) -> None:
        """
        Execute the async CLI workflow with parsed arguments.

        Args:
            args: Parsed command-line arguments
        """
        pass

    def execute(self) -> None:
        """
        Main entry point that orchestrates mode detection and async execution.

        This method wraps the async execution in asyncio.run().
        """
        asyncio.run(self._execute_async())
        if self.exit_code:
            sys.exit(self.exit_code)

    async def _execute_async(self) -> None:
        """
        Internal async execution handler.

        This method:
        1. Loads configuration
        2. Detects execution mode (interactive vs CLI)
        3. Calls the appropriate async run method
        4. Handles common error scenarios
        """
        try:
            self.initialize_config()

            self.is_interactive = bool(self.general_config.get("interactive_mode", False))

            if self.is_interactive:
                self.logger.info(f"Starting {self.script_name} (Interactive Mode)")
                await self.run_interactive()
            else:
                self.logger.info(f"Starting {self.script_name} (CLI Mode)")
                parser = self.create_argument_parser()
                args = parser.parse_args()
                await self.run_cli(args)

        except KeyboardInterrupt:
            self._handle_interrupt()
        except Exception as e:
            self._handle_error(e)

    def _handle_interrupt(self) -> None:
        """Handle keyboard interrupt gracefully."""
        print_info("\nOperation cancelled by user.")
        self.logger.info(f"{self.script_name} cancelled by user")
        sys.exit(0)

    def _handle_error(self, error: Exception) -> None:
        """
        Handle unexpected errors gracefully.

        Args:
            error: The exception that was raised
        """
        error_msg = f"Unexpected error: {error}"
        print_error(error_msg)
        self.logger.error(f"{self.script_name} failed", exc_info=error)
        sys.exit(1)
