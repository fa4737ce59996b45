"""Console output and prompting utilities for the probe runner.

This module keeps user interaction separate from logging, with consistent
visual formatting and quit navigation in interactive prompts.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

import colorama

from modules.diagnostics.results import TestResult
from modules.infra.logger import setup_logger

colorama.just_fix_windows_console()

logger = setup_logger(__name__)


class NavigationAction(Enum):
    """User navigation choices in interactive prompts."""
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass
class PromptResult:
    """Result from a prompt with navigation support."""
    action: NavigationAction
    value: Any = None


class PromptStyle:
    """Visual styling constants for consistent UI."""

    # ASCII-safe for Windows compatibility
    DOUBLE_LINE = "="
    SINGLE_LINE = "-"
    LIGHT_LINE = "."

    HEADER = "\033[1;36m"      # Cyan bold (headers, titles)
    INFO = "\033[0;36m"        # Cyan (informational messages)
    SUCCESS = "\033[1;32m"     # Green bold (success messages)
    WARNING = "\033[1;33m"     # Yellow bold (warnings)
    ERROR = "\033[1;31m"       # Red bold (errors)
    PROMPT = "\033[1;37m"      # White bold (user prompts)
    DIM = "\033[2;37m"         # Dimmed white (secondary text)
    RESET = "\033[0m"

    @staticmethod
    def supports_color() -> bool:
        """Colors are only emitted to a terminal."""
        return sys.stdout.isatty()

    @classmethod
    def colorize(cls, text: str, color: str) -> str:
        """Apply color to text if terminal supports it."""
        if cls.supports_color():
            return f"{color}{text}{cls.RESET}"
        return text


def ui_print(message: str, style: str = "", end: str = "\n") -> None:
    """Print a UI message (distinct from logging).

    Args:
        message: The message to display
        style: Optional style/color code
        end: String appended after the message (default: newline)
    """
    try:
        if style and PromptStyle.supports_color():
            print(f"{style}{message}{PromptStyle.RESET}", end=end, flush=True)
        else:
            print(message, end=end, flush=True)
    except UnicodeEncodeError:
        # Fallback to ASCII if encoding fails
        safe_message = message.encode("ascii", "replace").decode("ascii")
        print(safe_message, end=end, flush=True)


def ui_input(prompt: str, style: str = PromptStyle.PROMPT) -> str:
    """Get user input with consistent styling.

    Returns:
        User input stripped of whitespace
    """
    styled_prompt = PromptStyle.colorize(prompt, style) if style else prompt
    try:
        return input(styled_prompt).strip()
    except (EOFError, KeyboardInterrupt):
        ui_print("\n[INFO] Operation cancelled by user.", PromptStyle.INFO)
        sys.exit(0)


def print_header(title: str, subtitle: str = "") -> None:
    """Print a formatted header for a section."""
    width = 80
    ui_print("\n" + PromptStyle.DOUBLE_LINE * width, PromptStyle.HEADER)
    ui_print(f"  {title}", PromptStyle.HEADER)
    if subtitle:
        ui_print(f"  {subtitle}", PromptStyle.INFO)
    ui_print(PromptStyle.DOUBLE_LINE * width, PromptStyle.HEADER)
    ui_print("")


def print_separator(char: str = PromptStyle.SINGLE_LINE, width: int = 80) -> None:
    """Print a separator line."""
    ui_print(char * width, PromptStyle.DIM)


def print_info(message: str, prefix: str = "[INFO]") -> None:
    """Print an informational message."""
    ui_print(f"{prefix} {message}", PromptStyle.INFO)


def print_success(message: str, prefix: str = "[SUCCESS]") -> None:
    """Print a success message."""
    ui_print(f"{prefix} {message}", PromptStyle.SUCCESS)


def print_warning(message: str, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    ui_print(f"{prefix} {message}", PromptStyle.WARNING)


def print_error(message: str, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    ui_print(f"{prefix} {message}", PromptStyle.ERROR)


def prompt_select(question: str, options: List[Tuple[str, str]]) -> PromptResult:
    """Prompt user to select from a list of options.

    Args:
        question: The question to ask
        options: List of (value, description) tuples

    Returns:
        PromptResult with the selected value, or QUIT when the user typed 'q'
    """
    ui_print(f"\n{question}", PromptStyle.PROMPT)
    print_separator()

    for idx, (_, description) in enumerate(options, 1):
        ui_print(f"  {idx}. {description}")
    ui_print(f"  {PromptStyle.LIGHT_LINE * 3} 'q' to quit", PromptStyle.DIM)

    while True:
        choice = ui_input("\nEnter your choice: ")

        if choice.lower() in ("q", "quit", "exit"):
            print_info("Exiting as requested.")
            return PromptResult(NavigationAction.QUIT)

        if choice.isdigit():
            idx = int(choice)
            if 1 <= idx <= len(options):
                return PromptResult(NavigationAction.CONTINUE, options[idx - 1][0])

        logger.info("Invalid selection %r for prompt: %s", choice, question)
        print_error("Invalid selection. Please try again.")


def display_probe_results(results: Dict[str, TestResult], labels: Dict[str, str]) -> None:
    """Print one colored line per probe, followed by its data fields."""
    for name, result in results.items():
        label = labels.get(name, name)
        if result.success:
            print_success(f"{label}: {result.message}", prefix="[PASS]")
        else:
            print_error(f"{label}: {result.message}", prefix="[FAIL]")
        if result.data is not None:
            for key, value in result.data.to_dict().items():
                ui_print(f"    {key}: {value}", PromptStyle.DIM)
