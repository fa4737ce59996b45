# modules/ui/__init__.py
"""User interface components for the probe runner.

Provides:
- Styled print utilities
- Selection prompt with quit navigation
- Probe result display
"""

from .prompts import (
    NavigationAction,
    PromptResult,
    PromptStyle,
    ui_print,
    ui_input,
    print_header,
    print_separator,
    print_info,
    print_success,
    print_warning,
    print_error,
    prompt_select,
    display_probe_results,
)

__all__ = [
    # Navigation
    "NavigationAction",
    "PromptResult",
    "PromptStyle",
    # Print utilities
    "ui_print",
    "ui_input",
    "print_header",
    "print_separator",
    "print_info",
    "print_success",
    "print_warning",
    "print_error",
    # Prompt functions
    "prompt_select",
    # Result display
    "display_probe_results",
]
