"""Gemini probe suite modules package.

Provides:
- Configuration management
- Gemini client acquisition
- Capability probes and the suite runner
- Console user interface components
- Infrastructure utilities
"""

__version__ = "1.0.0"
