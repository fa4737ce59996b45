"""Infrastructure utilities package.

Provides logging configuration.
"""

# Avoid circular imports - use direct imports instead of re-exporting
__all__ = [
    "setup_logger",
]
