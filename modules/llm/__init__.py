"""Language model integration package.

Provides Gemini client acquisition through google-genai.

Note: Imports are lazy so that importing the package does not pull in the SDK.
"""


def __getattr__(name: str):
    """Lazy import to avoid loading google-genai on package import."""
    if name in ("ClientConfig", "get_ai_client"):
        from modules.llm.client import ClientConfig, get_ai_client
        return {
            "ClientConfig": ClientConfig,
            "get_ai_client": get_ai_client,
        }[name]

    raise AttributeError(f"module 'modules.llm' has no attribute '{name}'")

__all__ = [
    "ClientConfig",
    "get_ai_client",
]
