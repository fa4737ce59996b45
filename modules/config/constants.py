"""Centralized constants used across the application.

Defines default model identifiers, the fixed probe prompts, and the sample
image sent by the vision probe.
"""

from __future__ import annotations

# Environment variable holding the Gemini API key (overridable in probe_config.yaml)
API_KEY_ENV_VAR = "API_KEY"

# Model used by every probe unless the caller passes another one
DEFAULT_MODEL_ID = "gemini-2.5-flash"

# Generation models typically do not serve embedContent
DEFAULT_EMBEDDING_MODEL_ID = "text-embedding-004"

# Probe prompts
CONNECTIVITY_PROMPT = "ping"
TEXT_GENERATION_PROMPT = "Reply with a single word: 'Works'"
STREAMING_PROMPT = "Write the numbers from 1 to 5 separated by commas."
TOKEN_COUNT_PROMPT = "Why is the sky blue?"
VISION_PROMPT = "Describe this image in 5 words or fewer. (It is a red pixel)"
SYSTEM_INSTRUCTION = "You are a cat. Reply only with 'Miau'."
SYSTEM_INSTRUCTION_PROMPT = "Hello, how are you?"
SYSTEM_INSTRUCTION_KEYWORD = "miau"
EMBEDDING_TEXT = "Embedding test"

# 1x1 red pixel PNG for the vision probe
SAMPLE_IMAGE_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)
SAMPLE_IMAGE_MIME_TYPE = "image/png"
