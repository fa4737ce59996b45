"""Gemini API capability probes.

Each probe is an independent coroutine that acquires its own client, exercises
one API capability, and returns a ``TestResult``. Probes never raise: every
error is converted into a ``success=False`` result at the probe boundary.
"""

from __future__ import annotations

import base64
from contextlib import aclosing
from typing import Any, Awaitable, Callable, Dict, List, Optional

from google.genai import types

from modules.config.constants import (
    CONNECTIVITY_PROMPT,
    DEFAULT_EMBEDDING_MODEL_ID,
    DEFAULT_MODEL_ID,
    EMBEDDING_TEXT,
    SAMPLE_IMAGE_BASE64,
    SAMPLE_IMAGE_MIME_TYPE,
    STREAMING_PROMPT,
    SYSTEM_INSTRUCTION,
    SYSTEM_INSTRUCTION_KEYWORD,
    SYSTEM_INSTRUCTION_PROMPT,
    TEXT_GENERATION_PROMPT,
    TOKEN_COUNT_PROMPT,
    VISION_PROMPT,
)
from modules.config.service import get_models_config
from modules.diagnostics.errors import (
    EmptyResponseError,
    FailureKind,
    MalformedResponseError,
    ProbeError,
    TransportError,
)
from modules.diagnostics.results import (
    ConnectivityData,
    EmbeddingData,
    StreamingData,
    SystemInstructionData,
    TestResult,
    TextGenerationData,
    TokenCountData,
    VisionData,
)
from modules.infra.logger import setup_logger
from modules.llm.client import ClientConfig, get_ai_client

logger = setup_logger(__name__)

ProbeFn = Callable[..., Awaitable[TestResult]]

# Probe that ignores the generation model and addresses the embedding model
EMBEDDING_PROBE = "embedding"


def _configured_model(key: str, default: str) -> str:
    try:
        return get_models_config().get(key) or default
    except (FileNotFoundError, ValueError):
        return default


def resolve_model_id(model_id: Optional[str] = None) -> str:
    """Return ``model_id`` or the configured default generation model."""
    if model_id:
        return model_id
    return _configured_model("default_model", DEFAULT_MODEL_ID)


def resolve_embedding_model_id(model_id: Optional[str] = None) -> str:
    """Return ``model_id`` or the configured embedding model."""
    if model_id:
        return model_id
    return _configured_model("embedding_model", DEFAULT_EMBEDDING_MODEL_ID)


def _response_text(response: Any) -> str:
    if response is None:
        return ""
    return response.text or ""


def _failure(probe: str, exc: Exception, fallback: str, prefix: str = "") -> TestResult:
    """Convert an exception caught at a probe boundary into a failed result."""
    if not isinstance(exc, ProbeError):
        exc = TransportError.wrap(exc)
    error = str(exc) or fallback
    logger.error("Probe %s failed (%s): %s", probe, exc.kind.value, error)
    return TestResult.fail(f"{prefix}{error}", exc.kind)


async def connect(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Auth and connectivity check.

    Sends a minimal prompt; success requires a non-empty reply.
    """
    try:
        model = resolve_model_id(model_id)
        logger.info("Running connectivity probe against %s", model)
        client = get_ai_client(client_config)
        response = await client.aio.models.generate_content(
            model=model,
            contents=CONNECTIVITY_PROMPT,
        )
        text = _response_text(response)
        if not text:
            raise EmptyResponseError("Empty response from the server.")
        return TestResult.ok(f"Connected to {model}.", ConnectivityData(reply=text))
    except Exception as e:
        return _failure("connect", e, fallback="Connection error")


async def generate_text(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Single-turn text generation. Empty output still counts as success."""
    try:
        model = resolve_model_id(model_id)
        logger.info("Running text generation probe against %s", model)
        client = get_ai_client(client_config)
        response = await client.aio.models.generate_content(
            model=model,
            contents=TEXT_GENERATION_PROMPT,
        )
        return TestResult.ok(
            "Text generation succeeded.",
            TextGenerationData(
                model=model,
                prompt=TEXT_GENERATION_PROMPT,
                output=_response_text(response),
            ),
        )
    except Exception as e:
        return _failure("generate_text", e, fallback="Text generation failed")


async def stream_text(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Streaming generation.

    Fragments are concatenated in arrival order. An error partway through the
    stream fails the whole probe and the partial text is dropped.
    """
    try:
        model = resolve_model_id(model_id)
        logger.info("Running streaming probe against %s", model)
        client = get_ai_client(client_config)
        stream = await client.aio.models.generate_content_stream(
            model=model,
            contents=STREAMING_PROMPT,
        )
        fragments: List[str] = []
        async with aclosing(stream) as chunks:
            async for chunk in chunks:
                fragments.append(_response_text(chunk))

        chunk_count = len(fragments)
        return TestResult.ok(
            f"Streaming completed in {chunk_count} fragments.",
            StreamingData(model=model, full_text="".join(fragments), chunk_count=chunk_count),
        )
    except Exception as e:
        return _failure("stream_text", e, fallback="Streaming failed")


async def count_tokens(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Token counting endpoint. The reported count is not sanity-checked."""
    try:
        model = resolve_model_id(model_id)
        logger.info("Running token count probe against %s", model)
        client = get_ai_client(client_config)
        response = await client.aio.models.count_tokens(
            model=model,
            contents=TOKEN_COUNT_PROMPT,
        )
        return TestResult.ok(
            "Token count succeeded.",
            TokenCountData(
                model=model,
                prompt=TOKEN_COUNT_PROMPT,
                total_tokens=response.total_tokens,
            ),
        )
    except Exception as e:
        return _failure("count_tokens", e, fallback="Token count failed")


async def vision(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Multimodal input: one inline PNG plus a text instruction."""
    model = model_id or DEFAULT_MODEL_ID
    try:
        model = resolve_model_id(model_id)
        logger.info("Running vision probe against %s", model)
        client = get_ai_client(client_config)
        contents = types.Content(
            role="user",
            parts=[
                types.Part.from_bytes(
                    data=base64.b64decode(SAMPLE_IMAGE_BASE64),
                    mime_type=SAMPLE_IMAGE_MIME_TYPE,
                ),
                types.Part.from_text(text=VISION_PROMPT),
            ],
        )
        response = await client.aio.models.generate_content(model=model, contents=contents)
        return TestResult.ok(
            "Vision analysis completed.",
            VisionData(model=model, output=_response_text(response)),
        )
    except Exception as e:
        # Include the model so callers can tell which variant lacks image input.
        return _failure(
            "vision",
            e,
            fallback="Vision request failed",
            prefix=f"Vision probe failed ({model}): ",
        )


async def system_instruction(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """System instruction compliance.

    The only probe where a successful call can still fail: the output must
    contain the mandated keyword (case-insensitive substring match).
    """
    try:
        model = resolve_model_id(model_id)
        logger.info("Running system instruction probe against %s", model)
        client = get_ai_client(client_config)
        response = await client.aio.models.generate_content(
            model=model,
            contents=SYSTEM_INSTRUCTION_PROMPT,
            config=types.GenerateContentConfig(system_instruction=SYSTEM_INSTRUCTION),
        )
        text = _response_text(response)
        data = SystemInstructionData(
            model=model,
            instruction=SYSTEM_INSTRUCTION,
            prompt=SYSTEM_INSTRUCTION_PROMPT,
            output=text,
        )
    except Exception as e:
        return _failure("system_instruction", e, fallback="System instruction request failed")

    if SYSTEM_INSTRUCTION_KEYWORD in text.lower():
        return TestResult.ok("System instruction respected.", data)

    logger.warning("Model %s ignored the system instruction; output: %r", model, text)
    return TestResult.fail(
        "The model did not follow the system instruction strictly.",
        FailureKind.CONTENT_VALIDATION,
        data,
    )


def _embedding_values(response: Any) -> Optional[List[float]]:
    """Extract the first embedding vector, or None when the response lacks one.

    The SDK returns ``embeddings`` (a list); the REST ``embedContent`` shape
    carries a single ``embedding``.
    """
    if response is None:
        return None
    embeddings = getattr(response, "embeddings", None)
    if embeddings:
        return getattr(embeddings[0], "values", None)
    embedding = getattr(response, "embedding", None)
    if embedding is not None:
        return getattr(embedding, "values", None)
    return None


async def embedding(
    model_id: Optional[str] = None,
    *,
    client_config: Optional[ClientConfig] = None,
) -> TestResult:
    """Embedding generation with the dedicated embedding model.

    ``model_id`` overrides the embedding model, not the generation model.
    """
    try:
        model = resolve_embedding_model_id(model_id)
        logger.info("Running embedding probe against %s", model)
        client = get_ai_client(client_config)
        response = await client.aio.models.embed_content(
            model=model,
            contents=EMBEDDING_TEXT,
        )
        values = _embedding_values(response)
        if values is None:
            logger.warning("Embedding response missing values: %r", response)
            raise MalformedResponseError(
                "The response contains no embedding values. Check the logs for details."
            )
        return TestResult.ok(
            "Embedding generated successfully.",
            EmbeddingData(model=model, vector_length=len(values)),
        )
    except Exception as e:
        return _failure("embedding", e, fallback="Embedding request failed")


PROBES: Dict[str, ProbeFn] = {
    "connect": connect,
    "generate_text": generate_text,
    "stream_text": stream_text,
    "count_tokens": count_tokens,
    "vision": vision,
    "system_instruction": system_instruction,
    EMBEDDING_PROBE: embedding,
}

PROBE_DESCRIPTIONS: Dict[str, str] = {
    "connect": "Auth & connection",
    "generate_text": "Text generation",
    "stream_text": "Streaming",
    "count_tokens": "Token count",
    "vision": "Vision (multimodal)",
    "system_instruction": "System instruction",
    EMBEDDING_PROBE: "Embedding",
}
