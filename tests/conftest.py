"""Pytest configuration and shared fixtures for the probe suite tests.

This module provides reusable fixtures for:
- Configuration management
- Environment credentials
- Stubbed google-genai clients and streams
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Generator, Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
import sys
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def mock_probe_config() -> Dict[str, Any]:
    """Provide a probe configuration dictionary."""
    return {
        "general": {
            "interactive_mode": False,
            "logs_dir": "logs",
        },
        "models": {
            "default_model": "gemini-2.5-flash",
            "embedding_model": "text-embedding-004",
        },
        "client": {
            "api_key_env_var": "API_KEY",
        },
    }


@pytest.fixture
def reset_config_service():
    """Reset the ConfigService singleton around a test."""
    from modules.config.service import ConfigService

    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after test."""
    temp_path = Path(tempfile.mkdtemp(prefix="probetest_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def use_config_file(temp_dir, reset_config_service):
    """Point the default config path at a file holding the given YAML text.

    Usage: ``use_config_file("models: gemini-2.5-flash\\n")`` returns the path.
    """
    patchers = []

    def _apply(content: str) -> Path:
        path = temp_dir / "probe_config.yaml"
        path.write_text(content, encoding="utf-8")
        patcher = patch("modules.config.config_loader.DEFAULT_CONFIG_PATH", path)
        patchers.append(patcher)
        patcher.start()
        return path

    yield _apply
    for patcher in patchers:
        patcher.stop()


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def mock_env_no_api_keys():
    """Mock environment with no API key set."""
    env_copy = os.environ.copy()
    for key in ["API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY"]:
        env_copy.pop(key, None)
    with patch.dict(os.environ, env_copy, clear=True):
        yield


@pytest.fixture
def mock_env_with_api_key():
    """Mock environment with the Gemini API key set."""
    with patch.dict(os.environ, {"API_KEY": "test-gemini-key-12345"}):
        yield


# =============================================================================
# Mock API Client Fixtures
# =============================================================================

class FakeStream:
    """Async iterator standing in for generate_content_stream output.

    Yields one response per fragment; raises ``error`` after ``fail_after``
    fragments when given. Records whether it was closed.
    """

    def __init__(
        self,
        fragments: Iterable[Optional[str]],
        error: Optional[Exception] = None,
        fail_after: int = 0,
    ):
        self._fragments: List[Optional[str]] = list(fragments)
        self._error = error
        self._fail_after = fail_after
        self._index = 0
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._error is not None and self._index == self._fail_after:
            raise self._error
        if self._index >= len(self._fragments):
            raise StopAsyncIteration
        fragment = self._fragments[self._index]
        self._index += 1
        return SimpleNamespace(text=fragment)

    async def aclose(self):
        self.closed = True


def make_fake_client(
    *,
    text: Optional[str] = "ok",
    fragments: Iterable[Optional[str]] = (),
    total_tokens: Optional[int] = 7,
    embed_response: Any = None,
    error: Optional[Exception] = None,
) -> MagicMock:
    """Build a MagicMock shaped like google.genai.Client's async surface."""
    client = MagicMock()
    models = client.aio.models
    fragment_list = list(fragments)

    if error is not None:
        models.generate_content = AsyncMock(side_effect=error)
        models.generate_content_stream = AsyncMock(side_effect=error)
        models.count_tokens = AsyncMock(side_effect=error)
        models.embed_content = AsyncMock(side_effect=error)
        return client

    models.generate_content = AsyncMock(return_value=SimpleNamespace(text=text))
    models.generate_content_stream = AsyncMock(
        side_effect=lambda **kwargs: FakeStream(fragment_list)
    )
    models.count_tokens = AsyncMock(return_value=SimpleNamespace(total_tokens=total_tokens))
    models.embed_content = AsyncMock(return_value=embed_response)
    return client


def embedding_response(length: int) -> SimpleNamespace:
    """Embed response in the SDK shape: a list of embeddings with values."""
    return SimpleNamespace(embeddings=[SimpleNamespace(values=[0.1] * length)])


@pytest.fixture
def fake_client_factory():
    """Expose make_fake_client to tests."""
    return make_fake_client


@pytest.fixture
def fake_stream_cls():
    """Expose FakeStream to tests."""
    return FakeStream


@pytest.fixture
def make_embedding_response():
    """Expose embedding_response to tests."""
    return embedding_response


@pytest.fixture
def patch_client():
    """Patch client acquisition in the probes module.

    Usage: ``patch_client(client)`` returns the patcher mock.
    """
    patchers = []

    def _apply(client: Any):
        patcher = patch("modules.diagnostics.probes.get_ai_client", return_value=client)
        patchers.append(patcher)
        return patcher.start()

    yield _apply
    for patcher in patchers:
        patcher.stop()


# =============================================================================
# Skip Markers
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "api: Tests requiring API keys")
