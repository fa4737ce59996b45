"""Probe result records.

``TestResult`` is the uniform outcome of every probe. Its ``data`` field holds
one of the probe-specific dataclasses below, so each probe has a fixed data
shape instead of a free-form dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from modules.diagnostics.errors import FailureKind


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class ProbeData:
    """Base class for probe-specific diagnostic payloads."""

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload with camelCase keys (``full_text`` -> ``fullText``)."""
        return {_camel_case(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ConnectivityData(ProbeData):
    reply: str


@dataclass(frozen=True)
class TextGenerationData(ProbeData):
    model: str
    prompt: str
    output: str


@dataclass(frozen=True)
class StreamingData(ProbeData):
    model: str
    full_text: str
    chunk_count: int


@dataclass(frozen=True)
class TokenCountData(ProbeData):
    model: str
    prompt: str
    total_tokens: Optional[int]


@dataclass(frozen=True)
class VisionData(ProbeData):
    model: str
    output: str


@dataclass(frozen=True)
class SystemInstructionData(ProbeData):
    model: str
    instruction: str
    prompt: str
    output: str


@dataclass(frozen=True)
class EmbeddingData(ProbeData):
    model: str
    vector_length: int


@dataclass(frozen=True)
class TestResult:
    """Outcome of one probe invocation.

    ``failure`` is None exactly when ``success`` is True.
    """

    __test__ = False  # not a pytest test class

    success: bool
    message: str
    data: Optional[ProbeData] = None
    failure: Optional[FailureKind] = None

    @classmethod
    def ok(cls, message: str, data: Optional[ProbeData] = None) -> TestResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        failure: FailureKind,
        data: Optional[ProbeData] = None,
    ) -> TestResult:
        return cls(success=False, message=message, data=data, failure=failure)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; absent fields are omitted."""
        out: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            out["data"] = self.data.to_dict()
        if self.failure is not None:
            out["failure"] = self.failure.value
        return out
