"""Failure taxonomy for the probe suite.

Every probe converts these into a ``success=False`` result; none of them
escapes a probe. Content-validation failures (a call that succeeded but
whose output fails a semantic check) are reported through
``FailureKind.CONTENT_VALIDATION`` and never raised.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Why a probe reported ``success=False``."""
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    CONTENT_VALIDATION = "content_validation"
    MALFORMED_RESPONSE = "malformed_response"


class ProbeError(Exception):
    """Base class for errors raised inside a probe."""
    kind: FailureKind = FailureKind.TRANSPORT


class ConfigurationError(ProbeError):
    """The API credential is missing."""
    kind = FailureKind.CONFIGURATION


class TransportError(ProbeError):
    """The underlying API call failed (network, auth, quota, unknown model...)."""
    kind = FailureKind.TRANSPORT

    @classmethod
    def wrap(cls, exc: BaseException) -> TransportError:
        """Wrap a client-library error, keeping its message verbatim."""
        error = cls(str(exc))
        error.__cause__ = exc
        return error


class EmptyResponseError(ProbeError):
    """The call succeeded but produced no usable text."""
    kind = FailureKind.EMPTY_RESPONSE


class MalformedResponseError(ProbeError):
    """The call succeeded but the response lacks an expected field."""
    kind = FailureKind.MALFORMED_RESPONSE
