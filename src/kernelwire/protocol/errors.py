"""Protocol error taxonomy.

Every failure in the codec is raised to the immediate caller as one of
these; none of them is fatal to the process.
"""

from __future__ import annotations

from typing import Optional


class ProtocolError(Exception):
    """Base class for all protocol-layer errors."""


class MalformedFrames(ProtocolError):
    """The delimiter is absent, or fewer than five frames follow it."""


class InvalidSignature(ProtocolError):
    """The signature on a received message does not validate."""

    def __init__(self, text: str = "a message had an invalid signature"):
        super().__init__(text)


class DecodeError(ProtocolError):
    """A signed-region frame failed deserialization."""

    def __init__(self, field: str, reason: Optional[str] = None):
        self.field = field
        text = f"could not decode {field}"
        if reason:
            text += f": {reason}"
        super().__init__(text)


class EncodeError(ProtocolError):
    """A message field failed serialization."""

    def __init__(self, field: str, reason: Optional[str] = None):
        self.field = field
        text = f"could not encode {field}"
        if reason:
            text += f": {reason}"
        super().__init__(text)


class IdentityGenerationError(ProtocolError):
    """A unique message id could not be generated."""


class ConfigurationError(ProtocolError):
    """The key configuration is unusable."""
