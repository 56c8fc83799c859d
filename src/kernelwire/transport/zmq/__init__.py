"""ZeroMQ-specific multipart framing."""

from . import framing
