"""
kernelwire Protocol Layer
=========================

This package defines the transport-agnostic half of the kernel messaging
protocol: the structured message, its serialization to the signed frames,
and the construction of replies.

The protocol layer MUST NOT depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Application Code
    │
    ▼
Message Builder (builder.py)
    Construction of outgoing messages
    - new_message(): reply correlated to a parent
    - new_root(): message with no parent
    - Generates fresh message ids

    │
    ▼
Message Model (message.py)
    - MessageHeader
    - ComposedMessage
    Defines semantic meaning only

    │
    ▼
Codec (wire.py) and Signer (signature.py)
    ComposedMessage <-> [signature, header, parent_header, metadata, content]
    HMAC over the four serialized frames

    │
    ▼
Field Vocabulary (fields.py), Errors (errors.py)
    Canonical names and the error taxonomy

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Framing (transport/zmq/framing.py)
    Routing identities + delimiter + signed frames

Session (transport/session.py)
    Receipt of requests, dispatch of replies

Transport
    Moves multipart messages (pyzmq sockets)

---------------------------------------------------------------------
"""

from . import fields
from . import errors
from . import message
from . import signature
from . import wire
from . import builder

from .errors import (
    ProtocolError,
    MalformedFrames,
    InvalidSignature,
    DecodeError,
    EncodeError,
    IdentityGenerationError,
    ConfigurationError,
)
from .message import ComposedMessage, MessageHeader
from .signature import SignatureEngine
from .builder import new_message, new_root

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
