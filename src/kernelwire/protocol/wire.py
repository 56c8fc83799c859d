"""Serialization of a ComposedMessage to and from its signed frames.

Layout of the frames following the delimiter:
    signature, header, parent_header, metadata, content

The header, parent header and metadata are JSON objects; the content is
any JSON value. The signature covers the last four frames, as serialized.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Sequence, Tuple

from .. import json
from . import fields
from .errors import DecodeError, EncodeError, MalformedFrames
from .message import ComposedMessage, MessageHeader
from .signature import SignatureEngine


def _check_finite(field: str, value: Any) -> None:

    # orjson writes NaN and infinities as null rather than refusing them,
    # which would change the value after it has been signed.

    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodeError(field, f"non-finite float {value!r} is not valid JSON")
    elif isinstance(value, dict):
        for item in value.values():
            _check_finite(field, item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_finite(field, item)


def _dumps(field: str, value: Any) -> bytes:
    _check_finite(field, value)
    try:
        return json.dumps(value)
    except json.EncodeError as exc:
        raise EncodeError(field, str(exc)) from exc


def _loads(field: str, data: bytes) -> Any:
    try:
        return json.loads(data)
    except json.DecodeError as exc:
        raise DecodeError(field, str(exc)) from exc


def _encode_header(field: str, header: MessageHeader) -> bytes:

    try:
        as_dict = header.to_dict()
    except AttributeError as exc:
        raise EncodeError(field, f"expected a MessageHeader, got {type(header).__name__}") from exc

    for key, value in as_dict.items():
        if not isinstance(value, str):
            raise EncodeError(field, f"{key} must be a string, got {type(value).__name__}")

    return _dumps(field, as_dict)


def _decode_header(field: str, data: bytes) -> MessageHeader:

    decoded = _loads(field, data)
    if not isinstance(decoded, dict):
        raise DecodeError(field, f"expected a JSON object, got {type(decoded).__name__}")

    # Missing keys are treated as empty strings, and unknown keys (a date,
    # a protocol version) are ignored.

    values: Dict[str, str] = {}
    for key in fields.HEADER_KEYS:
        value = decoded.get(key, "")
        if not isinstance(value, str):
            raise DecodeError(field, f"{key} must be a string, got {type(value).__name__}")
        values[key] = value

    return MessageHeader(**values)


def encode(message: ComposedMessage) -> Tuple[bytes, bytes, bytes, bytes]:
    """Return the serialized header, parent_header, metadata and content."""

    header = _encode_header(fields.HEADER, message.header)
    parent_header = _encode_header(fields.PARENT_HEADER, message.parent_header)

    metadata = message.metadata
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise EncodeError(fields.METADATA, f"expected a mapping, got {type(metadata).__name__}")
    metadata = _dumps(fields.METADATA, metadata)

    content = _dumps(fields.CONTENT, message.content)

    return (header, parent_header, metadata, content)


def decode(frames: Sequence[bytes]) -> ComposedMessage:
    """Inverse of :func:`encode`. No partial message is ever returned."""

    header_b, parent_b, metadata_b, content_b = frames

    header = _decode_header(fields.HEADER, header_b)
    parent_header = _decode_header(fields.PARENT_HEADER, parent_b)

    metadata = _loads(fields.METADATA, metadata_b)
    if not isinstance(metadata, dict):
        raise DecodeError(fields.METADATA, f"expected a JSON object, got {type(metadata).__name__}")

    content = _loads(fields.CONTENT, content_b)

    return ComposedMessage(header, parent_header, metadata, content)


def pack(message: ComposedMessage, signer: SignatureEngine) -> Tuple[bytes, ...]:
    """Encode and sign *message*; the signature is the first frame."""

    signed = encode(message)
    return (signer.sign(signed),) + signed


def unpack(frames: Sequence[bytes], signer: SignatureEngine) -> ComposedMessage:
    """ Verify and decode the five frames following the delimiter. The
        signature is checked before anything is deserialized.
    """

    if len(frames) < fields.FRAME_COUNT:
        raise MalformedFrames(f"expected {fields.FRAME_COUNT} frames, got {len(frames)}")

    signature = frames[0]
    signed = tuple(frames[1:fields.FRAME_COUNT])

    signer.verify(signature, signed)
    return decode(signed)
