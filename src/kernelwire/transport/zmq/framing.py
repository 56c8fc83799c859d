"""ZMQ multipart framing for kernel messages.

Request/Reply (ROUTER<->DEALER), and publish (PUB/SUB)
    identity..., <IDS|MSG>, signature, header, parent_header, metadata, content

ROUTER sockets prepend one identity frame per hop; a PUB socket uses a single
identity frame as the subscription topic. The identities are opaque and are
echoed back verbatim to route a reply.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import zmq

from ...protocol import fields
from ...protocol.errors import MalformedFrames


def _as_bytes(part) -> bytes:
    if isinstance(part, bytes):
        return part
    if isinstance(part, zmq.Frame):
        return part.bytes
    return bytes(part)


def split_frames(parts: Sequence) -> Tuple[Tuple[bytes, ...], Tuple[bytes, ...]]:
    """ Split a received multipart message into its routing identities and
        the five frames that follow the delimiter. Any frames beyond those
        five are ignored.
    """

    parts = [_as_bytes(part) for part in parts]

    for index, part in enumerate(parts):
        if part == fields.DELIMITER:
            break
    else:
        raise MalformedFrames(f"no {fields.DELIMITER!r} delimiter in {len(parts)} frames")

    identities = tuple(parts[:index])
    signed = tuple(parts[index + 1:index + 1 + fields.FRAME_COUNT])

    if len(signed) < fields.FRAME_COUNT:
        raise MalformedFrames(
            f"expected {fields.FRAME_COUNT} frames after the delimiter, got {len(signed)}"
        )

    return identities, signed


def to_wire_frames(identities: Sequence[bytes], signed: Sequence[bytes]) -> Tuple[bytes, ...]:
    """Inverse of :func:`split_frames`."""

    if len(signed) != fields.FRAME_COUNT:
        raise ValueError(f"expected {fields.FRAME_COUNT} signed frames, got {len(signed)}")

    return tuple(identities) + (fields.DELIMITER,) + tuple(signed)
