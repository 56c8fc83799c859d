"""Session layer: receipt of inbound messages and dispatch of replies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..protocol import builder, wire
from ..protocol.message import ComposedMessage
from ..protocol.signature import SignatureEngine
from .base import Transport
from .zmq.framing import split_frames, to_wire_frames


logger = logging.getLogger(__name__)


class Dispatcher:
    """ Frame, sign and send outgoing messages. The *log* is any object
        with a logging-style ``debug`` method; each sent message is logged
        at debug level with its type and content. Problems with the log
        never interfere with sending.
    """

    def __init__(self, log=None):
        self.log = log if log is not None else logger


    def _record(self, message: ComposedMessage) -> None:
        try:
            self.log.debug("<-- %s", message.msg_type)
            self.log.debug("%r", message.content)
        except Exception:
            pass


    def _send(self, transport: Transport, identities, signer: SignatureEngine, message: ComposedMessage) -> Tuple[bytes, ...]:

        # Encoding and signing happen before anything touches the transport;
        # a failure there leaves nothing partially sent.

        frames = to_wire_frames(identities, wire.pack(message, signer))
        transport.send_multipart(frames)
        self._record(message)
        return frames


    def send(self, receipt: "MessageReceipt", message: ComposedMessage) -> Tuple[bytes, ...]:
        """ Send *message* back to the originator of *receipt*, using its
            routing identities, transport, and signing key. The frames as
            sent are returned.
        """

        return self._send(receipt.transport, receipt.identities, receipt.signer, message)


    def publish(self, transport: Transport, signer: SignatureEngine, message: ComposedMessage, topic: Optional[bytes] = None) -> Tuple[bytes, ...]:
        """ Broadcast *message* on a PUB *transport*. The *topic* is the
            single identity frame; it defaults to the message type.
        """

        if topic is None:
            topic = message.msg_type.encode()

        return self._send(transport, (topic,), signer, message)


# end of class Dispatcher


default_dispatcher = Dispatcher()


@dataclass
class MessageReceipt:
    """ A received message along with everything needed to reply to it: the
        routing *identities* that prefixed it, the *transport* it arrived
        on, and the *signer* holding the shared key. One receipt exists per
        inbound message, for the duration of a request/reply cycle.
    """

    message: ComposedMessage
    identities: Tuple[bytes, ...]
    transport: Transport
    signer: SignatureEngine = field(default_factory=SignatureEngine)
    dispatcher: Dispatcher = field(default=default_dispatcher, repr=False)

    @property
    def key(self) -> bytes:
        return self.signer.key

    def send(self, message: ComposedMessage) -> Tuple[bytes, ...]:
        return self.dispatcher.send(self, message)

    def reply(self, msg_type: str, content: Any = None, metadata: Optional[Dict[str, Any]] = None) -> ComposedMessage:
        """ Build a response of type *msg_type* to the received message and
            send it. The response is returned.
        """

        message = builder.response(msg_type, self.message, content, metadata)
        self.send(message)
        return message


def from_frames(parts, transport: Transport, signer: SignatureEngine, dispatcher: Optional[Dispatcher] = None) -> MessageReceipt:
    """ Interpret an already-received multipart message. Raises
        :class:`MalformedFrames`, :class:`InvalidSignature`, or
        :class:`DecodeError`; the message must not be replied to in any
        of those cases.
    """

    identities, signed = split_frames(parts)
    message = wire.unpack(signed, signer)

    if dispatcher is None:
        dispatcher = default_dispatcher

    return MessageReceipt(message, identities, transport, signer, dispatcher)


def receive(transport: Transport, signer: SignatureEngine, dispatcher: Optional[Dispatcher] = None) -> MessageReceipt:
    """Block until the next message arrives on *transport*, and decode it."""

    parts = transport.recv_multipart()
    return from_frames(parts, transport, signer, dispatcher)
