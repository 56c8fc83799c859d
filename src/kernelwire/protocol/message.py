""" Structured representation of a kernel message, as seen by application
    code once the wire framing and signature have been dealt with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from . import fields


@dataclass(frozen=True)
class MessageHeader:
    """ The :class:`MessageHeader` identifies a single message and the
        conversation it belongs to. The *msg_id* is unique to one message
        and is never changed once assigned; the *session* and *username*
        identify the client conversation, and are carried unchanged from
        a request to any replies generated for it.

        A root message, one not sent in response to anything, has a parent
        header where every field is an empty string; that is the default
        for a bare :class:`MessageHeader`.
    """

    msg_id: str = ""
    username: str = ""
    session: str = ""
    msg_type: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in fields.HEADER_KEYS}


@dataclass
class ComposedMessage:
    """ A message in the high-level form used by application logic.

        :ivar header: The :class:`MessageHeader` for this message.
        :ivar parent_header: The header of the message this one responds to.
        :ivar metadata: A dictionary of arbitrary JSON-compatible values.
        :ivar content: Any JSON-compatible value; its meaning is defined by
            the message type, and is not interpreted here.
    """

    header: MessageHeader = field(default_factory=MessageHeader)
    parent_header: MessageHeader = field(default_factory=MessageHeader)
    metadata: Dict[str, Any] = field(default_factory=dict)
    content: Any = None

    @property
    def msg_type(self) -> str:
        return self.header.msg_type

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
