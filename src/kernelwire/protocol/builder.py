"""Construction of outgoing messages."""

from __future__ import annotations

import dataclasses
import uuid
from typing import Any, Dict, Optional

from .errors import IdentityGenerationError
from .message import ComposedMessage, MessageHeader


def new_id() -> str:
    """ Return a new random (version 4) UUID in its canonical string form.
        This draws 122 random bits from the operating system.
    """

    # uuid4() reads os.urandom(), which raises NotImplementedError if no
    # randomness source is available, or OSError if reading from it fails.

    try:
        return str(uuid.uuid4())
    except (NotImplementedError, OSError) as exc:
        raise IdentityGenerationError("could not generate a message id") from exc


def new_message(msg_type: str, parent: ComposedMessage) -> ComposedMessage:
    """ Create a :class:`ComposedMessage` responding to *parent*. The
        session and username are carried over from the parent's header,
        and the parent's header becomes the new message's parent header.
        The caller is expected to fill in the metadata and content.
    """

    parent_header = dataclasses.replace(parent.header)

    header = MessageHeader(
        msg_id=new_id(),
        username=parent_header.username,
        session=parent_header.session,
        msg_type=msg_type,
    )

    return ComposedMessage(header=header, parent_header=parent_header)


def new_root(msg_type: str, session: str, username: str = "") -> ComposedMessage:
    """ Create a :class:`ComposedMessage` that is not a response to any
        other message; its parent header is left empty.
    """

    header = MessageHeader(
        msg_id=new_id(),
        username=username,
        session=session,
        msg_type=msg_type,
    )

    return ComposedMessage(header=header)


def response(msg_type: str, parent: ComposedMessage, content: Any = None, metadata: Optional[Dict[str, Any]] = None) -> ComposedMessage:
    """ Convenience wrapper around :func:`new_message` that also populates
        the content and metadata.
    """

    message = new_message(msg_type, parent)
    message.content = content
    if metadata is not None:
        message.metadata = dict(metadata)

    return message
