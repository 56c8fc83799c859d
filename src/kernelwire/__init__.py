""" Python implementation of the kernel messaging wire protocol. This
    includes decoding and verifying signed multipart messages received on a
    ZeroMQ socket, and building, signing, and sending replies routed back to
    the original requester.
"""

# Utility components.

from . import json

# Submodules used by multiple other components.

from . import protocol
from . import config

# Primary public-facing interfaces.

from . import transport
receive = transport.session.receive

from .protocol import ComposedMessage, MessageHeader, SignatureEngine
from .transport import Dispatcher, MessageReceipt

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
