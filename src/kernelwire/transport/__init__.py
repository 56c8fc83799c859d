"""Transport layer: ZeroMQ framing and the request/reply session."""

from .base import Transport
from .zmq import framing
from . import session

from .session import Dispatcher, MessageReceipt, receive
