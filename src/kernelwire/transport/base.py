"""Transport interface.

This is the (small) contract the session layer relies on. It lives outside
:mod:`kernelwire.protocol` so the protocol remains transport-agnostic.

A pyzmq socket satisfies the contract as-is, and is registered as such.
Callers are responsible for ensuring that at most one thread sends on (and
at most one thread receives from) a given transport at a time; interleaved
multipart sends corrupt the framing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

import zmq


class Transport(ABC):
    """Minimal contract for a multipart transport."""

    @abstractmethod
    def send_multipart(self, parts: Sequence[bytes]) -> None:
        """ Send *parts* as one message, flagging every part except the
            last with "more frames follow".
        """

    @abstractmethod
    def recv_multipart(self) -> List[bytes]:
        """Receive every part of the next message, in order."""


Transport.register(zmq.Socket)
