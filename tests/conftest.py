import pytest
import zmq

import kernelwire
from kernelwire.protocol.message import ComposedMessage, MessageHeader


class RecordingTransport:
    """ Stand-in for a socket: everything sent is kept, and received
        messages are handed out from a preloaded list.
    """

    def __init__(self, inbound=()):
        self.sent = list()
        self.inbound = list(inbound)

    def send_multipart(self, parts):
        self.sent.append(tuple(parts))

    def recv_multipart(self):
        return self.inbound.pop(0)


kernelwire.transport.Transport.register(RecordingTransport)


class RecordingLog:

    def __init__(self):
        self.records = list()

    def debug(self, format, *args):
        self.records.append(format % args)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def log():
    return RecordingLog()


@pytest.fixture
def signer():
    return kernelwire.SignatureEngine(b's3cr3t')


@pytest.fixture
def unsigned():
    return kernelwire.SignatureEngine(b'')


@pytest.fixture
def request_message():

    header = MessageHeader(msg_id='9f1c', username='alice', session='sess-1', msg_type='execute_request')
    message = ComposedMessage(header=header)
    message.metadata = {'trusted': True}
    message.content = {'code': 'print(1)', 'silent': False}

    return message


@pytest.fixture
def zmq_context():

    context = zmq.Context()
    yield context
    context.destroy(linger=0)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
