""" Key configuration. A kernel learns its signing key, signature scheme,
    and socket addresses from a JSON connection file written by whatever
    launched it; this module reads that file.
"""

import os
from dataclasses import dataclass

from . import json
from .protocol import fields
from .protocol.errors import ConfigurationError
from .protocol.signature import SignatureEngine


environment_variable = 'KERNELWIRE_CONNECTION_FILE'

channels = ('shell', 'iopub', 'stdin', 'control', 'hb')
transports = ('tcp', 'ipc')


@dataclass(frozen=True)
class Connection:
    """ The contents of a connection file. The *key* is the shared secret
        used to sign every message on every channel; it may be empty, in
        which case messages are neither signed nor verified.
    """

    key: bytes = b''
    signature_scheme: str = fields.DEFAULT_SIGNATURE_SCHEME
    transport: str = 'tcp'
    ip: str = '127.0.0.1'
    shell_port: int = 0
    iopub_port: int = 0
    stdin_port: int = 0
    control_port: int = 0
    hb_port: int = 0


    def address(self, channel):
        """ Return the ZeroMQ endpoint for the named *channel*, for example
            'tcp://127.0.0.1:5555' for the 'shell' channel, or
            'ipc://kernel-1234-5555' over the ipc transport.
        """

        if channel not in channels:
            raise ValueError('unknown channel: ' + repr(channel))

        port = getattr(self, channel + '_port')

        # An ipc endpoint is a filesystem path; the ip field is the path
        # prefix, and each channel gets its own suffix.

        if self.transport == 'ipc':
            return "ipc://%s-%d" % (self.ip, port)

        return "%s://%s:%d" % (self.transport, self.ip, port)


    def signer(self):
        return SignatureEngine.from_scheme(self.key, self.signature_scheme)


def parse(raw):
    """ Build a :class:`Connection` from the decoded JSON of a connection
        file. Keys not understood here are ignored.
    """

    if not isinstance(raw, dict):
        raise ConfigurationError('connection info must be a JSON object')

    arguments = dict()

    key = raw.get('key', '')
    if isinstance(key, str):
        key = key.encode()
    elif not isinstance(key, bytes):
        raise ConfigurationError('key must be a string')
    arguments['key'] = key

    for name in ('signature_scheme', 'transport', 'ip'):
        try:
            value = raw[name]
        except KeyError:
            continue

        if not isinstance(value, str):
            raise ConfigurationError(name + ' must be a string')
        arguments[name] = value

    for channel in channels:
        name = channel + '_port'
        try:
            value = raw[name]
        except KeyError:
            continue

        try:
            arguments[name] = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(name + ' must be an integer') from exc

    if arguments.get('transport', 'tcp') not in transports:
        raise ConfigurationError('unsupported transport: ' + repr(arguments['transport']))

    connection = Connection(**arguments)

    # Validate the scheme now, rather than on first use.
    connection.signer()

    return connection


def load(path=None):
    """ Read the connection file at *path*. If no path is specified, the
        file named by the KERNELWIRE_CONNECTION_FILE environment variable
        is read instead.
    """

    if path is None:
        try:
            path = os.environ[environment_variable]
        except KeyError:
            raise ConfigurationError('no connection file specified, and ' + environment_variable + ' is not set')

    try:
        with open(path, 'rb') as connection_file:
            contents = connection_file.read()
    except OSError as exc:
        raise ConfigurationError('cannot read connection file ' + repr(path) + ': ' + str(exc)) from exc

    try:
        raw = json.loads(contents)
    except json.DecodeError as exc:
        raise ConfigurationError('connection file ' + repr(path) + ' is not valid JSON') from exc

    return parse(raw)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
