import pytest
import zmq

from kernelwire.protocol.errors import MalformedFrames
from kernelwire.transport.zmq.framing import split_frames, to_wire_frames


delimiter = b'<IDS|MSG>'
signed = (b'sig', b'{"h":1}', b'{"p":2}', b'{"m":3}', b'{"c":4}')


def test_identities():

    identity_sets = list()
    identity_sets.append(())
    identity_sets.append((b'client',))
    identity_sets.append((b'\x00k\x8bEg', b'', b'router-2', b'{}', b'sig'))

    for identities in identity_sets:
        parts = identities + (delimiter,) + signed
        found_identities, found_signed = split_frames(parts)

        assert found_identities == identities
        assert found_signed == signed


def test_first_delimiter_wins():

    parts = (b'id',) + (delimiter,) + (delimiter,) + signed[1:]
    identities, found = split_frames(parts)

    assert identities == (b'id',)
    assert found == (delimiter,) + signed[1:]


def test_extra_frames_ignored():

    parts = (b'id', delimiter) + signed + (b'extra', b'more')
    identities, found = split_frames(parts)

    assert identities == (b'id',)
    assert found == signed


def test_missing_delimiter():

    for parts in ((), (b'id',), signed, (b'<IDS|MSG', b'x')):
        with pytest.raises(MalformedFrames):
            split_frames(parts)


def test_short_frames():

    for count in range(0, 5):
        parts = (b'id', delimiter) + signed[:count]
        with pytest.raises(MalformedFrames):
            split_frames(parts)


def test_zmq_frames():

    parts = [zmq.Frame(b'id'), zmq.Frame(delimiter)] + [zmq.Frame(part) for part in signed]
    identities, found = split_frames(parts)

    assert identities == (b'id',)
    assert found == signed
    assert all(isinstance(part, bytes) for part in found)


def test_to_wire_frames():

    parts = to_wire_frames((b'a', b'b'), signed)
    assert parts == (b'a', b'b', delimiter) + signed
    assert split_frames(parts) == ((b'a', b'b'), signed)

    with pytest.raises(ValueError):
        to_wire_frames((), signed[:4])


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
